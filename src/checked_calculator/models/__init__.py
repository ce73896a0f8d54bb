"""Pydantic models shared by the interfaces."""

from .io import WelcomeMessage

__all__ = ["WelcomeMessage"]
