"""User-facing interfaces for the calculator."""

from .base import BaseInterface
from .cli import CLIInterface, main

__all__ = ["BaseInterface", "CLIInterface", "main"]
