"""Base class for user-facing interfaces."""

from __future__ import annotations

from abc import ABC, abstractmethod

from checked_calculator.base import BaseComponent


class BaseInterface(BaseComponent, ABC):
    """Abstract interface exposing a name and an entry point."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the interface name."""

    @abstractmethod
    def run(self) -> None:
        """Run the interface."""
