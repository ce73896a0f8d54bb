"""Base component shared by the calculator building blocks."""

from __future__ import annotations

from typing import Any

from checked_calculator.utils.logger import get_logger


class BaseComponent:
    """Provide a structlog logger bound to the concrete component name."""

    def __init__(self) -> None:
        """Initialise the component logger."""
        self._logger = get_logger(
            self.__class__.__module__,
            component=self.__class__.__name__,
        )

    @property
    def logger(self) -> Any:
        """Return the bound logger for this component."""
        return self._logger
