"""Structured logging configuration using structlog.

Log output is rendered according to :class:`LoggingSettings`: JSON lines for
machines, a coloured console renderer for humans, or a plain key/value form.
Handlers are attached to the package logger only, so embedding applications
keep control of the root logger.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Any

import structlog

from checked_calculator.utils.settings import get_settings

if TYPE_CHECKING:
    from checked_calculator.utils.settings import LoggingSettings

PACKAGE_LOGGER_NAME = "checked_calculator"

_configured = False


def _select_renderer(log_format: str) -> Any:
    """Return the structlog renderer for the configured format."""
    if log_format == "json":
        return structlog.processors.JSONRenderer()
    if log_format == "console":
        return structlog.dev.ConsoleRenderer(colors=False)
    return structlog.processors.KeyValueRenderer(
        key_order=["timestamp", "level", "event"],
    )


def _build_handlers(settings: LoggingSettings) -> list[logging.Handler]:
    """Create the stderr handler and the optional file handler."""
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if settings.log_file_path:
        log_path = Path(settings.log_file_path)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))
    return handlers


def configure_logging(settings: LoggingSettings | None = None) -> None:
    """Configure structlog and the package's stdlib logger.

    Args:
        settings: Logging settings to apply. Defaults to the global settings.

    """
    global _configured  # noqa: PLW0603

    settings = settings or get_settings()
    level = getattr(logging, settings.log_level)

    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()
    for handler in _build_handlers(settings):
        handler.setFormatter(logging.Formatter("%(message)s"))
        package_logger.addHandler(handler)
    package_logger.setLevel(level)
    package_logger.propagate = False

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            _select_renderer(settings.log_format),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )
    _configured = True


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a structlog logger, configuring logging on first use."""
    if not _configured:
        configure_logging()
    logger = structlog.get_logger(name or PACKAGE_LOGGER_NAME)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


def reset_logging() -> None:
    """Forget the current configuration so the next logger reconfigures.

    This is mainly useful for testing.
    """
    global _configured  # noqa: PLW0603
    _configured = False
    structlog.reset_defaults()
