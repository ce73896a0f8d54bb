"""Shared pytest fixtures."""

from collections.abc import Iterator

import pytest

from checked_calculator.utils.logger import reset_logging
from checked_calculator.utils.settings import (
    reset_calculator_settings,
    reset_settings,
)


@pytest.fixture(autouse=True)
def _reset_global_state() -> Iterator[None]:
    """Ensure settings and logging singletons do not leak between tests."""
    reset_settings()
    reset_calculator_settings()
    reset_logging()
    yield
    reset_settings()
    reset_calculator_settings()
    reset_logging()
