"""Checked 64-bit integer calculator with a replayable operation history."""

from checked_calculator.calculator import Calculator
from checked_calculator.core import CalculatorSession, CommandOutcome
from checked_calculator.errors import (
    ArithmeticOverflowError,
    CalculatorError,
    CommandParseError,
    HistoryConsistencyError,
    InvalidHistoryIndexError,
)
from checked_calculator.integers import I64_MAX, I64_MIN, U64_MAX
from checked_calculator.operations import Operation, OperationKind

__all__ = [
    "I64_MAX",
    "I64_MIN",
    "U64_MAX",
    "ArithmeticOverflowError",
    "Calculator",
    "CalculatorError",
    "CalculatorSession",
    "CommandOutcome",
    "CommandParseError",
    "HistoryConsistencyError",
    "InvalidHistoryIndexError",
    "Operation",
    "OperationKind",
]
