"""Exception hierarchy for the calculator and account components."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from checked_calculator.operations import OperationKind


class CalculatorError(RuntimeError):
    """Base class for every failure raised by this package."""


class ArithmeticOverflowError(CalculatorError, OverflowError):
    """Raised when a result cannot be represented in the operand type."""

    def __init__(
        self,
        message: str,
        *,
        kind: OperationKind | None = None,
        operands: tuple[int, ...] = (),
    ) -> None:
        """Initialise the overflow error with the failing operation context."""
        super().__init__(message)
        self.kind = kind
        self.operands = operands


class InvalidOperandError(CalculatorError, TypeError):
    """Raised when an operand is not a plain integer."""


class InvalidHistoryIndexError(CalculatorError, IndexError):
    """Raised when a replay targets a position that is not in history."""

    def __init__(self, index: object, size: int) -> None:
        """Initialise the error with the requested index and history size."""
        super().__init__(
            f"History index {index} is out of range for {size} recorded operation(s)",
        )
        self.index = index
        self.size = size


class HistoryConsistencyError(CalculatorError):
    """Raised when a stored operation no longer evaluates successfully."""


class CommandParseError(CalculatorError, ValueError):
    """Raised when a session command cannot be understood."""


class AccountError(CalculatorError):
    """Base class for ledger and reaction board failures."""


class VaultLockedError(AccountError):
    """Raised when withdrawing from a locked vault."""


class InsufficientBalanceError(AccountError):
    """Raised when a withdrawal exceeds the vault balance."""


class VaultExistsError(AccountError):
    """Raised when an authority opens a second vault."""


class PostExistsError(AccountError):
    """Raised when a post identifier is registered twice."""


class UnknownVaultError(AccountError, KeyError):
    """Raised when no vault is registered for an authority."""

    def __str__(self) -> str:
        """Render the message without the quoting added by KeyError."""
        return str(self.args[0]) if self.args else ""


class UnknownPostError(AccountError, KeyError):
    """Raised when reacting to a post that does not exist."""

    def __str__(self) -> str:
        """Render the message without the quoting added by KeyError."""
        return str(self.args[0]) if self.args else ""


class DuplicateReactionError(AccountError):
    """Raised when an author reacts to the same post twice."""


class MaxReactionsReachedError(AccountError):
    """Raised when a reaction counter is already at its maximum."""


__all__ = [
    "AccountError",
    "ArithmeticOverflowError",
    "CalculatorError",
    "CommandParseError",
    "DuplicateReactionError",
    "HistoryConsistencyError",
    "InsufficientBalanceError",
    "InvalidHistoryIndexError",
    "InvalidOperandError",
    "MaxReactionsReachedError",
    "PostExistsError",
    "UnknownPostError",
    "UnknownVaultError",
    "VaultExistsError",
    "VaultLockedError",
]
