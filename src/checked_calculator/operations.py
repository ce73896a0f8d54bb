"""Operation kinds and recorded operations."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from checked_calculator.errors import ArithmeticOverflowError, InvalidOperandError
from checked_calculator.integers import checked_i64


class OperationKind(str, Enum):
    """Closed set of supported arithmetic operators."""

    ADDITION = "add"
    SUBTRACTION = "subtract"
    MULTIPLICATION = "multiply"

    @property
    def symbol(self) -> str:
        """Return the display symbol of the operator."""
        return _SYMBOLS[self]

    def evaluate(self, left: int, right: int) -> int:
        """Apply the operator with signed 64-bit overflow checking.

        Args:
            left: Left operand, a signed 64-bit integer.
            right: Right operand, a signed 64-bit integer.

        Returns:
            int: The exact result.

        Raises:
            InvalidOperandError: If an operand is not an integer.
            ArithmeticOverflowError: If an operand or the result falls
                outside the signed 64-bit range.

        """
        operands = (left, right)
        for operand in operands:
            if not isinstance(operand, int) or isinstance(operand, bool):
                message = (
                    f"Operand {operand!r} must be an integer, "
                    f"got {type(operand).__name__}"
                )
                raise InvalidOperandError(message)
            try:
                checked_i64(operand)
            except ArithmeticOverflowError as exc:
                message = f"Operand {exc}"
                raise ArithmeticOverflowError(
                    message,
                    kind=self,
                    operands=operands,
                ) from exc

        if self is OperationKind.ADDITION:
            result = left + right
        elif self is OperationKind.SUBTRACTION:
            result = left - right
        else:
            result = left * right

        try:
            return checked_i64(result)
        except ArithmeticOverflowError as exc:
            message = f"{left} {self.symbol} {right} overflows a signed 64-bit integer"
            raise ArithmeticOverflowError(
                message,
                kind=self,
                operands=operands,
            ) from exc

    @classmethod
    def parse(cls, token: str) -> OperationKind:
        """Resolve an operator name, alias or symbol into a kind."""
        normalised = token.strip().lower()
        try:
            return _ALIASES[normalised]
        except KeyError:
            valid = sorted(_ALIASES)
            message = f"Unknown operation: {token!r}. Must be one of {valid}"
            raise ValueError(message) from None


_SYMBOLS: dict[OperationKind, str] = {
    OperationKind.ADDITION: "+",
    OperationKind.SUBTRACTION: "-",
    OperationKind.MULTIPLICATION: "*",
}

_ALIASES: dict[str, OperationKind] = {
    "add": OperationKind.ADDITION,
    "+": OperationKind.ADDITION,
    "subtract": OperationKind.SUBTRACTION,
    "sub": OperationKind.SUBTRACTION,
    "-": OperationKind.SUBTRACTION,
    "multiply": OperationKind.MULTIPLICATION,
    "mul": OperationKind.MULTIPLICATION,
    "*": OperationKind.MULTIPLICATION,
}


@dataclass(frozen=True, slots=True)
class Operation:
    """A successfully evaluated request as stored in history."""

    left_operand: int
    right_operand: int
    kind: OperationKind

    def evaluate(self) -> int:
        """Re-evaluate the stored operands with the stored kind."""
        return self.kind.evaluate(self.left_operand, self.right_operand)

    def describe(self) -> str:
        """Return the expression without its result, e.g. ``5 + 3``."""
        return f"{self.left_operand} {self.kind.symbol} {self.right_operand}"


__all__ = ["Operation", "OperationKind"]
