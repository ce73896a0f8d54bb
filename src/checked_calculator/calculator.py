"""Checked calculator with an append-only operation history."""

from __future__ import annotations

from checked_calculator.base import BaseComponent
from checked_calculator.errors import (
    ArithmeticOverflowError,
    HistoryConsistencyError,
    InvalidHistoryIndexError,
)
from checked_calculator.operations import Operation, OperationKind


class Calculator(BaseComponent):
    """Perform checked i64 arithmetic and record every successful operation.

    History order is the order of successful completions, replays included.
    Indices stay valid until :meth:`clear` is called. Failed operations are
    never recorded.
    """

    def __init__(self) -> None:
        """Create a calculator with an empty history."""
        super().__init__()
        self._history: list[Operation] = []

    def __len__(self) -> int:
        """Return the number of recorded operations."""
        return len(self._history)

    @property
    def history(self) -> tuple[Operation, ...]:
        """Return a read-only snapshot of the recorded operations."""
        return tuple(self._history)

    def add(self, x: int, y: int) -> int:
        """Return ``x + y`` and record it, raising on overflow."""
        return self.calculate(OperationKind.ADDITION, x, y)

    def subtract(self, x: int, y: int) -> int:
        """Return ``x - y`` and record it, raising on overflow."""
        return self.calculate(OperationKind.SUBTRACTION, x, y)

    def multiply(self, x: int, y: int) -> int:
        """Return ``x * y`` and record it, raising on overflow."""
        return self.calculate(OperationKind.MULTIPLICATION, x, y)

    def calculate(self, kind: OperationKind, x: int, y: int) -> int:
        """Evaluate ``kind`` on the operands and append it to history.

        Raises:
            ArithmeticOverflowError: If the result does not fit in an i64.
                History is left unchanged.
            InvalidOperandError: If an operand is not a plain integer.

        """
        try:
            result = kind.evaluate(x, y)
        except ArithmeticOverflowError as exc:
            self.logger.warning(
                "Operation overflowed",
                kind=kind.value,
                left=x,
                right=y,
                error=str(exc),
            )
            raise

        self._history.append(Operation(x, y, kind))
        self.logger.debug(
            "Operation recorded",
            kind=kind.value,
            left=x,
            right=y,
            result=result,
            index=len(self._history) - 1,
        )
        return result

    def render_history(self) -> str:
        """Render every recorded operation as ``<index>: <expr> = <result>``.

        Returns an empty string when history is empty.
        """
        lines: list[str] = []
        for index, operation in enumerate(self._history):
            try:
                result = operation.evaluate()
            except ArithmeticOverflowError as exc:
                message = (
                    f"Recorded operation {index} ({operation.describe()}) "
                    "failed to re-evaluate"
                )
                raise HistoryConsistencyError(message) from exc
            lines.append(f"{index}: {operation.describe()} = {result}\n")
        return "".join(lines)

    def replay(self, index: int) -> int:
        """Re-run the operation at ``index`` and append it as a new entry.

        Raises:
            InvalidHistoryIndexError: If ``index`` is not a valid position.
            ArithmeticOverflowError: If the stored operation fails to
                evaluate. History is left unchanged in both cases.

        """
        valid_type = isinstance(index, int) and not isinstance(index, bool)
        if not valid_type or not 0 <= index < len(self._history):
            self.logger.warning(
                "Replay index out of range",
                index=index,
                size=len(self._history),
            )
            raise InvalidHistoryIndexError(index, len(self._history))

        operation = self._history[index]
        try:
            result = operation.evaluate()
        except ArithmeticOverflowError as exc:
            self.logger.warning("Replay overflowed", index=index, error=str(exc))
            raise

        self._history.append(operation)
        self.logger.debug(
            "Operation replayed",
            source_index=index,
            index=len(self._history) - 1,
            result=result,
        )
        return result

    def clear(self) -> None:
        """Remove every recorded operation."""
        self.logger.debug("History cleared", removed=len(self._history))
        self._history.clear()


__all__ = ["Calculator"]
