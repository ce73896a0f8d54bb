"""Tests for the command session."""

import pytest

from checked_calculator.calculator import Calculator
from checked_calculator.core import CalculatorSession, CommandOutcome, parse_integer
from checked_calculator.errors import (
    ArithmeticOverflowError,
    CommandParseError,
    InvalidHistoryIndexError,
)
from checked_calculator.integers import I64_MAX


class TestCalculatorSession:
    """Test command parsing and execution."""

    def test_session_creates_calculator(self) -> None:
        """A session without a calculator creates its own."""
        session = CalculatorSession()

        assert isinstance(session.calculator, Calculator)

    def test_session_uses_given_calculator(self) -> None:
        """A session drives the calculator it was given."""
        calc = Calculator()
        session = CalculatorSession(calc)

        assert session.calculator is calc
        session.execute("add 1 2")
        assert len(calc) == 1

    @pytest.mark.parametrize(
        ("command", "expected"),
        [
            ("add 5 3", 8),
            ("subtract 10 2", 8),
            ("multiply -4 5", -20),
            ("+ 1 1", 2),
            ("sub 1 3", -2),
            ("MUL 6 7", 42),
        ],
    )
    def test_arithmetic_commands(self, command: str, expected: int) -> None:
        """Operator commands return the computed value."""
        outcome = CalculatorSession().execute(command)

        assert outcome == CommandOutcome(command, value=expected)
        assert outcome.format() == str(expected)

    def test_history_replay_and_clear(self) -> None:
        """History, replay and clear commands map to calculator calls."""
        session = CalculatorSession()
        outcomes = session.run_script(
            ["add 5 3", "subtract 10 2", "replay 0", "history"],
        )

        assert outcomes[2].value == 8
        assert outcomes[3].output == "0: 5 + 3 = 8\n1: 10 - 2 = 8\n2: 5 + 3 = 8\n"

        cleared = session.execute("clear")
        assert cleared.output == "History cleared."
        assert session.execute("history").format() == ""

    @pytest.mark.parametrize(
        "command",
        [
            "",
            "   ",
            "divide 4 2",
            "add 1",
            "add 1 2 3",
            "add one 2",
            "replay",
            "replay x",
            "history now",
            "add '1 2",
        ],
    )
    def test_malformed_commands(self, command: str) -> None:
        """Malformed commands raise a parse error without side effects."""
        session = CalculatorSession()

        with pytest.raises(CommandParseError):
            session.execute(command)

        assert len(session.calculator) == 0

    def test_calculator_errors_propagate(self) -> None:
        """Overflow and invalid-index errors reach the caller."""
        session = CalculatorSession()

        with pytest.raises(ArithmeticOverflowError):
            session.execute(f"add {I64_MAX} 1")
        with pytest.raises(InvalidHistoryIndexError):
            session.execute("replay 0")

    def test_run_script_stops_at_first_failure(self) -> None:
        """Commands after a failing one are not executed."""
        session = CalculatorSession()

        with pytest.raises(InvalidHistoryIndexError):
            session.run_script(["add 1 1", "replay 5", "add 2 2"])

        assert session.calculator.render_history() == "0: 1 + 1 = 2\n"


def test_parse_integer_rejects_non_integers() -> None:
    """Only base-10 integers are accepted."""
    assert parse_integer("-12", name="left") == -12
    with pytest.raises(CommandParseError, match="left must be an integer"):
        parse_integer("1.5", name="left")
