"""Command session logic for driving a calculator from text."""

from __future__ import annotations

import shlex
from collections.abc import Iterable
from dataclasses import dataclass

from checked_calculator.base import BaseComponent
from checked_calculator.calculator import Calculator
from checked_calculator.errors import CommandParseError
from checked_calculator.operations import OperationKind

_HISTORY_COMMAND = "history"
_CLEAR_COMMAND = "clear"
_REPLAY_COMMAND = "replay"


@dataclass(slots=True)
class CommandOutcome:
    """Result of executing a single session command."""

    command: str
    value: int | None = None
    output: str = ""

    def format(self) -> str:
        """Return the text a front end should display for this outcome."""
        if self.value is not None:
            return str(self.value)
        return self.output


def parse_integer(token: str, *, name: str) -> int:
    """Parse a base-10 integer argument of a command."""
    try:
        return int(token, 10)
    except ValueError:
        message = f"{name} must be an integer, got {token!r}"
        raise CommandParseError(message) from None


class CalculatorSession(BaseComponent):
    """Parse textual commands and apply them to a :class:`Calculator`."""

    def __init__(self, calculator: Calculator | None = None) -> None:
        """Bind the session to an existing calculator or a fresh one."""
        super().__init__()
        self.calculator = calculator if calculator is not None else Calculator()

    def execute(self, command: str) -> CommandOutcome:
        """Run one command such as ``add 5 3`` or ``replay 0``.

        Raises:
            CommandParseError: If the command is malformed.
            CalculatorError: Propagated from the calculator on overflow or an
                invalid history index.

        """
        try:
            tokens = shlex.split(command)
        except ValueError as exc:
            message = f"Could not parse command {command!r}: {exc}"
            raise CommandParseError(message) from exc
        if not tokens:
            message = "Command cannot be empty"
            raise CommandParseError(message)

        verb, args = tokens[0].lower(), tokens[1:]
        self.logger.debug("Executing command", verb=verb, args=args)

        if verb == _HISTORY_COMMAND:
            self._expect_arity(verb, args, 0)
            return CommandOutcome(command, output=self.calculator.render_history())

        if verb == _CLEAR_COMMAND:
            self._expect_arity(verb, args, 0)
            self.calculator.clear()
            return CommandOutcome(command, output="History cleared.")

        if verb == _REPLAY_COMMAND:
            self._expect_arity(verb, args, 1)
            index = parse_integer(args[0], name="index")
            return CommandOutcome(command, value=self.calculator.replay(index))

        try:
            kind = OperationKind.parse(verb)
        except ValueError as exc:
            raise CommandParseError(str(exc)) from exc

        self._expect_arity(verb, args, 2)
        left = parse_integer(args[0], name="left operand")
        right = parse_integer(args[1], name="right operand")
        result = self.calculator.calculate(kind, left, right)
        return CommandOutcome(command, value=result)

    def run_script(self, commands: Iterable[str]) -> list[CommandOutcome]:
        """Execute commands in order, stopping at the first failure."""
        return [self.execute(command) for command in commands]

    @staticmethod
    def _expect_arity(verb: str, args: list[str], expected: int) -> None:
        """Ensure a command received exactly ``expected`` arguments."""
        if len(args) != expected:
            message = f"'{verb}' expects {expected} argument(s), got {len(args)}"
            raise CommandParseError(message)


__all__ = ["CalculatorSession", "CommandOutcome", "parse_integer"]
