"""CLI interface implementation using Typer."""

from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape

from checked_calculator.core import CalculatorSession, CommandOutcome
from checked_calculator.errors import CalculatorError
from checked_calculator.models.io import WelcomeMessage
from checked_calculator.operations import OperationKind
from checked_calculator.utils.settings import get_calculator_settings

from .base import BaseInterface

# Configure console for better test compatibility
# Force terminal mode even in non-TTY environments
console = Console(force_terminal=True, force_interactive=False, highlight=False)

_EXIT_COMMANDS = frozenset({"exit", "quit"})


class CLIInterface(BaseInterface):
    """Command Line Interface implementation."""

    def __init__(self) -> None:
        """Initialize the CLI interface."""
        super().__init__()  # Call BaseComponent's __init__ for logger initialization
        self.app = typer.Typer(
            name="checked-calculator",
            help="Checked 64-bit calculator with replayable history",
            add_completion=False,
        )
        self._setup_commands()

    @property
    def name(self) -> str:
        """Get the interface name.

        Returns:
            str: The interface name

        """
        return "CLI"

    def _setup_commands(self) -> None:
        """Set up CLI commands."""
        self.app.command(name="welcome")(self.welcome)
        self.app.command(name="eval")(self.evaluate)
        self.app.command(name="run")(self.run_commands)
        self.app.command(name="shell")(self.shell)

        # Add a callback that shows welcome when no command is specified
        self.app.callback(invoke_without_command=True)(self._main_callback)

    def _main_callback(self, ctx: typer.Context) -> None:  # pragma: no cover
        """Run when no subcommand is provided."""
        if ctx.invoked_subcommand is None:
            self.welcome()
            raise typer.Exit(0)

    def welcome(self) -> None:
        """Display welcome message."""
        msg = WelcomeMessage()
        console.print(msg.message)
        console.print(msg.hint)
        console.file.flush()

    def evaluate(
        self,
        operation: Annotated[
            str,
            typer.Argument(help="Operation to apply: add, subtract or multiply."),
        ],
        left: Annotated[
            int,
            typer.Argument(help="Left operand (use -- before negative numbers)."),
        ],
        right: Annotated[
            int,
            typer.Argument(help="Right operand."),
        ],
    ) -> None:
        """Evaluate a single checked operation."""
        try:
            kind = OperationKind.parse(operation)
        except ValueError as exc:
            raise typer.BadParameter(str(exc), param_hint="OPERATION") from exc

        session = CalculatorSession()
        try:
            result = session.calculator.calculate(kind, left, right)
        except CalculatorError as exc:
            self._handle_calculator_error(exc)
            return

        console.print(f"{left} {kind.symbol} {right} = {result}")
        console.file.flush()

    def run_commands(
        self,
        commands: Annotated[
            list[str],
            typer.Argument(
                help="Quoted commands to run in order, e.g. 'add 5 3' 'replay 0'.",
                metavar="COMMAND...",
            ),
        ],
        show_history: Annotated[
            bool,
            typer.Option(
                "--show-history",
                help="Print the recorded history after the last command.",
            ),
        ] = False,
    ) -> None:
        """Run a sequence of commands against one calculator session."""
        self.logger.info("Running command script", count=len(commands))
        session = CalculatorSession()

        for command in commands:
            try:
                outcome = session.execute(command)
            except CalculatorError as exc:
                self._handle_calculator_error(exc, command=command)
                return
            self._print_outcome(outcome)

        if show_history:
            console.rule("History")
            console.print(session.calculator.render_history(), end="")
        console.file.flush()

    def shell(self) -> None:
        """Start an interactive session reading one command per line."""
        settings = get_calculator_settings()
        session = CalculatorSession()
        self.logger.info("Starting interactive shell")

        while True:
            try:
                line = console.input(settings.prompt)
            except (EOFError, KeyboardInterrupt):
                console.print()
                break

            command = line.strip()
            if not command:
                continue
            if command.lower() in _EXIT_COMMANDS:
                break

            try:
                outcome = session.execute(command)
            except CalculatorError as exc:
                self.logger.error("Command failed", command=command, error=str(exc))
                console.print(f"[red]{escape(str(exc))}[/red]")
                continue
            self._print_outcome(outcome)

        if settings.show_history_on_exit:
            console.rule("History")
            console.print(session.calculator.render_history(), end="")
        console.file.flush()

    def _print_outcome(self, outcome: CommandOutcome) -> None:
        """Print the visible part of a command outcome."""
        text = outcome.format()
        if text:
            console.print(text, end="" if text.endswith("\n") else "\n")

    def _handle_calculator_error(
        self,
        exc: CalculatorError,
        *,
        command: str | None = None,
    ) -> None:
        """Log a calculator failure and exit."""
        console.print(f"[red]{escape(str(exc))}[/red]")
        console.file.flush()
        self.logger.error("Calculator error", command=command, error=str(exc))
        raise typer.Exit(1) from exc

    def run(self) -> None:
        """Run the CLI interface."""
        # Let Typer handle the command parsing
        self.app()


def main() -> None:
    """Console script entry point."""
    CLIInterface().run()
