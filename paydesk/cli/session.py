"""Interactive console session: login gate followed by the main menu.

Reads one line at a time from stdin. End of input never causes a read
loop to spin:
- during login it ends the program as a failed login
- at the menu (or inside the payroll prompts) it ends the session as exit
- at a "press Enter" pause it is ignored
"""

import logging
import sys
from typing import Callable, Optional, TextIO

import click
from rich.console import Console

from paydesk import __version__
from paydesk.sdk import (
    Credentials,
    DEFAULT_CREDENTIALS,
    LoginBuffers,
    LoginOutcome,
    LoginSession,
    LoginState,
    MenuOption,
    PayrollInputError,
    cleared_note,
    compute_pay,
    invalid_menu_message,
    outcome_message,
    parse_menu_choice,
    parse_number,
    validate_hours,
    validate_rate,
)
from .renderers import render_salary_result, render_about

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_FAILURE = 1


class InputExhaustedError(Exception):
    """Raised when the input stream has no more lines."""
    pass


class LineReader:
    """Prompted line input with the trailing newline stripped."""

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream if stream is not None else sys.stdin

    def read_line(self, prompt: str = "") -> str:
        """Show the prompt and read one line.

        Returns:
            The line without its terminator ("" for an empty line)

        Raises:
            InputExhaustedError: At end of input
        """
        if prompt:
            click.echo(prompt, nl=False)

        line = self.stream.readline()
        if line == "":
            click.echo()
            raise InputExhaustedError("No more input")

        return line.rstrip("\r\n")

    def pause(self, prompt: str = "Press Enter to return to the main menu...") -> None:
        """Wait for Enter. End of input just returns."""
        try:
            self.read_line(prompt)
        except InputExhaustedError:
            logger.debug("input ended at pause prompt")


class ConsoleSession:
    """Drives login and the main menu for one terminal user."""

    def __init__(
        self,
        credentials: Credentials = DEFAULT_CREDENTIALS,
        reader: Optional[LineReader] = None,
        console: Optional[Console] = None,
    ):
        self.credentials = credentials
        self.reader = reader or LineReader()
        self.console = console or Console(highlight=False)

    # --- Login ---

    def login(self) -> LoginSession:
        """Run login attempts until success, lockout, or end of input."""
        session = LoginSession(self.credentials)
        buffers = LoginBuffers()

        click.echo("=== System Login ===")
        click.echo()
        click.echo("Administrator login requires the correct username and password.")
        click.echo("Username must be letters only, password must be digits only.")
        click.echo()

        while not session.is_concluded:
            try:
                buffers.username = self.reader.read_line("Username: ")
                buffers.password = self.reader.read_line("Password: ")
            except InputExhaustedError:
                click.echo("Input ended before login completed.")
                session.lock_out()
                break

            outcome = session.attempt(buffers)
            self._report_outcome(outcome, buffers)

            if session.state == LoginState.IN_PROGRESS:
                click.echo(f"{session.attempts_remaining} attempt(s) remaining")
                click.echo()
            elif session.state == LoginState.LOCKED_OUT:
                click.echo("Too many failed attempts, the program will exit.")

        return session

    def _report_outcome(self, outcome: LoginOutcome, buffers: LoginBuffers) -> None:
        click.echo()
        if outcome == LoginOutcome.SUCCESS:
            click.echo(f"{outcome_message(outcome)}! Welcome, administrator {buffers.username}")
            return

        click.echo(f"Error: {outcome_message(outcome)}")
        note = cleared_note(outcome)
        if note:
            click.echo(note)

    # --- Payroll ---

    def _prompt_number(self, prompt: str, is_valid: Callable[[float], bool],
                       invalid_message: str) -> float:
        while True:
            text = self.reader.read_line(prompt)
            try:
                value = parse_number(text)
            except PayrollInputError:
                click.echo("Input must be a number!")
                continue

            if is_valid(value):
                return value
            click.echo(invalid_message)

    def run_payroll(self) -> None:
        """Prompt for hours and rate, then show the weekly pay.

        Raises:
            InputExhaustedError: If input ends during either prompt
        """
        click.echo()
        click.echo("=== Employee Pay Calculation ===")
        click.echo()

        hours = self._prompt_number(
            "Weekly hours worked (0-60): ",
            validate_hours,
            "Invalid input, weekly hours must be between 0 and 60!",
        )
        rate = self._prompt_number(
            "Hourly rate: ",
            validate_rate,
            "Hourly rate must be a positive number!",
        )

        click.echo()
        try:
            result = compute_pay(hours, rate)
        except PayrollInputError as e:
            click.echo(f"Error: {e}")
        else:
            render_salary_result(self.console, result)

        self.reader.pause()

    # --- Menu ---

    def show_about(self) -> None:
        click.echo()
        render_about(self.console, __version__)
        self.reader.pause()

    def _read_menu_choice(self) -> MenuOption:
        click.echo()
        click.echo("=== Main Menu ===")
        click.echo()
        click.echo("1. Pay calculation")
        click.echo("2. About")
        click.echo("0. Exit")
        click.echo()

        try:
            text = self.reader.read_line("Choose (0-2): ")
        except InputExhaustedError:
            logger.debug("input ended at menu prompt, treating as exit")
            return MenuOption.EXIT

        option = parse_menu_choice(text)
        if option == MenuOption.INVALID:
            click.echo(invalid_menu_message(text))
        return option

    def menu_loop(self) -> None:
        """Show the main menu until the user exits or input ends."""
        while True:
            option = self._read_menu_choice()

            if option == MenuOption.PAYROLL:
                try:
                    self.run_payroll()
                except InputExhaustedError:
                    click.echo("Input ended, calculation cancelled.")
                    option = MenuOption.EXIT
            elif option == MenuOption.ABOUT:
                self.show_about()

            if option == MenuOption.EXIT:
                click.echo()
                click.echo("Thank you for using Pay Desk!")
                return

    def run(self) -> int:
        """Run the full session.

        Returns:
            Process exit status: 0 after a normal exit, 1 if login failed
        """
        session = self.login()

        if session.state != LoginState.AUTHENTICATED:
            click.echo()
            click.echo("=== Session ended ===")
            return EXIT_FAILURE

        self.menu_loop()

        click.echo()
        click.echo("=== Session ended ===")
        return EXIT_SUCCESS
