"""Pay Desk CLI - Login-gated weekly payroll calculator."""

import json

import click
from rich.console import Console

from paydesk import __version__
from paydesk.sdk import (
    compute_pay,
    configure_logging,
    describe_bands,
    load_credentials,
    MAX_HOURS,
    PayrollInputError,
    ProfileError,
)

from .config_commands import config as config_group
from .renderers import render_salary_result, render_bands, render_about
from .session import ConsoleSession


@click.group()
@click.version_option(version=__version__, prog_name="paydesk")
def cli():
    """Pay Desk - Login gate and weekly payroll calculator.

    Run 'paydesk run' for the interactive console. Login credentials
    are loaded from (in order):

    \b
    1. 'login' section of $PAYDESK_CONFIG_PATH/profile.yaml
    2. 'login' section of ~/.config/paydesk/profile.yaml (XDG default)
    3. Built-in administrator credentials

    Set LOG_LEVEL=DEBUG to trace login attempts and calculations.
    """
    pass


cli.add_command(config_group)


@cli.command("run")
@click.pass_context
def run(ctx):
    """Start the interactive console.

    Login allows three attempts. After a successful login the main menu
    offers the pay calculation and the about screen.

    Exits with status 1 if login fails, 0 when leaving from the menu.
    """
    try:
        credentials = load_credentials()
    except ProfileError as e:
        raise click.ClickException(str(e))

    status = ConsoleSession(credentials).run()
    ctx.exit(status)


@cli.command("salary")
@click.argument("hours", type=float)
@click.argument("rate", type=float)
@click.option("--format", "output_format", type=click.Choice(["text", "json"]),
              default="text", help="Output format.")
def salary(hours, rate, output_format):
    """Calculate weekly gross pay for HOURS worked at RATE per hour.

    \b
    Examples:
      paydesk salary 40 10              # 400.00
      paydesk salary 45 10              # 475.00
      paydesk salary 55 10 --format json
    """
    try:
        result = compute_pay(hours, rate)
    except PayrollInputError as e:
        raise click.ClickException(str(e))

    if output_format == "json":
        click.echo(json.dumps(result.model_dump(mode="json"), indent=2))
        return

    render_salary_result(Console(highlight=False), result)


@cli.command("bands")
@click.option("--rate", type=float, default=10.0, show_default=True,
              help="Hourly rate used for the example column.")
def bands(rate):
    """Show the pay bands and an example weekly pay for each."""
    try:
        # the largest example must stay finite at this rate
        compute_pay(MAX_HOURS, rate)
    except PayrollInputError as e:
        raise click.ClickException(str(e))

    render_bands(Console(highlight=False), describe_bands(), rate)


@cli.command("about")
def about():
    """Show information about Pay Desk."""
    render_about(Console(highlight=False), __version__)


def main():
    """Entry point for the CLI."""
    configure_logging()
    cli()


if __name__ == "__main__":
    main()
