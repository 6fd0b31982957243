"""Rich renderer for payroll results.

Transforms SDK output into formatted Rich tables.
"""

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich import box

from paydesk.sdk import SalaryResult, calculate_salary


_BAND_LABELS = {
    "reduced": "Under 40h (0.7x)",
    "standard": "Standard 40h",
    "overtime": "Overtime (1.5x)",
    "heavy_overtime": "Heavy overtime (3x)",
}


def render_salary_result(console: Console, result: SalaryResult) -> None:
    """Render a salary result as a Rich table.

    Args:
        console: Rich Console instance
        result: SDK output from compute_pay()
    """
    table = Table(title="Calculation Result", box=box.SIMPLE, show_header=False)
    table.add_column("field", style="dim")
    table.add_column("value", justify="right")

    table.add_row("Weekly hours", f"{result.hours:.2f}")
    table.add_row("Hourly rate", f"{result.hourly_rate:.2f}")
    table.add_row("Pay band", _BAND_LABELS[result.band.value])
    table.add_row("Gross pay", f"[bold]{result.salary:.2f}[/bold]")

    console.print(table)


def render_bands(console: Console, bands: list[dict], rate: float) -> None:
    """Render the pay band rules with example pay at the given rate.

    Args:
        console: Rich Console instance
        bands: SDK output from describe_bands()
        rate: Hourly rate used for the example column
    """
    table = Table(title=f"Pay Bands (example rate {rate:.2f}/h)", box=box.ROUNDED)
    table.add_column("Band")
    table.add_column("Hours")
    table.add_column("Rule")
    table.add_column("Example", justify="right")

    for band in bands:
        hours = band["example_hours"]
        pay = calculate_salary(hours, rate)
        table.add_row(
            _BAND_LABELS[band["band"].value],
            band["hours"],
            band["rule"],
            f"{hours:g}h = {pay:.2f}",
        )

    console.print(table)


def render_about(console: Console, version: str) -> None:
    """Render the about panel."""
    lines = [
        f"[bold]Pay Desk v{version}[/bold]",
        "Login gate and weekly payroll calculator",
        "",
        "Login: checks the administrator username and password,",
        "with three attempts before the program exits.",
        "Payroll: computes weekly gross pay from hours worked and hourly rate.",
    ]
    console.print(Panel("\n".join(lines), title="About", border_style="dim"))
