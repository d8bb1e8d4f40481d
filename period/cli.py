"""CLI entry point for period."""

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from period.commands.humanize import humanize_command
from period.commands.relative import shift_command
from period.commands.settings import config_command
from period.commands.spans import boundary_command, info_command

app = typer.Typer(
    name="period",
    help="Human-friendly relative dates and times",
    add_completion=False,
)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
) -> None:
    """Human-friendly relative dates and times."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
            force=True,
        )


@app.command(name="humanize")
def humanize(
    target: str,
    reference: str = typer.Option(None, "--reference", "-r", help="Reference timestamp (default: now)"),
) -> None:
    """Describe a timestamp relative to now, e.g. "3 hours ago"."""
    humanize_command(target, reference)


@app.command(name="ago")
def ago(
    amount: int,
    unit: str,
    reference: str = typer.Option(None, "--reference", "-r", help="Reference timestamp (default: now)"),
    date_only: bool = typer.Option(False, "--date", "-d", help="Print only the date"),
) -> None:
    """Print the moment AMOUNT UNIT before now."""
    shift_command(amount, unit, "ago", reference, date_only)


@app.command(name="from-now")
def from_now(
    amount: int,
    unit: str,
    reference: str = typer.Option(None, "--reference", "-r", help="Reference timestamp (default: now)"),
    date_only: bool = typer.Option(False, "--date", "-d", help="Print only the date"),
) -> None:
    """Print the moment AMOUNT UNIT after now."""
    shift_command(amount, unit, "from_now", reference, date_only)


@app.command(name="boundary")
def boundary(
    span: str,
    moment: str = typer.Option(None, "--at", help="Timestamp inside the span (default: now)"),
    end_only: bool = typer.Option(False, "--end", help="Print only the end of the span"),
) -> None:
    """Show the start and end of the day, week, month, quarter or year."""
    boundary_command(span, moment, end_only)


@app.command(name="info")
def info(
    day: str = typer.Argument(None, help="Date to describe (default: today)"),
) -> None:
    """Show calendar facts about a date."""
    info_command(day)


@app.command(name="config")
def config(
    init: bool = typer.Option(False, "--init", help="Create the config file with defaults"),
    assignment: str = typer.Option(None, "--set", help="Change a setting (KEY=VALUE)"),
) -> None:
    """Show or change your settings."""
    config_command(init, assignment)


if __name__ == "__main__":
    app()
