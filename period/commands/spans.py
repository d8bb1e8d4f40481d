"""Boundary and info commands for calendar spans and facts."""

import sys
from pathlib import Path

from rich.console import Console
from rich.table import Table

from period.boundaries import span_bounds
from period.commands.inputs import parse_day, parse_timestamp
from period.clock import now
from period.config import date_style_of, load_config, week_start_index
from period.dates import day_of_year, days_in_month, is_weekend, quarter_of, week_of_year
from period.formatting import format_date, to_iso8601, to_long_date
from period.models import SPAN_NAMES

console = Console()


def boundary_command(
    span: str,
    moment: str | None = None,
    end_only: bool = False,
    config_path: Path | None = None,
) -> None:
    """Print the start and end of the span containing a moment."""
    if span not in SPAN_NAMES:
        console.print(f"[red]Unknown span '{span}'. Use one of: {', '.join(SPAN_NAMES)}[/red]", style="bold")
        sys.exit(1)

    try:
        week_start = week_start_index(load_config(config_path))
        moment_dt = parse_timestamp(moment) if moment else now()
        start, end = span_bounds(moment_dt, span, week_start)  # type: ignore[arg-type]
    except (ValueError, OverflowError) as e:
        console.print(f"[red]Error: {e}[/red]", style="bold")
        sys.exit(1)

    if end_only:
        console.print(to_iso8601(end))
        return

    console.print(f"[cyan]start[/cyan] {to_iso8601(start)}")
    console.print(f"[cyan]end[/cyan]   {to_iso8601(end)}")


def info_command(day: str | None = None, config_path: Path | None = None) -> None:
    """Print a table of calendar facts about a date."""
    try:
        date_style = date_style_of(load_config(config_path))
        target = parse_day(day)
    except ValueError as e:
        console.print(f"[red]Error: {e}[/red]", style="bold")
        sys.exit(1)

    table = Table(title=to_long_date(target))
    table.add_column("Fact", style="cyan")
    table.add_column("Value", justify="right")

    table.add_row("Date", format_date(target, date_style))
    table.add_row("Weekday", f"{target:%A}")
    table.add_row("Weekend", "yes" if is_weekend(target) else "no")
    table.add_row("Day of year", str(day_of_year(target)))
    table.add_row("ISO week", str(week_of_year(target)))
    table.add_row("Quarter", f"Q{quarter_of(target)}")
    table.add_row("Days in month", str(days_in_month(target)))

    console.print(table)
