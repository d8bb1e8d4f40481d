"""Ago and from-now commands for shifting the current time."""

import sys
from pathlib import Path

from rich.console import Console

from period import relative
from period.commands.inputs import normalize_unit, parse_timestamp
from period.config import date_style_of, load_config
from period.formatting import format_date, to_iso8601

console = Console()


def shift_command(
    amount: int,
    unit: str,
    direction: str,
    reference: str | None = None,
    date_only: bool = False,
    config_path: Path | None = None,
) -> None:
    """Print the moment ``amount`` units before or after the reference.

    Args:
        amount: Non-negative count of units.
        unit: Unit name, singular or plural.
        direction: "ago" or "from_now".
        reference: Optional starting timestamp; defaults to now.
        date_only: Print just the date, in the configured date_style.
        config_path: Path to config file. If None, uses default location.
    """
    try:
        date_style = date_style_of(load_config(config_path))
        unit_name = normalize_unit(unit)
        reference_dt = parse_timestamp(reference) if reference else None
        shift = getattr(relative, f"{unit_name}_{direction}")
        result = shift(amount, reference=reference_dt)
    except ValueError as e:
        console.print(f"[red]Error: {e}[/red]", style="bold")
        sys.exit(1)

    if date_only:
        console.print(format_date(result.as_date(), date_style))
    else:
        console.print(to_iso8601(result.as_datetime()))
