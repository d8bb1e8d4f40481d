"""Humanize command for describing a timestamp relative to now."""

import sys

from rich.console import Console

from period.clock import now
from period.commands.inputs import parse_timestamp
from period.humanize import humanize

console = Console()


def humanize_command(target: str, reference: str | None = None) -> None:
    """Print how long ago (or how far ahead) a timestamp is."""
    try:
        target_dt = parse_timestamp(target)
        reference_dt = parse_timestamp(reference) if reference else now()
    except ValueError as e:
        console.print(f"[red]Error: {e}[/red]", style="bold")
        sys.exit(1)

    console.print(humanize(target_dt, reference_dt))
