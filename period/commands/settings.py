"""Config command for viewing and changing settings."""

import sys
import tomllib
from pathlib import Path

from rich.console import Console
from rich.table import Table

from period.config import create_default_config, get_config_path, load_config, set_setting

console = Console()


def config_command(init: bool = False, assignment: str | None = None, config_path: Path | None = None) -> None:
    """Create, update or show the configuration file."""
    if config_path is None:
        config_path = get_config_path()

    if init:
        if config_path.exists():
            console.print(f"[yellow]Config already exists: {config_path}[/yellow]")
        else:
            create_default_config(config_path)
            console.print(f"[green]✓[/green] Config file created at {config_path} (permissions: 600)")

    if assignment:
        key, sep, value = assignment.partition("=")
        if not sep:
            console.print("[red]Expected KEY=VALUE[/red]", style="bold")
            sys.exit(1)
        try:
            set_setting(key.strip(), value.strip(), config_path)
        except ValueError as e:
            console.print(f"[red]Error: {e}[/red]", style="bold")
            sys.exit(1)
        console.print(f"[green]✓[/green] {key.strip()} = {value.strip().lower()}")

    table = Table(title="Settings")
    table.add_column("Key", style="cyan")
    table.add_column("Value")
    try:
        settings = load_config(config_path)
    except tomllib.TOMLDecodeError as e:
        console.print(f"[red]Error: config file is not valid TOML: {e}[/red]", style="bold")
        sys.exit(1)
    for key, value in sorted(settings.items()):
        table.add_row(key, str(value))
    console.print(table)
    console.print(f"[dim]Config: {config_path}[/dim]")
