#!/usr/bin/env python3
"""Generate CLI reference documentation from the typer app."""

import inspect
import sys
from pathlib import Path
from typing import Any

# Add parent directory to path to import period
sys.path.insert(0, str(Path(__file__).parent.parent))

from period.cli import app  # noqa: E402


def format_option(param_name: str, param: Any) -> str:
    """Format an option with its flags, help text and default."""
    flags = list(getattr(param, "param_decls", None) or [f"--{param_name.replace('_', '-')}"])
    line = "- " + ", ".join(f"`{flag}`" for flag in flags)

    if getattr(param, "help", None):
        line += f": {param.help}"

    default = getattr(param, "default", None)
    if default is not None and default is not False:
        line += f" (default: {default})"

    return line


def generate_command_doc(command_name: str, command_obj: Any) -> str:
    """Generate the markdown section for one command."""
    callback = command_obj.callback
    doc = (callback.__doc__ or "No description available.").strip()

    lines = [
        f"### {command_name}",
        "",
        doc,
        "",
        "**Usage:**",
        "",
        "```bash",
        f"uv run period {command_name}",
        "```",
        "",
    ]

    arguments = []
    options = []
    for param_name, param in inspect.signature(callback).parameters.items():
        if param.default is inspect.Parameter.empty:
            arguments.append(f"- `{param_name.upper()}` (required)")
        elif type(param.default).__name__ == "ArgumentInfo":
            arguments.append(f"- `{param_name.upper()}` (optional): {param.default.help}")
        elif hasattr(param.default, "help"):
            options.append(format_option(param_name, param.default))

    if arguments:
        lines.extend(["**Arguments:**", "", *arguments, ""])

    if options:
        lines.extend(["**Options:**", "", *options, ""])

    return "\n".join(lines)


def generate_cli_reference() -> str:
    """Generate the complete CLI reference document."""
    lines = [
        "---",
        "tags: [reference]",
        "---",
        "",
        "# CLI Commands Reference",
        "",
        "Complete reference for all period CLI commands and options.",
        "",
        "## Usage",
        "",
        "```bash",
        "uv run period [--verbose] [COMMAND] [OPTIONS]",
        "```",
        "",
        "## Global Options",
        "",
        "| Option | Description |",
        "|--------|-------------|",
        "| `--verbose`, `-v` | Show debug logging |",
        "| `--help` | Show help message and exit |",
        "",
        "## Commands",
        "",
    ]

    commands = sorted(
        app.registered_commands,
        key=lambda x: x.name or (x.callback.__name__ if x.callback else ""),
    )
    for command_obj in commands:
        command_name = command_obj.name or (command_obj.callback.__name__ if command_obj.callback else "unknown")
        lines.append(generate_command_doc(command_name, command_obj))
        lines.append("")

    return "\n".join(lines)


def main() -> None:
    """Generate and write CLI reference documentation."""
    output_path = Path(__file__).parent.parent / "docs" / "reference" / "cli-commands.md"
    output_path.parent.mkdir(parents=True, exist_ok=True)

    output_path.write_text(generate_cli_reference())
    print(f"Generated CLI reference at {output_path}")


if __name__ == "__main__":
    main()
