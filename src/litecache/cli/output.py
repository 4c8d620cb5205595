"""
Rich terminal output helpers for CLI.

Status messages go through Rich; cached values are echoed as plain JSON
so the output can be piped.
"""

import json
from typing import Any

import click
from rich.console import Console

# Console instance for all output
console = Console()


def format_value(value: Any) -> str:
    """Render a cached value as a single line of JSON."""
    return json.dumps(value, ensure_ascii=False)


def print_value(value: Any) -> None:
    """Print a cached value."""
    click.echo(format_value(value))


def print_error(message: str) -> None:
    """Print an error message."""
    console.print(f"[bold red]Error:[/] {message}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[bold green]Success:[/] {message}")


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[cyan]Info:[/] {message}")
