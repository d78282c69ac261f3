"""Console output helpers for the CLI.

Human-facing messages go through rich; command output and JSON are
written unstyled so a front-end can read stdout directly.
"""

import json
from typing import Any

import typer
from rich.console import Console
from rich.markup import escape

console = Console(highlight=False, soft_wrap=True)
err_console = Console(stderr=True, highlight=False, soft_wrap=True)


def muted(message: str) -> None:
    console.print(f"[dim]{escape(message)}[/dim]")


def error(message: str) -> None:
    err_console.print(f"[red]✗[/red] {escape(message)}")


def raw(text: str, err: bool = False) -> None:
    """Echo captured tool output exactly as received."""
    typer.echo(text, nl=False, err=err)


def print_json(data: Any) -> None:
    typer.echo(json.dumps(data, indent=2))
