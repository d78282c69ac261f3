"""Per-file chezmoi commands: diff, apply, add, forget, cat, source-path."""

from typing import Optional

import typer

from .helpers import bridge_session, emit_result

JSON_OPTION = typer.Option(
    False, "--json", help="Print stdout, stderr and success as JSON."
)


def register(app: typer.Typer) -> None:
    """Register file commands with the app."""
    app.command()(diff)
    app.command()(apply)
    app.command()(add)
    app.command()(forget)
    app.command()(cat)
    app.command()(source_path)
    app.command()(managed)


def diff(
    path: Optional[str] = typer.Argument(
        None, help="File relative to home, or absolute"
    ),
    as_json: bool = JSON_OPTION,
):
    """Show what apply would change in your home directory.

    Examples:
        chezdesk diff              # All managed files
        chezdesk diff .bashrc      # One file
    """
    with bridge_session() as bridge:
        result = bridge.diff(path)
    emit_result(result, as_json)


def apply(
    path: Optional[str] = typer.Argument(
        None, help="File to restore; all managed files when omitted"
    ),
    force: Optional[bool] = typer.Option(
        None,
        "--force/--no-force",
        help="Overwrite local changes without prompting (default from config).",
    ),
    as_json: bool = JSON_OPTION,
):
    """Restore files in your home directory from the source state."""
    with bridge_session() as bridge:
        result = bridge.apply(path, force=force)
    emit_result(result, as_json)


def add(
    path: str = typer.Argument(..., help="File to start managing"),
    as_json: bool = JSON_OPTION,
):
    """Copy a file from your home directory into the source state.

    Examples:
        chezdesk add .vimrc
        chezdesk add ~/.config/starship.toml
    """
    with bridge_session() as bridge:
        result = bridge.add(path)
    emit_result(result, as_json)


def forget(
    path: str = typer.Argument(..., help="File to stop managing"),
    force: Optional[bool] = typer.Option(
        None,
        "--force/--no-force",
        help="Do not ask for confirmation (default from config).",
    ),
    as_json: bool = JSON_OPTION,
):
    """Stop managing a file. The file itself stays in your home directory."""
    with bridge_session() as bridge:
        result = bridge.forget(path, force=force)
    emit_result(result, as_json)


def cat(
    path: str = typer.Argument(..., help="Managed file to print"),
    as_json: bool = JSON_OPTION,
):
    """Print the target contents of a managed file."""
    with bridge_session() as bridge:
        result = bridge.cat(path)
    emit_result(result, as_json)


def source_path(
    path: Optional[str] = typer.Argument(
        None, help="Managed file; the source directory when omitted"
    ),
    as_json: bool = JSON_OPTION,
):
    """Print the source directory or the source file of a target."""
    with bridge_session() as bridge:
        result = bridge.source_path(path)
    emit_result(result, as_json)


def managed(
    pattern: Optional[str] = typer.Option(
        None,
        "--filter",
        "-f",
        help="Only entries containing this text (case-insensitive).",
    ),
    as_json: bool = JSON_OPTION,
):
    """List managed entries, as chezmoi prints them.

    Examples:
        chezdesk managed
        chezdesk managed -f nvim
    """
    with bridge_session() as bridge:
        result = bridge.managed(pattern)
    emit_result(result, as_json)
