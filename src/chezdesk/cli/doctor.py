"""Diagnostics and template data commands."""

import typer

from .files import JSON_OPTION
from .helpers import bridge_session, emit_result


def register(app: typer.Typer) -> None:
    """Register the doctor and data commands with the app."""
    app.command()(doctor)
    app.command()(data)


def doctor(as_json: bool = JSON_OPTION):
    """Run chezmoi's own health checks."""
    with bridge_session() as bridge:
        result = bridge.doctor()
    emit_result(result, as_json)


def data(as_json: bool = JSON_OPTION):
    """Print the template data chezmoi knows about, as JSON text."""
    with bridge_session() as bridge:
        result = bridge.data()
    emit_result(result, as_json)
