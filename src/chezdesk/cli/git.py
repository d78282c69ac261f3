"""Source repository commands for chezdesk CLI (git, stage, commit, sync)."""

from typing import List

import typer

from .files import JSON_OPTION
from .helpers import bridge_session, emit_result

# Everything after the first git argument is forwarded verbatim,
# including options chezdesk does not know
PASSTHROUGH_SETTINGS = {
    "ignore_unknown_options": True,
    "allow_interspersed_args": False,
}


def register(app: typer.Typer) -> None:
    """Register git commands with the app."""
    app.command(context_settings=PASSTHROUGH_SETTINGS)(git)
    app.command()(diff_git)
    app.command()(diff_cached)
    app.command()(stage)
    app.command()(commit)
    app.command()(push)
    app.command()(pull)


def git(
    args: List[str] = typer.Argument(..., help="Arguments passed to git"),
    as_json: bool = JSON_OPTION,
):
    """Run git in the chezmoi source directory.

    Options for chezdesk (like --json) go before the git arguments.

    Examples:
        chezdesk git status
        chezdesk git log --oneline -20
        chezdesk git --json diff --cached
    """
    with bridge_session() as bridge:
        result = bridge.git(list(args))
    emit_result(result, as_json)


def diff_git(
    source: str = typer.Argument(..., help="Path of the source file"),
    as_json: bool = JSON_OPTION,
):
    """Show unstaged changes of a source file."""
    with bridge_session() as bridge:
        result = bridge.diff_git(source)
    emit_result(result, as_json)


def diff_cached(
    source: str = typer.Argument(..., help="Path of the source file"),
    as_json: bool = JSON_OPTION,
):
    """Show staged changes of a source file."""
    with bridge_session() as bridge:
        result = bridge.diff_cached(source)
    emit_result(result, as_json)


def stage(
    path: str = typer.Argument(..., help="Managed file to stage"),
    as_json: bool = JSON_OPTION,
):
    """Stage the source file of a managed file for the next commit."""
    with bridge_session() as bridge:
        result = bridge.stage(path)
    emit_result(result, as_json)


def commit(
    message: str = typer.Option(..., "-m", "--message", help="Commit message"),
    as_json: bool = JSON_OPTION,
):
    """Commit staged changes in the source repository."""
    with bridge_session() as bridge:
        result = bridge.commit(message)
    emit_result(result, as_json)


def push(as_json: bool = JSON_OPTION):
    """Push source repository commits to the remote."""
    with bridge_session() as bridge:
        result = bridge.push()
    emit_result(result, as_json)


def pull(as_json: bool = JSON_OPTION):
    """Pull remote commits into the source repository."""
    with bridge_session() as bridge:
        result = bridge.pull()
    emit_result(result, as_json)
