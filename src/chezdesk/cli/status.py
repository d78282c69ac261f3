"""States command for chezdesk CLI."""

from typing import List

import typer
from rich.markup import escape

from ..chezmoi import FileState, filter_states
from ..chezmoi.states import FILTERS, count_states
from .helpers import bridge_session
from .output import console, error, muted, print_json

LOCAL_LABELS = {
    "A": "new",
    "D": "deleted",
    "M": "modified",
    "R": "run",
}

INDEX_LABELS = {
    "A": "staged:new",
    "M": "staged:mod",
    "D": "staged:del",
}

WORKTREE_LABELS = {
    "M": "unstaged",
    "D": "unstaged:del",
}


def register(app: typer.Typer) -> None:
    """Register the states command with the app."""
    app.command()(states)


def describe_state(state: FileState) -> List[str]:
    """Short badges for every non-default field of a state."""
    badges = []
    if state.local_change != " ":
        label = LOCAL_LABELS.get(state.local_change, state.local_change)
        badges.append(f"● {label}")
    if state.git_index == "?" and state.git_worktree == "?":
        badges.append("? untracked")
    else:
        if state.git_index != " ":
            label = INDEX_LABELS.get(
                state.git_index, f"staged:{state.git_index}"
            )
            badges.append(f"~ {label}")
        if state.git_worktree != " ":
            label = WORKTREE_LABELS.get(
                state.git_worktree, f"unstaged:{state.git_worktree}"
            )
            badges.append(f"~ {label}")
    if state.commits_ahead > 0:
        badges.append(f"↑ {state.commits_ahead} ahead")
    if state.commits_behind > 0:
        badges.append(f"↓ {state.commits_behind} behind")
    return badges


def states(
    which: str = typer.Option(
        "all",
        "--filter",
        "-f",
        help="Which files to show: all, modified or clean.",
    ),
    as_json: bool = typer.Option(
        False, "--json", help="Print states as a JSON array."
    ),
):
    """Show the combined chezmoi and git state of every managed file.

    Examples:
        chezdesk states                  # All managed files
        chezdesk states -f modified      # Only files needing attention
        chezdesk states --json           # Machine-readable output
    """
    if which not in FILTERS:
        error(f"Unknown filter '{which}'. Choose from: {', '.join(FILTERS)}")
        raise typer.Exit(2)

    with bridge_session() as bridge:
        all_states = bridge.file_states()

    shown = filter_states(all_states, which)

    if as_json:
        print_json([s.to_dict() for s in shown])
        return

    if not all_states:
        muted("No managed files.")
        return

    for state in shown:
        badges = describe_state(state)
        if badges:
            console.print(
                f"  {escape(state.path)}  "
                f"[yellow]{escape('  '.join(badges))}[/yellow]"
            )
        else:
            console.print(f"  {escape(state.path)}  [green]✓[/green]")

    counts = count_states(all_states)
    muted(
        f"\n{counts['all']} managed, {counts['modified']} modified, "
        f"{counts['clean']} clean"
    )
