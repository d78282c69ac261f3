"""Combine chezmoi and source-repository status into per-file states."""

import logging
from typing import Callable, Dict, List, Tuple

from .parsing import (
    lookup_git_status,
    parse_ahead_behind,
    parse_git_status,
    parse_local_status,
    parse_managed,
    source_name_for,
)
from .runner import ChezmoiRunner
from .types import UNCHANGED, ChezmoiError, FileState

logger = logging.getLogger(__name__)

FILTERS = ("all", "modified", "clean")


def get_ahead_behind(
    runner: ChezmoiRunner, upstream: str = "@{upstream}"
) -> Tuple[int, int]:
    """Commits the source repo is ahead of / behind its upstream.

    Any failure, including a missing upstream or a missing git, counts as
    (0, 0).
    """
    try:
        result = runner.git(
            "rev-list", "--left-right", "--count", f"HEAD...{upstream}"
        )
    except ChezmoiError as e:
        logger.debug(f"Could not count commits against {upstream}: {e}")
        return 0, 0

    if not result.success:
        logger.debug(
            f"No ahead/behind for {upstream}: {result.stderr.strip()}"
        )
        return 0, 0
    return parse_ahead_behind(result.stdout)


def get_file_states(
    runner: ChezmoiRunner,
    include: str = "files",
    upstream: str = "@{upstream}",
    source_name: Callable[[str], str] = source_name_for,
) -> List[FileState]:
    """Build one FileState per managed file, in ``chezmoi managed`` order.

    Commands run one after another: managed, status, git status, then
    rev-list. A ChezmoiError from any of the first three propagates;
    the rev-list step falls back to zero counts.

    Args:
        runner: Runner used for every command
        include: Value for ``chezmoi managed --include``
        upstream: Ref compared against HEAD for ahead/behind counts
        source_name: Maps a target path to its source file name

    Returns:
        List of FileState, empty when nothing is managed
    """
    managed_out = runner.run("managed", f"--include={include}")
    if not managed_out.success:
        logger.warning(
            f"chezmoi managed failed: {managed_out.stderr.strip()}"
        )
    managed = parse_managed(managed_out.stdout)
    if not managed:
        return []

    local_changes: Dict[str, str] = parse_local_status(
        runner.run("status").stdout
    )
    git_states = parse_git_status(runner.git("status", "--porcelain").stdout)
    commits_ahead, commits_behind = get_ahead_behind(runner, upstream)

    states = []
    for path in managed:
        git_index, git_worktree = lookup_git_status(
            git_states, source_name(path)
        )
        states.append(
            FileState(
                path=path,
                local_change=local_changes.get(path, UNCHANGED),
                git_index=git_index,
                git_worktree=git_worktree,
                commits_ahead=commits_ahead,
                commits_behind=commits_behind,
            )
        )
    return states


def filter_states(states: List[FileState], which: str) -> List[FileState]:
    """Select "all", "modified" (anything not clean) or "clean" states."""
    if which == "all":
        return list(states)
    if which == "modified":
        return [s for s in states if not s.is_clean]
    if which == "clean":
        return [s for s in states if s.is_clean]
    raise ValueError(
        f"Unknown filter '{which}', expected one of: {', '.join(FILTERS)}"
    )


def count_states(states: List[FileState]) -> Dict[str, int]:
    clean = sum(1 for s in states if s.is_clean)
    return {
        "all": len(states),
        "modified": len(states) - clean,
        "clean": clean,
    }
