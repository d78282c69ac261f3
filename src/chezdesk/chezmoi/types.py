"""Result types shared by the runner, reconciler and operations."""

from dataclasses import asdict, dataclass
from typing import Any, Dict

# Local status code meaning "no difference between target and source"
UNCHANGED = " "
# Git status code meaning "clean"
CLEAN = " "


class ChezmoiError(Exception):
    """Raised when the chezmoi process could not be launched at all."""


@dataclass
class CommandResult:
    """Raw output of one chezmoi invocation."""

    stdout: str
    stderr: str
    success: bool

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class FileState:
    """Combined state of one managed file.

    path is relative to the home directory (".bashrc"). local_change is the
    first column of ``chezmoi status``: " ", "A", "D", "M" or "R".
    git_index and git_worktree are the two porcelain columns of the source
    file ("?" untracked, "M" modified, "A" added, "D" deleted, " " clean).
    The commit counts describe the whole source repository.
    """

    path: str
    local_change: str = UNCHANGED
    git_index: str = CLEAN
    git_worktree: str = CLEAN
    commits_ahead: int = 0
    commits_behind: int = 0

    @property
    def is_clean(self) -> bool:
        return (
            self.local_change == UNCHANGED
            and self.git_index == CLEAN
            and self.git_worktree == CLEAN
            and self.commits_ahead == 0
            and self.commits_behind == 0
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
