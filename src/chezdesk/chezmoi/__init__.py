"""chezmoi subprocess bridge package."""

from .bridge import ChezmoiBridge
from .runner import ChezmoiRunner
from .states import filter_states, get_file_states
from .types import ChezmoiError, CommandResult, FileState

__all__ = [
    "ChezmoiBridge",
    "ChezmoiError",
    "ChezmoiRunner",
    "CommandResult",
    "FileState",
    "filter_states",
    "get_file_states",
]
