"""chezdesk - chezmoi state and sync for desktop front-ends."""

from .chezmoi import ChezmoiBridge, ChezmoiError, CommandResult, FileState
from .cli import main
from .config import Config
from .system import Environment, expand_home
from .utils import get_version

__all__ = [
    "ChezmoiBridge",
    "ChezmoiError",
    "CommandResult",
    "Config",
    "Environment",
    "FileState",
    "expand_home",
    "get_version",
    "main",
]
