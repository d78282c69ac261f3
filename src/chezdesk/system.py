import logging
import os
import platform
from enum import Enum
from typing import Optional

logger = logging.getLogger(__name__)

# Used when no home directory can be found in the environment
HOME_PLACEHOLDER = "~"


class OS(Enum):
    LINUX = "linux"
    MACOS = "macos"
    WINDOWS = "windows"
    UNKNOWN = "unknown"


class Environment:
    """Detects and provides info about the current system environment."""

    def __init__(self):
        self.os = self._detect_os()
        self.home = self._detect_home()

    def _detect_os(self) -> OS:
        system = platform.system().lower()
        if system == "linux":
            return OS.LINUX
        elif system == "darwin":
            return OS.MACOS
        elif system == "windows":
            return OS.WINDOWS
        return OS.UNKNOWN

    def _detect_home(self) -> str:
        home = os.environ.get("HOME")
        if not home and self.is_windows():
            home = os.environ.get("USERPROFILE")
        if not home:
            logger.debug("HOME is not set, using placeholder")
            return HOME_PLACEHOLDER
        return home

    def is_linux(self) -> bool:
        return self.os == OS.LINUX

    def is_macos(self) -> bool:
        return self.os == OS.MACOS

    def is_windows(self) -> bool:
        return self.os == OS.WINDOWS

    def __repr__(self) -> str:
        return (
            f"Environment(os={self.os.value}, "
            f"home={self.home})"
        )


def expand_home(path: str, home: Optional[str] = None) -> str:
    """Turn a home-relative path like ".bashrc" into "$HOME/.bashrc".

    Absolute paths and paths that already start with "~/" are returned
    unchanged. When ``home`` is not given it is read from the environment
    at call time.
    """
    if path.startswith("/") or path.startswith("~/"):
        return path
    if home is None:
        home = Environment().home
    return f"{home}/{path}"
