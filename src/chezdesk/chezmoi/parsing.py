"""Parsers for chezmoi and git text output.

All functions here are pure: they take captured stdout and return plain
Python structures, so they can be tested without a chezmoi install.
"""

from typing import Dict, List, Tuple

from .types import CLEAN

# Width of the status columns plus separator in `chezmoi status` and
# `git status --porcelain` lines, e.g. "MM .bashrc" or "?? dot_bashrc"
STATUS_PREFIX_WIDTH = 3

GitStatus = Tuple[str, str]


def split_lines(stdout: str) -> List[str]:
    """Split on line feeds only, dropping one trailing carriage return.

    str.splitlines also breaks on form feeds, U+2028 and other characters
    that are legal inside file names.
    """
    lines = []
    for line in stdout.split("\n"):
        if line.endswith("\r"):
            line = line[:-1]
        lines.append(line)
    return lines


def parse_managed(stdout: str) -> List[str]:
    """Managed paths in listing order, blank lines dropped."""
    return [line for line in split_lines(stdout) if line]


def parse_local_status(stdout: str) -> Dict[str, str]:
    """Map each path in ``chezmoi status`` output to its first status column.

    Lines shorter than the status prefix are skipped.
    """
    changes: Dict[str, str] = {}
    for line in split_lines(stdout):
        if len(line) < STATUS_PREFIX_WIDTH:
            continue
        changes[line[STATUS_PREFIX_WIDTH:]] = line[0]
    return changes


def parse_git_status(stdout: str) -> Dict[str, GitStatus]:
    """Map source file names to their (index, worktree) porcelain codes.

    Each entry is stored twice: under its basename and under the full
    path. Two files sharing a basename in different directories overwrite
    each other's basename entry; the later line wins.
    """
    states: Dict[str, GitStatus] = {}
    for line in split_lines(stdout):
        if len(line) < STATUS_PREFIX_WIDTH:
            continue
        codes = (line[0], line[1])
        filename = line[STATUS_PREFIX_WIDTH:]
        # FIXME: basename collisions drop the status of the earlier file;
        # kept until callers confirm whether a per-directory key is wanted
        states[basename(filename)] = codes
        states[filename] = codes
    return states


def parse_ahead_behind(stdout: str) -> Tuple[int, int]:
    """Parse ``git rev-list --left-right --count`` output.

    Anything other than exactly two non-negative integers gives (0, 0).
    """
    parts = stdout.split()
    if len(parts) != 2:
        return 0, 0
    # int() alone would also take "+3", "1_0" and non-ASCII digits
    if not all(part.isascii() and part.isdigit() for part in parts):
        return 0, 0
    return int(parts[0]), int(parts[1])


def basename(path: str) -> str:
    return path.rsplit("/", 1)[-1]


def source_name_for(path: str) -> str:
    """Guess the source-directory name of a home-relative target path.

    Only the first segment is rewritten, following chezmoi's "dot_" prefix:
    ".bashrc" -> "dot_bashrc", ".config/nvim/init.lua" ->
    "dot_config/nvim/init.lua". Other attribute prefixes (private_,
    executable_, ...) are not guessed.
    """
    first, sep, rest = path.partition("/")
    if first.startswith("."):
        first = "dot_" + first[1:]
    return first + sep + rest


def lookup_git_status(
    git_states: Dict[str, GitStatus], source_name: str
) -> GitStatus:
    """Find git codes by full source name, then by basename alone."""
    codes = git_states.get(source_name)
    if codes is None:
        codes = git_states.get(basename(source_name))
    if codes is None:
        return CLEAN, CLEAN
    return codes
