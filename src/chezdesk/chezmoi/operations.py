"""Pass-through chezmoi commands.

Each function runs one fixed command shape and returns the raw
CommandResult. Target paths relative to the home directory are expanded
first; source-directory paths given to git are passed as-is.
"""

import logging
from typing import List, Optional

from ..system import expand_home
from .parsing import split_lines
from .runner import ChezmoiRunner
from .types import CommandResult

logger = logging.getLogger(__name__)


def _with_target(
    args: List[str], path: Optional[str], home: Optional[str]
) -> List[str]:
    if path is not None:
        args.append(expand_home(path, home))
    return args


def diff(
    runner: ChezmoiRunner,
    path: Optional[str] = None,
    home: Optional[str] = None,
) -> CommandResult:
    """Diff between the target state and the home directory."""
    return runner.run(*_with_target(["diff"], path, home))


def diff_cached(runner: ChezmoiRunner, source_path: str) -> CommandResult:
    """Staged changes of a source file (``git diff --cached``)."""
    return runner.git("diff", "--cached", source_path)


def diff_git(runner: ChezmoiRunner, source_path: str) -> CommandResult:
    """Unstaged changes of a source file (``git diff``)."""
    return runner.git("diff", source_path)


def apply(
    runner: ChezmoiRunner,
    path: Optional[str] = None,
    force: bool = True,
    home: Optional[str] = None,
) -> CommandResult:
    """Write the target state to the home directory.

    Without a path every managed file is applied.
    """
    args = ["apply"]
    if force:
        args.append("--force")
    return runner.run(*_with_target(args, path, home))


def add(
    runner: ChezmoiRunner, path: str, home: Optional[str] = None
) -> CommandResult:
    return runner.run("add", expand_home(path, home))


def forget(
    runner: ChezmoiRunner,
    path: str,
    force: bool = True,
    home: Optional[str] = None,
) -> CommandResult:
    """Stop managing a file. The file in the home directory is kept."""
    args = ["forget"]
    if force:
        args.append("--force")
    args.append(expand_home(path, home))
    return runner.run(*args)


def source_path(
    runner: ChezmoiRunner,
    path: Optional[str] = None,
    home: Optional[str] = None,
) -> CommandResult:
    """Source directory, or the source file of ``path`` when given."""
    return runner.run(*_with_target(["source-path"], path, home))


def managed(
    runner: ChezmoiRunner, pattern: Optional[str] = None
) -> CommandResult:
    """List managed entries, optionally only those containing ``pattern``.

    The match is a case-insensitive substring test on each line.
    """
    result = runner.run("managed")
    if not pattern:
        return result
    needle = pattern.lower()
    matches = [
        line for line in split_lines(result.stdout)
        if line and needle in line.lower()
    ]
    stdout = "".join(f"{line}\n" for line in matches)
    return CommandResult(
        stdout=stdout, stderr=result.stderr, success=result.success
    )


def git(runner: ChezmoiRunner, args: List[str]) -> CommandResult:
    return runner.git(*args)


def data(runner: ChezmoiRunner) -> CommandResult:
    """Template data as JSON text. The output is not parsed."""
    return runner.run("data", "--format=json")


def doctor(runner: ChezmoiRunner) -> CommandResult:
    return runner.run("doctor")


def cat(
    runner: ChezmoiRunner, path: str, home: Optional[str] = None
) -> CommandResult:
    """Target contents of a managed file, with templates rendered."""
    return runner.run("cat", expand_home(path, home))


def stage(
    runner: ChezmoiRunner, path: str, home: Optional[str] = None
) -> CommandResult:
    """Stage the source file of a managed target in the source repo.

    Args:
        runner: The chezmoi runner
        path: Target path, relative to home or absolute
        home: Home directory override

    Returns:
        Result of ``git add``, or of ``source-path`` if the source file
        could not be resolved
    """
    resolved = source_path(runner, path, home)
    if not resolved.success:
        logger.warning(f"Could not resolve source of {path}")
        return resolved
    return runner.git("add", resolved.stdout.strip())


def commit(runner: ChezmoiRunner, message: str) -> CommandResult:
    return runner.git("commit", "-m", message)


def push(runner: ChezmoiRunner) -> CommandResult:
    return runner.git("push")


def pull(runner: ChezmoiRunner) -> CommandResult:
    return runner.git("pull")
