"""Subprocess wrapper for the chezmoi executable."""

import logging
import subprocess
from typing import List, Optional

from .types import ChezmoiError, CommandResult

logger = logging.getLogger(__name__)


class ChezmoiRunner:
    """Runs chezmoi commands and captures their output.

    Output is decoded as UTF-8 with invalid sequences replaced. A non-zero
    exit is reported in the result, never raised. Only a failure to start
    the process raises ChezmoiError.
    """

    def __init__(
        self,
        binary: str = "chezmoi",
        global_args: Optional[List[str]] = None,
    ):
        self.binary = binary
        self.global_args = list(global_args or [])

    def run(self, *args: str) -> CommandResult:
        """Run ``chezmoi <global args> <args>``.

        Args:
            *args: chezmoi subcommand and arguments (e.g. "status")

        Returns:
            CommandResult with stdout, stderr and success flag
        """
        cmd = [self.binary] + self.global_args + list(args)
        logger.debug(f"Running: {' '.join(cmd)}")
        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
                check=False,
            )
        except OSError as e:
            raise ChezmoiError(f"Failed to run {self.binary}: {e}")

        if result.returncode != 0:
            logger.debug(
                f"{args[0] if args else self.binary} exited with "
                f"{result.returncode}: {result.stderr.strip()}"
            )

        return CommandResult(
            stdout=result.stdout,
            stderr=result.stderr,
            success=result.returncode == 0,
        )

    def git(self, *args: str) -> CommandResult:
        """Run git inside the chezmoi source directory.

        Everything after "--" goes to git untouched, so options such as
        "--porcelain" are not parsed by chezmoi.
        """
        return self.run("git", "--", *args)
