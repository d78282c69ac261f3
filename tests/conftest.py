"""Shared fixtures: a scriptable stand-in for the chezmoi executable."""

import stat
import sys
from pathlib import Path

import pytest

FAKE_CHEZMOI = """#!/bin/sh
# Records each call, then prints the canned output for it.
echo "$*" >> "{root}/calls"
case "$*" in
  "managed --include=files") out=managed ;;
  "status") out=status ;;
  "git -- status --porcelain") out=git_status ;;
  "git -- rev-list --left-right --count "*) out=rev_list ;;
  *)
    echo "ran: $*"
    exit 0
    ;;
esac
if [ -f "{root}/$out" ]; then
  cat "{root}/$out"
  exit 0
fi
echo "fatal: no canned output for $out" >&2
exit 128
"""


class FakeChezmoi:
    """A shell script that answers chezmoi commands from files."""

    def __init__(self, root: Path):
        self.root = root
        self.binary = root / "chezmoi"
        self.binary.write_text(FAKE_CHEZMOI.format(root=root))
        self.binary.chmod(self.binary.stat().st_mode | stat.S_IEXEC)

    def respond(self, name: str, output: str) -> None:
        """Set the stdout for one of: managed, status, git_status, rev_list."""
        (self.root / name).write_text(output)

    def respond_bytes(self, name: str, output: bytes) -> None:
        (self.root / name).write_bytes(output)

    @property
    def calls(self):
        calls_file = self.root / "calls"
        if not calls_file.exists():
            return []
        return calls_file.read_text().splitlines()


@pytest.fixture
def fake_chezmoi(tmp_path):
    if sys.platform == "win32":
        pytest.skip("fake chezmoi is a POSIX shell script")
    root = tmp_path / "fake_chezmoi"
    root.mkdir()
    return FakeChezmoi(root)
