"""Front-end facing facade over the chezmoi operations."""

from typing import List, Optional

from . import operations
from .runner import ChezmoiRunner
from .states import get_file_states
from .types import CommandResult, FileState


class ChezmoiBridge:
    """All operations a front-end can ask for, bound to one runner.

    Holds no state between calls besides its settings; every method
    spawns fresh chezmoi processes.
    """

    def __init__(
        self,
        runner: Optional[ChezmoiRunner] = None,
        home: Optional[str] = None,
        include: str = "files",
        upstream: str = "@{upstream}",
        force: bool = True,
    ):
        self.runner = runner or ChezmoiRunner()
        self.home = home
        self.include = include
        self.upstream = upstream
        self.force = force

    def file_states(self) -> List[FileState]:
        return get_file_states(
            self.runner, include=self.include, upstream=self.upstream
        )

    def diff(self, path: Optional[str] = None) -> CommandResult:
        return operations.diff(self.runner, path, home=self.home)

    def diff_cached(self, source_path: str) -> CommandResult:
        return operations.diff_cached(self.runner, source_path)

    def diff_git(self, source_path: str) -> CommandResult:
        return operations.diff_git(self.runner, source_path)

    def apply(
        self, path: Optional[str] = None, force: Optional[bool] = None
    ) -> CommandResult:
        if force is None:
            force = self.force
        return operations.apply(self.runner, path, force=force, home=self.home)

    def add(self, path: str) -> CommandResult:
        return operations.add(self.runner, path, home=self.home)

    def forget(self, path: str, force: Optional[bool] = None) -> CommandResult:
        if force is None:
            force = self.force
        return operations.forget(
            self.runner, path, force=force, home=self.home
        )

    def source_path(self, path: Optional[str] = None) -> CommandResult:
        return operations.source_path(self.runner, path, home=self.home)

    def managed(self, pattern: Optional[str] = None) -> CommandResult:
        return operations.managed(self.runner, pattern)

    def git(self, args: List[str]) -> CommandResult:
        return operations.git(self.runner, args)

    def data(self) -> CommandResult:
        return operations.data(self.runner)

    def doctor(self) -> CommandResult:
        return operations.doctor(self.runner)

    def cat(self, path: str) -> CommandResult:
        return operations.cat(self.runner, path, home=self.home)

    def stage(self, path: str) -> CommandResult:
        return operations.stage(self.runner, path, home=self.home)

    def commit(self, message: str) -> CommandResult:
        return operations.commit(self.runner, message)

    def push(self) -> CommandResult:
        return operations.push(self.runner)

    def pull(self) -> CommandResult:
        return operations.pull(self.runner)
