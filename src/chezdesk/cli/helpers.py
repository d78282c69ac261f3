"""Shared helper functions for CLI commands."""

from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List, Optional

import typer

from ..chezmoi import ChezmoiBridge, ChezmoiError, ChezmoiRunner, CommandResult
from ..config import Config, ConfigError
from ..system import Environment
from .output import error, print_json, raw

# Global environment instance
env = Environment()

# Supported config filenames (in order of preference)
CONFIG_FILENAMES: List[str] = [".chezdesk.yaml", ".chezdesk.yml"]

# Set by the --config option of the main callback
_config_override: Optional[Path] = None


def set_config_path(path: Optional[Path]) -> None:
    global _config_override
    _config_override = path


def get_config_path(home: Optional[Path] = None) -> Path:
    """Find the config file path, checking both .yaml and .yml extensions.

    An explicit --config path always wins. Otherwise returns the first
    existing file in the home directory, or the default (.chezdesk.yaml)
    if none exist yet.
    """
    if _config_override is not None:
        return _config_override
    home_dir = home or Path(env.home).expanduser()
    for filename in CONFIG_FILENAMES:
        path = home_dir / filename
        if path.exists():
            return path
    return home_dir / CONFIG_FILENAMES[0]


def get_config() -> Config:
    """Load config from ~/.chezdesk.yaml or ~/.chezdesk.yml."""
    return Config(get_config_path())


def get_bridge(config: Config) -> ChezmoiBridge:
    """Create a ChezmoiBridge from config."""
    runner = ChezmoiRunner(
        binary=config.get("chezmoi.binary", "chezmoi"),
        global_args=config.get_global_args(),
    )
    return ChezmoiBridge(
        runner,
        home=env.home,
        include=config.get("chezmoi.include", "files"),
        upstream=config.get("chezmoi.upstream", "@{upstream}"),
        force=config.get_bool("chezmoi.force", True),
    )


@contextmanager
def bridge_session() -> Iterator[ChezmoiBridge]:
    """Yield a configured bridge, turning load/launch errors into exit 1."""
    try:
        yield get_bridge(get_config())
    except (ChezmoiError, ConfigError) as e:
        error(f"Error: {e}")
        raise typer.Exit(1)


def emit_result(result: CommandResult, as_json: bool = False) -> None:
    """Print a command result and exit 1 if the command failed.

    Text mode echoes stdout and stderr untouched; JSON mode prints the
    whole result as one object on stdout.
    """
    if as_json:
        print_json(result.to_dict())
    else:
        if result.stdout:
            raw(result.stdout)
        if result.stderr:
            raw(result.stderr, err=True)

    if not result.success:
        raise typer.Exit(1)
