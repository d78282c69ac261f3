"""chezdesk CLI - chezmoi bridge for desktop front-ends."""

from pathlib import Path
from typing import Optional

import typer

from ..utils import get_version, setup_logging
from . import doctor, files, git, status
from .helpers import set_config_path

# Create the main app
app = typer.Typer(
    name="chezdesk",
    help="Inspect and sync chezmoi-managed dotfiles.",
    add_completion=False,
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose logging output.",
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        help="Config file (default: ~/.chezdesk.yaml).",
    ),
):
    """chezdesk - chezmoi file states, diffs and git sync."""
    setup_logging(verbose=verbose)
    set_config_path(config)


# Register all commands
status.register(app)
files.register(app)
git.register(app)
doctor.register(app)


@app.command()
def version():
    """Show the version of chezdesk."""
    typer.echo(f"chezdesk version {get_version()}")


def main():
    """Main entry point for the chezdesk CLI."""
    app()
