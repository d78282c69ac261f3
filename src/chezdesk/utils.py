"""Logging and version helpers."""

import importlib.metadata
import logging
import sys


def setup_logging(verbose: bool = False):
    """Configure root logging on stderr.

    stdout is reserved for command output and JSON.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def get_version() -> str:
    """Installed package version, or "(development)" from a source tree."""
    try:
        return importlib.metadata.version("chezdesk")
    except importlib.metadata.PackageNotFoundError:
        return "(development)"
