"""
dnsctl CLI Utilities.

Shared utility functions used across CLI modules.
"""

import logging
import os
import platform
import sys
from typing import TextIO

import typer

LOG_LEVEL_ENV_VAR = "DNSCTL_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_version() -> str:
    """Get dnsctl version from package metadata."""
    from dnsctl import __version__

    return __version__


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        typer.echo(f"dnsctl version {get_version()}")
        typer.echo("")
        typer.echo("Environment:")
        typer.echo(f"  Python:        {platform.python_implementation()} {platform.python_version()}")
        typer.echo(f"  Platform:      {platform.system()} {platform.release()}")
        raise typer.Exit()


def configure_logging(verbose: bool = False, stream: TextIO | None = None) -> None:
    """
    Configure logging for a CLI run.

    Log records go to ``stream`` (stderr by default). ``--verbose`` selects
    DEBUG; otherwise the level comes from DNSCTL_LOG_LEVEL (default WARNING).
    Calling it again replaces the previous handler.
    """
    if verbose:
        level = logging.DEBUG
    else:
        level_name = os.getenv(LOG_LEVEL_ENV_VAR, "WARNING").upper()
        level = getattr(logging, level_name, logging.WARNING)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    logger = logging.getLogger("dnsctl")
    for old in list(logger.handlers):
        logger.removeHandler(old)
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
