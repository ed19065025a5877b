"""Shared utility functions for CLI commands."""

import logging
import sys
from typing import Optional

import typer

from commitgen.config import ConfigError, Settings, load_settings

LOG_FORMAT = "[%(asctime)s %(levelname)s] %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"


def configure_logging(verbose: bool) -> None:
    """Attach a stderr handler to the commitgen logger.

    Args:
        verbose: Log at DEBUG level instead of WARNING.
    """
    logger = logging.getLogger("commitgen")
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)

    for handler in list(logger.handlers):
        if getattr(handler, "_commitgen_cli", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    handler._commitgen_cli = True
    logger.addHandler(handler)


def get_settings(verbose: Optional[bool] = None) -> Settings:
    """Load settings and set up logging, exiting with code 1 on config errors.

    Args:
        verbose: --verbose flag. When not given, the configured value is used.
    """
    try:
        settings = load_settings()
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    if verbose:
        settings.verbose = True
    configure_logging(settings.verbose)
    return settings


def mask_api_key(api_key: str) -> str:
    """Mask an API key for display."""
    if not api_key:
        return "not set"
    if len(api_key) > 12:
        return api_key[:8] + "..." + api_key[-4:]
    return "***"
