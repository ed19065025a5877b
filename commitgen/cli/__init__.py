"""CLI entry point for commitgen.

This module provides the main CLI application that combines all commands
and subcommands into a single unified interface.
"""

import typer

from commitgen.cli.cache import cache_app
from commitgen.cli.config import config_app
from commitgen.cli.doctor import doctor_command
from commitgen.cli.install import (
    install_hook_command,
    install_shell_command,
    uninstall_shell_command,
)
from commitgen.cli.main import cached_command, main_callback, suggest_command

# Main application
app = typer.Typer(
    name="commitgen",
    help="commitgen: conventional commit messages from staged changes",
    add_completion=False,
    no_args_is_help=True,
)

# Add subcommand groups
app.add_typer(cache_app, name="cache")
app.add_typer(config_app, name="config")

# Add individual commands
app.command("suggest")(suggest_command)
app.command("cached")(cached_command)
app.command("install-hook")(install_hook_command)
app.command("install-shell")(install_shell_command)
app.command("uninstall-shell")(uninstall_shell_command)
app.command("doctor")(doctor_command)

app.callback()(main_callback)


__all__ = [
    "app",
    "cache_app",
    "config_app",
]
