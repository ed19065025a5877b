"""CLI command for environment diagnostics."""

import typer

from commitgen.cli.utils import get_settings
from commitgen.doctor import has_fatal_failure, run_checks


def doctor_command() -> None:
    """Check the local setup and report problems."""
    settings = get_settings()
    checks = run_checks(settings)

    for check in checks:
        typer.echo(check.render())

    if has_fatal_failure(checks):
        typer.echo("\ndoctor detected fatal issues; see output above", err=True)
        raise typer.Exit(1)
