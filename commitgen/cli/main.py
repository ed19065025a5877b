"""Commands that produce commit messages: suggest and cached."""

from typing import Optional

import typer

from commitgen import __version__
from commitgen.cache import load_latest_message
from commitgen.cli.utils import get_settings
from commitgen.generator import MessageGenerator
from commitgen.git import GitError, NoStagedChangesError, get_staged_changes


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"commitgen {__version__}")
        raise typer.Exit()


def main_callback(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-V",
        help="Show the version and exit",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """commitgen: commit message suggestions from staged changes."""
    pass


def suggest_command(
    ai: Optional[bool] = typer.Option(
        None,
        "--ai/--no-ai",
        help="Use the configured AI provider (falls back to heuristics on failure)",
    ),
    plain: bool = typer.Option(
        False,
        "--plain",
        help="Print only the message (for hooks and shell integration)",
    ),
    regenerate: bool = typer.Option(
        False,
        "--regenerate",
        "-r",
        help="Ignore the cached message for these changes",
    ),
    patch_bytes: Optional[int] = typer.Option(
        None,
        "--patch-bytes",
        min=1,
        help="Maximum size of the staged diff in bytes",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log diagnostics to stderr",
    ),
) -> None:
    """Suggest a commit message for the staged changes."""
    settings = get_settings(verbose)
    max_bytes = patch_bytes or settings.patch_bytes

    try:
        files, patch = get_staged_changes(max_bytes)
    except NoStagedChangesError as e:
        if not plain:
            typer.echo(str(e), err=True)
        raise typer.Exit(1)
    except GitError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    generator = MessageGenerator.from_settings(settings, ai_enabled=ai)
    if not plain:
        typer.echo(f"Analyzing {len(files)} staged file(s)...", err=True)

    result = generator.generate(files, patch, regenerate=regenerate)

    if not plain:
        if result.from_cache:
            typer.echo(f"Using cached message (from {result.provider})", err=True)
        elif result.fell_back:
            error = result.error
            typer.echo(f"AI generation failed: {error}", err=True)
            help_text = getattr(error, "help", None)
            if help_text:
                typer.echo(f"Help: {help_text}", err=True)
        else:
            typer.echo(f"Generated by {result.source}", err=True)

    typer.echo(result.message)


def cached_command(
    plain: bool = typer.Option(
        False,
        "--plain",
        help="Print only the message",
    ),
) -> None:
    """Print the most recently cached message."""
    settings = get_settings()
    cached = load_latest_message(settings.cache_dir)

    if cached is None:
        if not plain:
            typer.echo("No cached commit message found.", err=True)
            typer.echo("Run 'commitgen suggest --ai' first to generate one.", err=True)
        raise typer.Exit(1)

    if not plain:
        typer.echo(f"Cached message from {cached.provider}:", err=True)
    typer.echo(cached.message)
