"""CLI commands for the message cache."""

import typer

from commitgen.cache import clear_cache, load_latest_message
from commitgen.cli.utils import get_settings

# Subcommand group for cache management
cache_app = typer.Typer(
    name="cache",
    help="Inspect or clear cached commit messages",
    add_completion=False,
)


@cache_app.command("show")
def cache_show() -> None:
    """Show the most recent cache record."""
    settings = get_settings()
    cached = load_latest_message(settings.cache_dir)

    if cached is None:
        typer.echo("No cached commit message found.")
        return

    typer.echo(f"Cache directory: {settings.cache_dir}")
    typer.echo()
    typer.echo(f"  Message: {cached.message}")
    typer.echo(f"  Provider: {cached.provider}")
    typer.echo(f"  Content hash: {cached.content_hash}")
    typer.echo(f"  Timestamp: {cached.timestamp.isoformat()}")
    typer.echo(f"  Files ({len(cached.files)}):")
    for path in cached.files:
        typer.echo(f"    - {path}")


@cache_app.command("clear")
def cache_clear() -> None:
    """Remove all cached messages."""
    settings = get_settings()
    if not clear_cache(settings.cache_dir):
        typer.echo(f"Error: failed to clear cache at {settings.cache_dir}", err=True)
        raise typer.Exit(1)
    typer.echo(f"✓ Cache cleared ({settings.cache_dir})")
