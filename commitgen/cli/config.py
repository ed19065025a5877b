"""CLI commands for configuration."""

import typer

from commitgen.cli.utils import get_settings, mask_api_key
from commitgen.config import get_api_key_env_var
from commitgen.llm.prompts import load_conventions

# Subcommand group for configuration
config_app = typer.Typer(
    name="config",
    help="Show commitgen configuration",
    add_completion=False,
)


@config_app.command("show")
def config_show() -> None:
    """Show the effective configuration."""
    settings = get_settings()
    provider_config = settings.provider_config()
    _, conventions_source = load_conventions(settings.conventions_file)

    source = settings.config_file or "defaults and environment"
    typer.echo(f"Current commitgen configuration ({source}):")
    typer.echo()
    typer.echo(f"  AI enabled: {'yes' if settings.ai_enabled else 'no'}")
    typer.echo(f"  Provider: {provider_config.provider}")
    typer.echo(f"  Model: {provider_config.model or 'not set'}")
    typer.echo(f"  Base URL: {provider_config.base_url or 'not set'}")

    env_var = get_api_key_env_var(provider_config.provider)
    if env_var:
        typer.echo(f"  API Key ({env_var}): {mask_api_key(settings.api_key)}")

    typer.echo(f"  Patch bytes: {settings.patch_bytes}")
    typer.echo(f"  Cache: {settings.cache_dir} ({'enabled' if settings.use_cache else 'disabled'})")
    typer.echo(f"  Conventions: {conventions_source}")
