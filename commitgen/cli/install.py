"""CLI commands for hook and shell integration."""

import typer

from commitgen.git import GitError, get_hooks_dir
from commitgen.hook import HookExistsError, install_hook
from commitgen.shell import install_shell, uninstall_shell


def install_hook_command(
    force: bool = typer.Option(
        False,
        "--force",
        "-f",
        help="Overwrite an existing prepare-commit-msg hook",
    ),
) -> None:
    """Install a prepare-commit-msg hook that pre-fills commit messages."""
    try:
        hooks_dir = get_hooks_dir()
        hook_path = install_hook(hooks_dir, force=force)
    except (HookExistsError, GitError, OSError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"✓ prepare-commit-msg hook installed at {hook_path}")


def install_shell_command() -> None:
    """Install zsh ghost-text suggestions for `git commit -m "`."""
    try:
        snippet_path = install_shell()
    except OSError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"✓ zsh snippet installed at {snippet_path}")
    typer.echo("Restart your shell or run: source ~/.zshrc")


def uninstall_shell_command() -> None:
    """Remove the zsh integration."""
    try:
        removed = uninstall_shell()
    except OSError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    if removed:
        typer.echo("✓ zsh integration removed")
    else:
        typer.echo("zsh integration was not installed")
