"""prepare-commit-msg hook installation.

The hook fills an empty commit message file with `commitgen suggest --plain`
unless the commit comes from a merge, squash or rebase.
"""

import stat
from pathlib import Path

HOOK_NAME = "prepare-commit-msg"

HOOK_MARKER = "# installed by commitgen"

HOOK_TEMPLATE = """#!/bin/sh
{marker}
MSG_FILE="$1"
SOURCE="$2"

# Respect messages given with -m, -F or a template
if [ -s "$MSG_FILE" ] && grep -q '^[^#]' "$MSG_FILE"; then
  exit 0
fi

case "$SOURCE" in
  merge|squash|rebase)
    exit 0
    ;;
esac

OUTPUT=$({command} suggest --plain 2>/dev/null) || exit 0

if [ -z "$OUTPUT" ]; then
  exit 0
fi

{{ printf '%s\\n' "$OUTPUT"; cat "$MSG_FILE"; }} > "$MSG_FILE.commitgen" && mv "$MSG_FILE.commitgen" "$MSG_FILE"
"""


class HookExistsError(Exception):
    """Raised when a hook is already installed and overwriting was not requested."""

    pass


def render_hook(command: str = "commitgen") -> str:
    """Render the hook script.

    Args:
        command: The command used to invoke commitgen.
    """
    return HOOK_TEMPLATE.format(marker=HOOK_MARKER, command=command)


def is_commitgen_hook(hook_path: Path) -> bool:
    """Check whether an existing hook was installed by commitgen."""
    try:
        return HOOK_MARKER in hook_path.read_text(encoding="utf-8", errors="replace")
    except OSError:
        return False


def install_hook(hooks_dir: Path, force: bool = False, command: str = "commitgen") -> Path:
    """Install the prepare-commit-msg hook.

    Args:
        hooks_dir: The repository's hooks directory.
        force: Overwrite an existing hook.
        command: The command used to invoke commitgen.

    Returns:
        Path to the installed hook.

    Raises:
        HookExistsError: If a hook exists and force is False.
        OSError: If the hook cannot be written.
    """
    hook_path = hooks_dir / HOOK_NAME
    if hook_path.exists() and not force:
        raise HookExistsError(
            f"{HOOK_NAME} hook already exists at {hook_path}. "
            "Remove it or rerun with --force."
        )

    hooks_dir.mkdir(parents=True, exist_ok=True)
    hook_path.write_text(render_hook(command), encoding="utf-8")
    mode = hook_path.stat().st_mode
    hook_path.chmod(mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return hook_path
