"""Staged change collection.

Contains:
- get_staged_files: Get the staged file paths in git's order
- get_staged_patch: Get the staged diff truncated to a byte limit
- get_staged_changes: Get both, failing if nothing is staged
- truncate_to_bytes: Byte-limit truncation used for the patch
"""

from pathlib import Path
from typing import Optional

from commitgen.git.exceptions import NoStagedChangesError
from commitgen.git.runner import run_git_command


def truncate_to_bytes(text: str, max_bytes: int) -> str:
    """Truncate text to at most ``max_bytes`` UTF-8 bytes.

    A multi-byte character split by the limit is dropped.
    """
    encoded = text.encode("utf-8")
    if len(encoded) <= max_bytes:
        return text
    return encoded[:max_bytes].decode("utf-8", errors="ignore")


def get_staged_files(cwd: Optional[Path] = None) -> list[str]:
    """Get list of staged file paths.

    Returns:
        List of staged file paths, in the order git reports them.
    """
    output = run_git_command(["diff", "--cached", "--name-only"], cwd=cwd)
    if not output:
        return []
    return [line for line in output.split("\n") if line]


def get_staged_patch(max_bytes: int, cwd: Optional[Path] = None) -> str:
    """Get the staged diff, truncated (never rejected) beyond ``max_bytes``.

    Args:
        max_bytes: Maximum size of the returned patch in UTF-8 bytes.

    Returns:
        The staged unified diff.
    """
    patch = run_git_command(["diff", "--cached"], cwd=cwd, strip=False)
    return truncate_to_bytes(patch, max_bytes)


def get_staged_changes(max_bytes: int, cwd: Optional[Path] = None) -> tuple[list[str], str]:
    """Get the staged files and patch.

    Args:
        max_bytes: Maximum size of the patch in UTF-8 bytes.

    Returns:
        Tuple of (files, patch).

    Raises:
        NoStagedChangesError: If nothing is staged.
        GitError: If git fails.
    """
    files = get_staged_files(cwd=cwd)
    if not files:
        raise NoStagedChangesError(
            "No staged changes found. Stage your changes first with: git add <files>"
        )
    return files, get_staged_patch(max_bytes, cwd=cwd)
