"""Commit message conventions used as the system instruction.

The conventions text is looked up in order:
1. An explicitly configured conventions file. If it cannot be read, the
   minimal built-in instruction is used.
2. ./conventions.md in the current directory.
3. The built-in conventions below.
"""

import logging
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

LOCAL_CONVENTIONS_FILE = "conventions.md"

MINIMAL_CONVENTIONS = "Use conventional commit format: type: description (under 50 chars)"

BUILTIN_CONVENTIONS = """You write git commit messages following the Conventional Commits format.

Format: type(scope): description
- The scope is optional. Use it only when the change is clearly in one area.
- The description is imperative ("add", not "added" or "adds"), lowercase,
  with no trailing period.
- Keep the whole line under 50 characters when possible and never over 72.
- Write exactly one line. No body, no footers, no quotes, no markdown.

Types:
- feat: a new feature or capability
- fix: a bug fix
- docs: documentation only
- style: formatting, whitespace, linting (no logic change)
- refactor: restructuring without changing behavior
- perf: a performance improvement
- test: adding or updating tests
- build: build system or dependencies
- ci: CI configuration and scripts
- chore: maintenance that fits nowhere else

Describe what changed, not which file types were touched."""


def load_conventions(conventions_file: Optional[Path] = None) -> tuple[str, str]:
    """Load the conventions text and report where it came from.

    Args:
        conventions_file: Explicitly configured conventions file, if any.

    Returns:
        Tuple of (content, source) where source is a path, "built-in" or
        "minimal".
    """
    if conventions_file is not None:
        try:
            return conventions_file.read_text(encoding="utf-8"), str(conventions_file)
        except OSError as e:
            logger.warning("Failed to read conventions file %s: %s", conventions_file, e)
            return MINIMAL_CONVENTIONS, "minimal"

    local_file = Path.cwd() / LOCAL_CONVENTIONS_FILE
    if local_file.is_file():
        try:
            return local_file.read_text(encoding="utf-8"), str(local_file)
        except OSError as e:
            logger.debug("Ignoring unreadable %s: %s", local_file, e)

    return BUILTIN_CONVENTIONS, "built-in"
