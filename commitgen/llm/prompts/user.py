"""User prompt construction shared by every provider.

The prompt enumerates the changed files (at most five) and embeds the patch
truncated to a fixed byte budget.
"""

MAX_PROMPT_FILES = 5
MULTI_FILE_THRESHOLD = 3
MAX_PROMPT_PATCH_BYTES = 2000
TRUNCATION_MARKER = "..."

MULTI_FILE_GUIDANCE = """This is a multi-file change. Focus on the main purpose and scope.
Look for the common theme across all changes.
If changes are mixed (e.g., docs + code + tests), prioritize the most significant functional change.
"""

RESPONSE_INSTRUCTION = (
    "Generate only the commit message text. Do not include any markdown "
    "formatting, code blocks, or explanations. Return only the raw commit message."
)


def format_file_list(files: list[str], limit: int = MAX_PROMPT_FILES) -> str:
    """Render files as a bulleted list, capped with an "... and N more files" line."""
    lines = [f"- {path}" for path in files[:limit]]
    if len(files) > limit:
        lines.append(f"... and {len(files) - limit} more files")
    return "\n".join(lines)


def truncate_patch(patch: str, max_bytes: int = MAX_PROMPT_PATCH_BYTES) -> str:
    """Truncate a patch to ``max_bytes`` UTF-8 bytes, marking the cut.

    A multi-byte character split by the cut is dropped.
    """
    encoded = patch.encode("utf-8")
    if len(encoded) <= max_bytes:
        return patch
    return encoded[:max_bytes].decode("utf-8", errors="ignore") + TRUNCATION_MARKER


def build_user_prompt(files: list[str], patch: str) -> str:
    """Build the user prompt for chat-style backends.

    Args:
        files: Changed file paths.
        patch: The unified diff text.

    Returns:
        The formatted user prompt.
    """
    parts = [
        "Analyze these code changes and generate a professional commit message.",
        "",
        "Files modified:",
        format_file_list(files),
        "",
    ]
    if len(files) > MULTI_FILE_THRESHOLD:
        parts += [MULTI_FILE_GUIDANCE]
    parts += [
        "Code changes (git diff):",
        truncate_patch(patch),
        "",
        RESPONSE_INSTRUCTION,
    ]
    return "\n".join(parts)


def build_completion_prompt(conventions: str, files: list[str], patch: str) -> str:
    """Build a single prompt for completion-style backends (no system role).

    Args:
        conventions: The conventions text.
        files: Changed file paths.
        patch: The unified diff text.

    Returns:
        The conventions followed by the user prompt.
    """
    return (
        "You are a professional software developer writing commit messages.\n\n"
        "Follow these commit message conventions:\n"
        f"{conventions}\n\n"
        f"{build_user_prompt(files, patch)}"
    )
