"""Deterministic commit message classification from paths and patch text.

The classifier never performs I/O and never raises: it is the last step of
the fallback chain, so it must always produce a usable single-line message.
"""

from commitgen.heuristics.rules import (
    CHORE_CATEGORY,
    CONFIG_DEFAULT_MESSAGE,
    CONFIG_FILES,
    CONFIG_REFINEMENTS,
    DOC_DEFAULT_MESSAGE,
    DOC_FILES,
    DOC_REFINEMENTS,
    EMPTY_CHANGESET_MESSAGE,
    FEATURE_ADDITION_RATIO,
    FEATURE_CATEGORY,
    GENERIC_CATEGORIES,
    HUNK_HEADER_MARKER,
    MAX_NAMED_FILES,
    RENAME_FROM_MARKER,
    RENAME_TO_MARKER,
    TEST_ADD_MESSAGE,
    TEST_FILES,
    TEST_FIX_MESSAGE,
    TEST_UPDATE_MESSAGE,
    KeywordRule,
)


def count_line_changes(patch: str) -> tuple[int, int]:
    """Count added and removed lines in a unified diff.

    File header lines (``+++``/``---``) are not counted.

    Args:
        patch: The unified diff text.

    Returns:
        Tuple of (added, removed) line counts.
    """
    added = 0
    removed = 0
    for line in patch.splitlines():
        if line.startswith("+") and not line.startswith("+++"):
            added += 1
        elif line.startswith("-") and not line.startswith("---"):
            removed += 1
    return added, removed


def summarize_files(files: list[str], limit: int = MAX_NAMED_FILES) -> str:
    """Describe a file list as "a, b and N more files".

    Args:
        files: File paths in the order reported by git.
        limit: How many paths to spell out.

    Returns:
        A short human-readable summary.
    """
    shown = files[:min(limit, len(files))]
    summary = ", ".join(shown)
    remainder = len(files) - len(shown)
    if remainder > 0:
        summary += f" and {remainder} more files"
    return summary


def _first_match(rules: tuple[KeywordRule, ...], lowered_patch: str) -> str | None:
    for rule in rules:
        if rule.matches(lowered_patch):
            return rule.result
    return None


def _classify_tests(lowered_patch: str, patch: str) -> str:
    if "fix" in lowered_patch:
        return TEST_FIX_MESSAGE
    added, removed = count_line_changes(patch)
    if added > removed:
        return TEST_ADD_MESSAGE
    return TEST_UPDATE_MESSAGE


def is_pure_rename(patch: str) -> bool:
    """Check whether a patch only renames files.

    A rename with content changes carries hunk headers and is not a pure rename.
    """
    lowered = patch.lower()
    return (
        RENAME_FROM_MARKER in lowered
        and RENAME_TO_MARKER in lowered
        and HUNK_HEADER_MARKER not in patch
    )


def infer_category(patch: str) -> str:
    """Infer a conventional commit category for a mixed change set.

    Args:
        patch: The unified diff text.

    Returns:
        One of fix, perf, security, refactor, style, feat or chore.
    """
    category = _first_match(GENERIC_CATEGORIES, patch.lower())
    if category:
        return category

    added, removed = count_line_changes(patch)
    if added > FEATURE_ADDITION_RATIO * removed:
        return FEATURE_CATEGORY
    return CHORE_CATEGORY


def classify(files: list[str], patch: str) -> str:
    """Build a single-line commit message from changed files and the patch.

    Rules are tried in order and the first one that applies wins: tests,
    documentation, configuration, pure rename, then keyword-based categories.
    A file-set category only applies when every file belongs to it.

    Args:
        files: Changed file paths, in the order reported by git.
        patch: The (possibly truncated) unified diff.

    Returns:
        A non-empty commit message without newlines.
    """
    files = [f for f in files if f]
    patch = patch or ""

    if not files:
        return EMPTY_CHANGESET_MESSAGE

    lowered_patch = patch.lower()

    if TEST_FILES.matches_all(files):
        return _classify_tests(lowered_patch, patch)

    if DOC_FILES.matches_all(files):
        return _first_match(DOC_REFINEMENTS, lowered_patch) or DOC_DEFAULT_MESSAGE

    if CONFIG_FILES.matches_all(files):
        return _first_match(CONFIG_REFINEMENTS, lowered_patch) or CONFIG_DEFAULT_MESSAGE

    if is_pure_rename(patch):
        if len(files) == 1:
            message = f"refactor: rename {files[0]}"
        else:
            message = f"refactor: rename {len(files)} files"
        return _single_line(message)

    category = infer_category(patch)
    return _single_line(f"{category}: update {summarize_files(files)}")


def _single_line(message: str) -> str:
    # Paths can contain newlines in pathological cases
    return " ".join(message.splitlines())
