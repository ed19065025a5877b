"""Heuristic commit message classification for commitgen.

This package provides the deterministic fallback used when no AI provider
is available or the provider call fails:
- rules: Static rule tables (path patterns, keyword families, wording)
- classifier: The ordered classification pipeline
"""

from commitgen.heuristics.classifier import (
    classify,
    count_line_changes,
    infer_category,
    is_pure_rename,
    summarize_files,
)

__all__ = [
    "classify",
    "count_line_changes",
    "infer_category",
    "is_pure_rename",
    "summarize_files",
]
