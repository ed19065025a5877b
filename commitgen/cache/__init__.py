"""Cache module for commitgen.

This package provides a content-addressed store for generated messages so
identical change sets are not sent to an AI provider twice:
- models: CachedMessage record model
- paths: Functions for getting cache file paths
- utils: Content hash computation and retention window
- message: Record load/save/latest/clear operations
"""

# Models
from commitgen.cache.models import CachedMessage

# Path utilities
from commitgen.cache.paths import (
    get_cache_dir,
    get_record_file,
    iter_record_files,
)

# General utilities
from commitgen.cache.utils import (
    CACHE_KEY_LENGTH,
    CACHE_TTL,
    compute_cache_key,
)

# Message cache operations
from commitgen.cache.message import (
    clear_cache,
    load_cached_message,
    load_latest_message,
    save_cached_message,
)


__all__ = [
    # Models
    "CachedMessage",
    # Path utilities
    "get_cache_dir",
    "get_record_file",
    "iter_record_files",
    # General utilities
    "CACHE_KEY_LENGTH",
    "CACHE_TTL",
    "compute_cache_key",
    # Message cache operations
    "clear_cache",
    "load_cached_message",
    "load_latest_message",
    "save_cached_message",
]
