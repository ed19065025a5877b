"""Cache file path utilities for commitgen.

Contains functions for getting paths inside the cache directory:
- get_cache_dir: Get (and create) the cache directory
- get_record_file: Get path to the record for a content hash
- iter_record_files: List every record file in the cache directory
"""

from pathlib import Path

RECORD_SUFFIX = ".json"
TEMP_SUFFIX = ".tmp"


def get_cache_dir(cache_dir: Path) -> Path:
    """Return the cache directory, creating it if needed.

    Creation is idempotent and tolerates a directory created concurrently
    by another process.

    Args:
        cache_dir: The configured cache directory.

    Returns:
        Path to the cache directory.
    """
    cache_dir.mkdir(parents=True, exist_ok=True)
    return cache_dir


def get_record_file(cache_dir: Path, content_hash: str) -> Path:
    """Return path to the record file for a content hash.

    Args:
        cache_dir: The configured cache directory.
        content_hash: The record's content hash.

    Returns:
        Path to <content_hash>.json.
    """
    return cache_dir / f"{content_hash}{RECORD_SUFFIX}"


def iter_record_files(cache_dir: Path) -> list[Path]:
    """Return every record file in the cache directory.

    Temporary files from in-flight writes are not records and are skipped.

    Args:
        cache_dir: The configured cache directory.

    Returns:
        Record paths, or an empty list if the directory does not exist.
    """
    if not cache_dir.is_dir():
        return []
    return sorted(
        path for path in cache_dir.iterdir()
        if path.suffix == RECORD_SUFFIX and path.is_file()
    )
