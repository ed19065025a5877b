"""Commit message cache operations for commitgen.

Contains functions for caching generated commit messages:
- load_cached_message: Load the record for a change set, expiring it lazily
- save_cached_message: Write a record atomically
- load_latest_message: Load the most recently generated record
- clear_cache: Remove all records

Every failure here degrades to a cache miss or a False return value. Cache
problems must never stop message generation.
"""

import json
import logging
import os
import tempfile
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from commitgen.cache.models import CachedMessage
from commitgen.cache.paths import (
    RECORD_SUFFIX,
    TEMP_SUFFIX,
    get_cache_dir,
    get_record_file,
    iter_record_files,
)
from commitgen.cache.utils import CACHE_TTL, compute_cache_key

logger = logging.getLogger(__name__)


def _read_record(record_file: Path) -> Optional[CachedMessage]:
    """Read a record file, returning None if it is missing or corrupt."""
    try:
        data = json.loads(record_file.read_text(encoding="utf-8"))
        return CachedMessage(**data)
    except FileNotFoundError:
        return None
    except (OSError, json.JSONDecodeError, TypeError, ValidationError) as e:
        logger.debug("Skipping unreadable cache record %s: %s", record_file, e)
        return None


def load_cached_message(
    cache_dir: Path,
    files: list[str],
    patch: str,
    ttl: timedelta = CACHE_TTL,
    now: Optional[datetime] = None,
) -> Optional[CachedMessage]:
    """Load the cached record for a change set.

    An expired record is deleted and reported as a miss.

    Args:
        cache_dir: The cache directory.
        files: Changed file paths.
        patch: The unified diff text.
        ttl: Retention window.
        now: Current time (for tests). Defaults to the current UTC time.

    Returns:
        The CachedMessage, or None on a miss.
    """
    content_hash = compute_cache_key(files, patch)
    record_file = get_record_file(cache_dir, content_hash)

    cached = _read_record(record_file)
    if cached is None:
        logger.debug("Cache miss for %s", content_hash)
        return None

    if cached.is_expired(ttl, now):
        logger.debug("Cache entry %s expired, removing", content_hash)
        try:
            record_file.unlink()
        except FileNotFoundError:
            pass
        except OSError as e:
            logger.warning("Failed to remove expired cache entry %s: %s", record_file, e)
        return None

    logger.debug("Cache hit for %s", content_hash)
    return cached


def save_cached_message(
    cache_dir: Path,
    files: list[str],
    patch: str,
    message: str,
    provider: str,
    now: Optional[datetime] = None,
) -> bool:
    """Save a generated message for a change set.

    The record is written to a temporary file in the cache directory and
    renamed into place, so readers never observe a partial record. The last
    writer for a key wins.

    Args:
        cache_dir: The cache directory.
        files: Changed file paths.
        patch: The unified diff text.
        message: The final commit message.
        provider: "heuristics" or the backend name.
        now: Creation time (for tests). Defaults to the current UTC time.

    Returns:
        True if the record was written, False otherwise.
    """
    content_hash = compute_cache_key(files, patch)
    cached = CachedMessage(
        message=message,
        files=list(files),
        content_hash=content_hash,
        timestamp=now or datetime.now(timezone.utc),
        provider=provider,
    )

    temp_path = None
    try:
        directory = get_cache_dir(cache_dir)
        fd, temp_path = tempfile.mkstemp(
            dir=directory, prefix=f"{content_hash}.", suffix=TEMP_SUFFIX
        )
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(cached.model_dump_json(indent=2))
        os.replace(temp_path, get_record_file(directory, content_hash))
        temp_path = None
    except OSError as e:
        logger.warning("Failed to write cache entry %s: %s", content_hash, e)
        return False
    finally:
        if temp_path is not None:
            try:
                os.unlink(temp_path)
            except OSError:
                pass

    logger.debug("Cached message %s from %s", content_hash, provider)
    return True


def load_latest_message(
    cache_dir: Path,
    ttl: timedelta = CACHE_TTL,
    now: Optional[datetime] = None,
) -> Optional[CachedMessage]:
    """Load the most recently created live record.

    Scans every record. Corrupt records, records that vanish during the scan
    and expired records are skipped. Expired records are left on disk; they
    are only removed by a lookup of their own key.

    Args:
        cache_dir: The cache directory.
        ttl: Retention window.
        now: Current time (for tests).

    Returns:
        The newest CachedMessage, or None if there is none.
    """
    latest: Optional[CachedMessage] = None

    try:
        record_files = iter_record_files(cache_dir)
    except OSError as e:
        logger.warning("Failed to list cache directory %s: %s", cache_dir, e)
        return None

    for record_file in record_files:
        cached = _read_record(record_file)
        if cached is None or cached.is_expired(ttl, now):
            continue
        if latest is None or cached.age(now) < latest.age(now):
            latest = cached

    return latest


def clear_cache(cache_dir: Path) -> bool:
    """Remove every record (and stray temporary file) in the cache directory.

    Only files inside the cache directory are touched.

    Args:
        cache_dir: The cache directory.

    Returns:
        True if the cache is now empty, False if a file could not be removed.
    """
    if not cache_dir.is_dir():
        return True

    success = True
    for path in cache_dir.iterdir():
        if not path.is_file() or path.suffix not in (RECORD_SUFFIX, TEMP_SUFFIX):
            continue
        try:
            path.unlink()
        except FileNotFoundError:
            pass
        except OSError as e:
            logger.warning("Failed to remove cache file %s: %s", path, e)
            success = False
    return success
