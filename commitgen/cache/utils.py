"""Cache utility functions for commitgen.

Contains:
- compute_cache_key: Content hash of a change set
- CACHE_TTL: Retention window for cached records
"""

import hashlib
from datetime import timedelta

# Length of the hex digest prefix used as a record identifier
CACHE_KEY_LENGTH = 16

# Records older than this are expired
CACHE_TTL = timedelta(hours=24)


def compute_cache_key(files: list[str], patch: str) -> str:
    """Compute the content hash of a change set.

    The digest covers the UTF-8 bytes of every file path, in order, followed
    by the full patch text.

    Args:
        files: Changed file paths, in the order reported by git.
        patch: The unified diff text.

    Returns:
        The first CACHE_KEY_LENGTH hex characters of the SHA256 digest.
    """
    digest = hashlib.sha256()
    for path in files:
        digest.update(path.encode("utf-8"))
    digest.update(patch.encode("utf-8"))
    return digest.hexdigest()[:CACHE_KEY_LENGTH]
