"""Cache data models for commitgen.

Contains the Pydantic model for a persisted commit message record:
- CachedMessage: One generated message keyed by its content hash
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict


class CachedMessage(BaseModel):
    """A generated commit message stored under its content hash.

    The field set is the on-disk schema. Unknown fields written by newer
    versions are ignored on load.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    message: str
    files: list[str]
    content_hash: str
    timestamp: datetime
    provider: str  # "heuristics" or a backend name

    def age(self, now: Optional[datetime] = None) -> timedelta:
        """Return how long ago the record was created."""
        now = now or datetime.now(timezone.utc)
        timestamp = self.timestamp
        if timestamp.tzinfo is None:
            # Naive timestamps are treated as UTC
            timestamp = timestamp.replace(tzinfo=timezone.utc)
        return now - timestamp

    def is_expired(self, ttl: timedelta, now: Optional[datetime] = None) -> bool:
        """Check whether the record is older than the retention window."""
        return self.age(now) > ttl
