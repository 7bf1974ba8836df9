"""
Timestamped cache entries held by the purifier client.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass
class CacheEntry(Generic[T]):
    """A cached response body and the clock time it was stored at."""

    body: T
    time: float

    def is_fresh(self, now: float, ttl: float) -> bool:
        """Return True while the entry is strictly younger than *ttl* seconds."""
        return self.time > now - ttl
