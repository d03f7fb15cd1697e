"""Timestamped cache entry and the expiration check."""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class CacheEntry(Generic[T]):
    """A cached value paired with its creation time."""
    value: T
    created_at: int        # UTC epoch milliseconds

    def expires_at(self, ttl_ms: int) -> int:
        return self.created_at + ttl_ms


def is_entry_valid(entry: CacheEntry, now_ms: int, ttl_ms: int) -> bool:
    """An entry is valid strictly before created_at + ttl."""
    return now_ms < entry.expires_at(ttl_ms)
