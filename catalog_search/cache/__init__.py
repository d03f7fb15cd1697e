"""
Expiring cache module.

One generic timestamped entry type and one expiration check, shared by the
dataset snapshot and the per-term search result caches.
"""
from .entry import CacheEntry, is_entry_valid
from .expiring import ExpiringCache, ItemListCodec
from .snapshot import DatasetSnapshotCache

__all__ = [
    "CacheEntry",
    "is_entry_valid",
    "ExpiringCache",
    "ItemListCodec",
    "DatasetSnapshotCache",
]
