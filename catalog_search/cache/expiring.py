"""
Expiring cache over a string key-value store.

Each entry occupies two keys: the encoded payload under ``key`` and the
decimal epoch-ms write time under ``key + timestamp_suffix``. Absent,
expired and undecodable entries all read as a miss (None).
"""

from dataclasses import dataclass
from typing import Callable, Generic, Optional, TypeVar

from ..config.defaults import CacheParams
from ..data.models import Item
from ..data.parsers import items_from_json, items_to_json
from ..errors import CorruptCacheEntryError, DataQualityError
from ..logging.config import get_cache_logger, log_cache_lookup
from ..persistence.kv_store import KeyValueStore
from ..utils.time import format_epoch_ms, format_epoch_ms_iso, now_ms, parse_epoch_ms
from .entry import CacheEntry, is_entry_valid

T = TypeVar("T")

logger = get_cache_logger(__name__)


@dataclass(frozen=True)
class Codec(Generic[T]):
    """Encode/decode pair for cached values."""
    encode: Callable[[T], str]
    decode: Callable[[str], T]


ItemListCodec: Codec[list[Item]] = Codec(encode=items_to_json, decode=items_from_json)


class ExpiringCache(Generic[T]):
    """Time-based expiring cache; generic over the cached value type."""

    def __init__(
        self,
        store: KeyValueStore,
        codec: Codec[T],
        params: Optional[CacheParams] = None,
        clock: Callable[[], int] = now_ms,
    ) -> None:
        self.store = store
        self.codec = codec
        self.params = params or CacheParams()
        self.clock = clock

    @property
    def ttl_ms(self) -> int:
        return self.params.ttl_ms

    def timestamp_key(self, key: str) -> str:
        return f"{key}{self.params.timestamp_suffix}"

    def get(self, key: str) -> Optional[T]:
        """
        Return the cached value for key, or None on a miss.

        Expired entries are left in place; the next set() overwrites them.
        """
        entry = self.get_entry(key)
        return entry.value if entry is not None else None

    def get_entry(self, key: str) -> Optional[CacheEntry[T]]:
        """Return the full valid entry for key, or None on a miss."""
        raw_value = self.store.get(key)
        raw_timestamp = self.store.get(self.timestamp_key(key))

        if raw_value is None or raw_timestamp is None:
            log_cache_lookup(logger, key, hit=False, reason="absent")
            return None

        created_at = parse_epoch_ms(raw_timestamp)
        if created_at is None:
            logger.warning("Ignoring cache entry with unreadable timestamp", cache_key=key)
            log_cache_lookup(logger, key, hit=False, reason="corrupt")
            return None

        raw_entry = CacheEntry(value=raw_value, created_at=created_at)
        if not is_entry_valid(raw_entry, self.clock(), self.ttl_ms):
            log_cache_lookup(logger, key, hit=False, reason="expired")
            return None

        try:
            value = self._decode(key, raw_entry.value)
        except CorruptCacheEntryError as e:
            logger.warning("Ignoring corrupt cache entry", cache_key=key, error=str(e))
            log_cache_lookup(logger, key, hit=False, reason="corrupt")
            return None

        log_cache_lookup(logger, key, hit=True)
        return CacheEntry(value=value, created_at=created_at)

    def set(self, key: str, value: T) -> CacheEntry[T]:
        """Store value under key stamped with the current time."""
        entry = CacheEntry(value=value, created_at=self.clock())
        self.store.set(key, self.codec.encode(value))
        self.store.set(self.timestamp_key(key), format_epoch_ms(entry.created_at))

        logger.debug("Cache entry written", cache_key=key, created_at=format_epoch_ms_iso(entry.created_at))
        return entry

    def _decode(self, key: str, raw_value: str) -> T:
        try:
            return self.codec.decode(raw_value)
        except (DataQualityError, TypeError, ValueError, KeyError, RecursionError) as e:
            raise CorruptCacheEntryError(
                f"Cannot decode cache entry {key!r}: {e}",
                cache_key=key,
                raw_data=raw_value[:200]
            ) from e
