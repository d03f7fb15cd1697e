"""Default configuration parameters for the catalog search system."""

from dataclasses import dataclass
from typing import Optional

FOURTEEN_DAYS_MS = 14 * 24 * 60 * 60 * 1000


@dataclass(frozen=True)
class CacheParams:
    """Expiring cache parameters shared by every entry kind."""
    ttl_ms: int = FOURTEEN_DAYS_MS                   # Entry lifetime
    dataset_key: str = "searchCache"                 # Snapshot entry key
    results_prefix: str = "searchResultsCache_"      # Per-term entry key prefix
    timestamp_suffix: str = "_timestamp"             # Companion timestamp key


@dataclass(frozen=True)
class SearchParams:
    """Search engine parameters."""
    min_term_length: int = 2


@dataclass(frozen=True)
class PaginationParams:
    """Pagination parameters."""
    page_size: int = 15


@dataclass(frozen=True)
class StoreParams:
    """Key-value store parameters."""
    backend: str = "sqlite"                          # "sqlite" or "memory"
    db_path: str = "catalog_cache.db"


@dataclass(frozen=True)
class CatalogParams:
    """Static catalog source parameters."""
    source_path: Optional[str] = None                # None means the bundled catalog


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    cache: CacheParams
    search: SearchParams
    pagination: PaginationParams
    store: StoreParams
    catalog: CatalogParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        cache=CacheParams(),
        search=SearchParams(),
        pagination=PaginationParams(),
        store=StoreParams(),
        catalog=CatalogParams(),
    )
