"""
Application bootstrap.

Wires the key-value store, the two cache tiers, the catalog snapshot, the
search engine and a session together:

Store → Expiring Cache → Snapshot (seeded from static catalog) → Search Engine → Session
"""

from typing import Callable, Optional

from .cache.expiring import ExpiringCache, ItemListCodec
from .cache.snapshot import DatasetSnapshotCache
from .config.defaults import DefaultConfig, get_default_config
from .data.models import Item
from .data.source import load_static_catalog
from .logging.config import get_logger
from .persistence.kv_store import KeyValueStore, create_store
from .search.engine import SearchEngine
from .session import SearchSession
from .utils.time import now_ms

logger = get_logger(__name__)


class CatalogSearchApp:
    """Owns the caches, the catalog working copy and the search session."""

    def __init__(
        self,
        config: DefaultConfig,
        store: KeyValueStore,
        catalog_loader: Optional[Callable[[], list[Item]]] = None,
        clock: Callable[[], int] = now_ms,
    ) -> None:
        self.config = config
        self.store = store
        self.cache: ExpiringCache[list[Item]] = ExpiringCache(
            store, ItemListCodec, params=config.cache, clock=clock
        )
        self.snapshot = DatasetSnapshotCache(self.cache)
        self.engine = SearchEngine(self.cache, params=config.search)
        self.catalog_loader = catalog_loader or (
            lambda: load_static_catalog(config.catalog.source_path)
        )
        self.catalog: list[Item] = []
        self.session = SearchSession(self.engine, self.catalog, config.pagination.page_size)

    @classmethod
    def create(
        cls,
        config: Optional[DefaultConfig] = None,
        store: Optional[KeyValueStore] = None,
        **kwargs
    ) -> "CatalogSearchApp":
        """Build the application and load the catalog snapshot."""
        config = config or get_default_config()
        if store is None:
            store = create_store(config.store.backend, config.store.db_path)

        app = cls(config, store, **kwargs)
        app.bootstrap()
        return app

    def bootstrap(self) -> list[Item]:
        """
        Resolve the catalog working copy from the snapshot cache.

        Raises:
            CatalogLoadError: If the snapshot misses and the static catalog fails to load
        """
        self.catalog = self.snapshot.load(self.catalog_loader)
        self.session.set_catalog(self.catalog)

        logger.info("Catalog search ready", item_count=len(self.catalog))
        return self.catalog
