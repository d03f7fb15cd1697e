"""Dataset snapshot cache: one entry holding the whole catalog."""

from typing import Callable

from ..data.models import Item
from ..logging.config import get_cache_logger
from .expiring import ExpiringCache

logger = get_cache_logger(__name__)


class DatasetSnapshotCache:
    """Seeds the snapshot entry from the static source on a miss."""

    def __init__(self, cache: ExpiringCache[list[Item]]) -> None:
        self.cache = cache

    @property
    def key(self) -> str:
        return self.cache.params.dataset_key

    def load(self, loader: Callable[[], list[Item]]) -> list[Item]:
        """
        Return the catalog working copy.

        Args:
            loader: Reads the static catalog; called only on a snapshot miss

        Returns:
            The cached snapshot if valid, otherwise the freshly loaded catalog

        Raises:
            CatalogLoadError: Propagated from loader when the static source fails
        """
        cached = self.cache.get(self.key)
        if cached is not None:
            logger.info("Dataset snapshot served from cache", item_count=len(cached))
            return cached

        catalog = loader()
        self.cache.set(self.key, catalog)

        logger.info("Dataset snapshot seeded from static source", item_count=len(catalog))
        return catalog
