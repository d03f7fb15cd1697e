"""
Search engine with per-term result memoization.

Results are cached under the raw term, so terms differing only in case get
separate entries even though matching ignores case.
"""

from collections.abc import Iterable, Sequence
from typing import Optional

from ..config.defaults import CacheParams, SearchParams
from ..data.models import Item
from ..logging.config import get_logger
from ..cache.expiring import ExpiringCache
from .ranking import rank_items

logger = get_logger(__name__)


def results_cache_key(term: str, prefix: str = CacheParams.results_prefix) -> str:
    """Cache key for one search term."""
    return f"{prefix}{term}"


def matches_term(item: Item, needle: str) -> bool:
    """True if the lowercased needle occurs in the item's name or type."""
    return needle in item.name.lower() or needle in item.type.value.lower()


def filter_items(term: str, catalog: Iterable[Item]) -> list[Item]:
    """Keep items whose name or type contains term, ignoring case."""
    needle = term.lower()
    return [item for item in catalog if matches_term(item, needle)]


class SearchEngine:
    """Filters and ranks the catalog, memoizing ranked results per term."""

    def __init__(
        self,
        cache: ExpiringCache[list[Item]],
        params: Optional[SearchParams] = None,
    ) -> None:
        self.cache = cache
        self.params = params or SearchParams()
        self.logger = logger

    def cache_key(self, term: str) -> str:
        return results_cache_key(term, self.cache.params.results_prefix)

    def is_searchable(self, term: str) -> bool:
        return len(term) >= self.params.min_term_length

    def search(self, term: str, catalog: Sequence[Item]) -> list[Item]:
        """
        Return the ranked matches for term.

        Terms shorter than the minimum length return [] without touching the
        cache or the catalog. A cached result set is returned unchanged;
        otherwise the catalog is filtered, ranked and the result cached.

        Args:
            term: Raw search term as typed
            catalog: Catalog working copy

        Returns:
            Ranked list of matching items
        """
        if not self.is_searchable(term):
            return []

        key = self.cache_key(term)
        cached = self.cache.get(key)
        if cached is not None:
            self.logger.debug("Search served from cache", term=term, result_count=len(cached))
            return cached

        results = rank_items(filter_items(term, catalog))
        self.cache.set(key, results)

        self.logger.info(
            "Search computed",
            term=term,
            catalog_size=len(catalog),
            result_count=len(results)
        )
        return results
