"""
Search module.

Case-insensitive substring filtering over item name and type, deterministic
ranking, and per-term memoization through the expiring cache.
"""
from .engine import SearchEngine, filter_items, matches_term, results_cache_key
from .ranking import rank_items, rank_key

__all__ = [
    "SearchEngine",
    "filter_items",
    "matches_term",
    "results_cache_key",
    "rank_items",
    "rank_key",
]
