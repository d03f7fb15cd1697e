"""Ranking of search matches."""

import locale
from collections.abc import Iterable

from ..data.models import Item


def rank_key(item: Item) -> tuple[str, float]:
    """
    Sort key for a matching item.

    Ordering:
    1. Market, using the process locale's collation
    2. Ascending distance between the previous traded price and the high
    """
    return locale.strxfrm(item.market.value), item.price_deviation


def rank_items(items: Iterable[Item]) -> list[Item]:
    """Stable-sort items by rank_key; ties keep their input order."""
    return sorted(items, key=rank_key)
