"""Fixed-size paging over ranked results."""

import math
from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")

DEFAULT_PAGE_SIZE = 15


def page_count(total: int, page_size: int = DEFAULT_PAGE_SIZE) -> int:
    """Number of pages needed for total items."""
    if page_size <= 0:
        raise ValueError(f"page_size must be positive, got {page_size}")
    return math.ceil(total / page_size)


def paginate(items: Sequence[T], page_size: int = DEFAULT_PAGE_SIZE, page: int = 1) -> list[T]:
    """
    Return the 1-based page of items.

    Pages before the first or past the last yield an empty list.
    """
    if page_size <= 0:
        raise ValueError(f"page_size must be positive, got {page_size}")
    if page < 1:
        return []

    start = (page - 1) * page_size
    return list(items[start:start + page_size])
