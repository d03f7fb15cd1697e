"""
Catalog Search - Incremental search over a fixed catalog of tradable items.

Filters the catalog by name or venue type, ranks matches by market and
price deviation, and pages through the results. Both the dataset snapshot
and every distinct search term are memoized in an expiring cache backed by
a persistent key-value store.
"""

__version__ = "0.1.0"
__author__ = "Catalog Search Team"
