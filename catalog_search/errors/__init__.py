"""
Error classification for the catalog search system.

Data quality errors describe bad records or cache payloads and are handled
locally; system failures propagate to the caller.
"""

from .data_quality import (
    DataQualityError,
    MalformedDataError,
    MissingDataError,
    CorruptCacheEntryError,
)
from .system_failures import (
    SystemFailureError,
    CatalogLoadError,
    PersistenceError,
)

__all__ = [
    # Data Quality Errors
    "DataQualityError",
    "MalformedDataError",
    "MissingDataError",
    "CorruptCacheEntryError",
    # System Failures
    "SystemFailureError",
    "CatalogLoadError",
    "PersistenceError",
]
