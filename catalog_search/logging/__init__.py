"""
Logging configuration and utilities for the catalog search system.
"""
from .config import configure_logging, get_cache_logger, get_logger, log_cache_lookup

__all__ = ["configure_logging", "get_logger", "get_cache_logger", "log_cache_lookup"]
