"""
Centralized logging configuration for the catalog search system.

This module provides standardized logging configuration using structlog
for all components. Cache lookups, catalog loading and session events all
log through the loggers returned here so output stays uniformly structured.
"""
import logging
import sys
from typing import Optional

import structlog
from structlog.types import FilteringBoundLogger


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list] = None
) -> None:
    """
    Configure structlog for the entire application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON format; otherwise human-readable
        include_timestamp: Include timestamp in log output
        include_caller: Include caller information (filename, line number)
        extra_processors: Additional structlog processors to include
    """
    log_level = getattr(logging, level.upper())

    logging.basicConfig(
        level=log_level,
        stream=sys.stderr,
        format="%(message)s"  # structlog will handle formatting
    )

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[structlog.processors.CallsiteParameter.FILENAME,
                       structlog.processors.CallsiteParameter.LINENO]
        ))

    if extra_processors:
        processors.extend(extra_processors)

    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)


def get_cache_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger bound with cache subsystem context.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger for cache operations
    """
    return structlog.get_logger(name, subsystem="cache")


def log_cache_lookup(
    logger: FilteringBoundLogger,
    key: str,
    hit: bool,
    reason: Optional[str] = None
) -> None:
    """
    Log a cache lookup with standardized format.

    Args:
        logger: Structlog logger instance
        key: Cache key that was looked up
        hit: Whether a valid entry was found
        reason: Why the lookup missed (absent, expired, corrupt)
    """
    bound_logger = logger.bind(
        cache_key=key,
        cache_result="HIT" if hit else "MISS",
    )

    if reason:
        bound_logger = bound_logger.bind(reason=reason)

    bound_logger.debug("Cache lookup")
