"""Unit tests for logging configuration helpers."""

import logging
import structlog
from unittest.mock import Mock

from catalog_search.logging.config import (
    configure_logging, get_cache_logger, get_logger, log_cache_lookup
)


class TestConfigureLogging:
    """Test configure_logging."""

    def test_configures_structlog(self):
        configure_logging(level="DEBUG", format_json=True)

        config = structlog.get_config()
        assert config["wrapper_class"] is structlog.stdlib.BoundLogger
        assert isinstance(config["processors"][-1], structlog.processors.JSONRenderer)

    def test_console_renderer_by_default(self):
        configure_logging(level="INFO")
        assert isinstance(structlog.get_config()["processors"][-1], structlog.dev.ConsoleRenderer)

    def test_get_logger_returns_usable_logger(self):
        logger = get_logger("catalog_search.test")
        assert hasattr(logger, "info")
        assert hasattr(logger, "bind")

    def test_cache_logger_available(self):
        assert hasattr(get_cache_logger("catalog_search.test"), "debug")


class TestLogCacheLookup:
    """Test standardized cache lookup events."""

    def test_hit(self):
        logger = Mock()
        bound = logger.bind.return_value

        log_cache_lookup(logger, "searchCache", hit=True)

        logger.bind.assert_called_once_with(cache_key="searchCache", cache_result="HIT")
        bound.debug.assert_called_once_with("Cache lookup")

    def test_miss_with_reason(self):
        logger = Mock()
        bound = logger.bind.return_value
        rebound = bound.bind.return_value

        log_cache_lookup(logger, "k", hit=False, reason="expired")

        logger.bind.assert_called_once_with(cache_key="k", cache_result="MISS")
        bound.bind.assert_called_once_with(reason="expired")
        rebound.debug.assert_called_once_with("Cache lookup")
