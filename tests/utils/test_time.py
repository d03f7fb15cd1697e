"""
Tests for epoch-millisecond time utilities.

Cache timestamps are stored as decimal strings, so parsing must reject
anything that is not an integer rather than raising.
"""

import pytest
from datetime import datetime, timezone, timedelta
from unittest.mock import patch

from catalog_search.utils.time import (
    now_ms, to_epoch_ms, from_epoch_ms, format_epoch_ms,
    parse_epoch_ms, format_epoch_ms_iso
)


class TestEpochConversion:
    """Test datetime <-> epoch-ms conversion."""

    def test_to_epoch_ms_utc(self):
        ts = datetime(2023, 1, 1, 12, 0, 0, tzinfo=timezone.utc)
        assert to_epoch_ms(ts) == 1672574400000

    def test_naive_datetime_treated_as_utc(self):
        naive = datetime(2023, 1, 1, 12, 0, 0)
        aware = datetime(2023, 1, 1, 12, 0, 0, tzinfo=timezone.utc)
        assert to_epoch_ms(naive) == to_epoch_ms(aware)

    def test_other_timezone_normalized(self):
        ts = datetime(2023, 1, 1, 14, 0, 0, tzinfo=timezone(timedelta(hours=2)))
        assert to_epoch_ms(ts) == 1672574400000

    def test_from_epoch_ms(self):
        result = from_epoch_ms(1672574400000)
        assert result == datetime(2023, 1, 1, 12, 0, 0, tzinfo=timezone.utc)

    def test_format_iso(self):
        assert format_epoch_ms_iso(1672574400000) == "2023-01-01T12:00:00+00:00"


class TestNowMs:
    """Test wall-clock reading."""

    def test_now_ms_uses_utc_wall_clock(self):
        with patch('catalog_search.utils.time.datetime') as mock_datetime:
            mock_datetime.now.return_value = datetime(2023, 1, 1, 12, 0, 0, tzinfo=timezone.utc)
            assert now_ms() == 1672574400000
            mock_datetime.now.assert_called_once_with(timezone.utc)


class TestTimestampStrings:
    """Test persisted timestamp encoding."""

    def test_format_is_decimal_string(self):
        assert format_epoch_ms(1672574400000) == "1672574400000"

    def test_parse_valid(self):
        assert parse_epoch_ms("1672574400000") == 1672574400000

    def test_parse_tolerates_whitespace(self):
        assert parse_epoch_ms(" 42 ") == 42

    @pytest.mark.parametrize("raw", [None, "", "abc", "12.5", "1e3", "[]", "1_000", "+5", "-5", "\u0663\u0664"])
    def test_parse_invalid_returns_none(self, raw):
        assert parse_epoch_ms(raw) is None
