"""Tests for console rendering of result pages."""

from catalog_search.data.models import ItemType, Market
from catalog_search.presentation.console import format_item_line, format_price, render_page
from catalog_search.session import PageView


class TestFormatting:
    """Test line formatting."""

    def test_format_price(self):
        assert format_price(4850.0) == "4850"
        assert format_price(9.5) == "9.5"
        assert format_price(9.75) == "9.75"

    def test_item_line(self, make_item):
        item = make_item(
            name="Gold", type=ItemType.ONCHAIN, market=Market.CH,
            high=100.0, last_traded_previous=9.5, lot_size="10",
        )
        assert format_item_line(item) == "Gold_ONCHAIN  Market: CH, Price: 95 [red]"


class TestRenderPage:
    """Test page rendering."""

    def test_empty_page_renders_nothing(self):
        assert render_page(PageView(page_items=[], current_page=4, page_count=3)) == []

    def test_page_with_pager(self, sample_catalog):
        lines = render_page(PageView(page_items=sample_catalog, current_page=1, page_count=2))

        assert len(lines) == 3
        assert lines[0].startswith("Gold_ONCHAIN")
        assert lines[-1] == "Page 1 of 2"
