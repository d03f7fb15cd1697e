"""Unit tests for pagination helpers."""

import pytest

from catalog_search.pagination import DEFAULT_PAGE_SIZE, page_count, paginate


class TestPageCount:
    """Test page_count."""

    @pytest.mark.parametrize("total,expected", [(0, 0), (1, 1), (15, 1), (16, 2), (37, 3), (45, 3)])
    def test_ceiling_division(self, total, expected):
        assert page_count(total, 15) == expected

    def test_default_page_size(self):
        assert DEFAULT_PAGE_SIZE == 15
        assert page_count(31) == 3

    def test_invalid_page_size(self):
        with pytest.raises(ValueError):
            page_count(10, 0)


class TestPaginate:
    """Test paginate slicing."""

    @pytest.fixture
    def results(self) -> list[int]:
        return list(range(37))

    def test_first_page(self, results):
        assert paginate(results, 15, 1) == list(range(15))

    def test_last_partial_page(self, results):
        page = paginate(results, 15, 3)
        assert len(page) == 7
        assert page == list(range(30, 37))

    def test_page_past_end_is_empty(self, results):
        assert paginate(results, 15, 4) == []

    @pytest.mark.parametrize("page", [0, -1])
    def test_page_before_start_is_empty(self, results, page):
        assert paginate(results, 15, page) == []

    def test_empty_sequence(self):
        assert paginate([], 15, 1) == []

    def test_returns_list_for_tuple_input(self):
        assert paginate((1, 2, 3), 2, 2) == [3]

    def test_invalid_page_size(self, results):
        with pytest.raises(ValueError):
            paginate(results, -3, 1)
