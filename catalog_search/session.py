"""
Search session state driven by presentation events.

Consumes term and page change events and exposes the current page of
ranked results as plain data. Search is re-run explicitly whenever the term
or the catalog object changes; page changes only re-slice.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field

from .data.models import Item
from .logging.config import get_logger
from .pagination import DEFAULT_PAGE_SIZE, page_count, paginate
from .search.engine import SearchEngine

logger = get_logger(__name__)


@dataclass(frozen=True)
class PageView:
    """One rendered page handed to the presentation layer."""
    page_items: list[Item]
    current_page: int
    page_count: int

    @property
    def is_empty(self) -> bool:
        return not self.page_items


@dataclass
class SearchState:
    """Transient per-session search state."""
    term: str = ""
    page: int = 1
    results: list[Item] = field(default_factory=list)


class SearchSession:
    """Applies term/page events to the search state."""

    def __init__(
        self,
        engine: SearchEngine,
        catalog: Sequence[Item],
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> None:
        self.engine = engine
        self.catalog = catalog
        self.page_size = page_size
        self.state = SearchState()

    def on_term_change(self, term: str) -> PageView:
        """Record a new term, reset to the first page and re-run search."""
        self.state.term = term
        self.state.page = 1
        self._recompute()
        return self.view()

    def on_page_change(self, page: int) -> PageView:
        """Move to another page of the current results."""
        self.state.page = page
        logger.debug("Page changed", term=self.state.term, page=page)
        return self.view()

    def set_catalog(self, catalog: Sequence[Item]) -> bool:
        """
        Swap the catalog working copy.

        Returns:
            True if the catalog object changed and results were recomputed
        """
        if catalog is self.catalog:
            return False

        self.catalog = catalog
        self._recompute()
        return True

    def view(self) -> PageView:
        """Current page of results."""
        return PageView(
            page_items=paginate(self.state.results, self.page_size, self.state.page),
            current_page=self.state.page,
            page_count=page_count(len(self.state.results), self.page_size),
        )

    def _recompute(self) -> None:
        self.state.results = self.engine.search(self.state.term, self.catalog)
        logger.debug(
            "Search results updated",
            term=self.state.term,
            result_count=len(self.state.results)
        )
