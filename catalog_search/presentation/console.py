"""Plain-text rendering of result pages."""

from ..data.models import Item
from ..pricing import classify_item
from ..session import PageView


def format_price(value: float) -> str:
    """Render a price without a trailing .0 for whole numbers."""
    if value == int(value):
        return str(int(value))
    return f"{value:.2f}".rstrip("0")


def format_item_line(item: Item) -> str:
    """One result line: name, market, effective price and color class."""
    return (
        f"{item.display_name}  "
        f"Market: {item.market.value}, Price: {format_price(item.effective_price)} "
        f"[{classify_item(item).css_class}]"
    )


def format_pager(view: PageView) -> str:
    return f"Page {view.current_page} of {view.page_count}"


def render_page(view: PageView) -> list[str]:
    """
    Render a page as printable lines.

    An empty page renders nothing, including the pager.
    """
    if view.is_empty:
        return []

    lines = [format_item_line(item) for item in view.page_items]
    lines.append(format_pager(view))
    return lines
