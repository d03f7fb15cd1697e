"""Price color classification."""

from enum import Enum

from .data.models import Item


class PriceColor(str, Enum):
    """Direction of the effective price relative to the high."""
    DOWN = "down"
    NEUTRAL = "neutral"
    UP = "up"

    @property
    def css_class(self) -> str:
        """Display class name used by renderers."""
        return _CSS_CLASSES[self]


_CSS_CLASSES = {
    PriceColor.DOWN: "red",
    PriceColor.NEUTRAL: "grey",
    PriceColor.UP: "green",
}


def classify_price(effective_price: float, high_price: float) -> PriceColor:
    """Compare an effective price with the high price."""
    if effective_price < high_price:
        return PriceColor.DOWN
    if effective_price == high_price:
        return PriceColor.NEUTRAL
    return PriceColor.UP


def classify_item(item: Item) -> PriceColor:
    """Classify an item's effective price against its own high."""
    return classify_price(item.effective_price, item.price.high)
