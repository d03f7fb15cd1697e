"""
Canonical data models for catalog items.

Items are immutable once parsed. The catalog is read-only after load, so
the same Item instances flow through the snapshot cache, the search engine
and the presentation layer.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

LOT_SIZES = ("1", "10", "100")


class ItemType(str, Enum):
    """Trading venue an item is listed on."""
    PRIVATE = "PRIVATE"
    OFFCHAIN = "OFFCHAIN"
    ONCHAIN = "ONCHAIN"


class Market(str, Enum):
    """Market an item belongs to."""
    US = "US"
    CH = "CH"
    EU = "EU"
    IN = "IN"


@dataclass(frozen=True)
class Price:
    """Price levels for one item."""
    high: float
    low: float
    last_traded_previous: float
    last_traded: float

    def to_dict(self) -> dict[str, float]:
        """Serialize using the catalog's field names."""
        return {
            "high": self.high,
            "low": self.low,
            "lastTradedPrevious": self.last_traded_previous,
            "lastTraded": self.last_traded,
        }


@dataclass(frozen=True)
class Item:
    """One tradable instrument in the catalog."""
    id: int
    type: ItemType
    price: Price
    lot_size: str          # "1", "10" or "100"
    currency: str
    name: str
    market: Market

    @property
    def lot_multiplier(self) -> int:
        """Lot size as an integer quantity multiplier."""
        return int(self.lot_size)

    @property
    def effective_price(self) -> float:
        """Previous traded price scaled by lot size."""
        return self.price.last_traded_previous * self.lot_multiplier

    @property
    def price_deviation(self) -> float:
        """Absolute distance between the previous traded price and the high."""
        return abs(self.price.last_traded_previous - self.price.high)

    @property
    def display_name(self) -> str:
        return f"{self.name}_{self.type.value}"

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the nested shape used by the static catalog."""
        return {
            "id": self.id,
            "i": {
                "type": self.type.value,
                "price": self.price.to_dict(),
                "lotSize": self.lot_size,
                "currency": self.currency,
                "name": self.name,
            },
            "market": self.market.value,
        }
