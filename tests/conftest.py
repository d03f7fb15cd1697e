"""Pytest configuration and shared fixtures."""

import pytest
from typing import Any, Callable, Dict

from catalog_search.cache.expiring import ExpiringCache, ItemListCodec
from catalog_search.config.defaults import CacheParams
from catalog_search.data.models import Item, ItemType, Market, Price
from catalog_search.persistence.kv_store import InMemoryStore

# 2023-01-01T12:00:00Z
BASE_TIME_MS = 1672574400000


class FakeClock:
    """Settable epoch-ms clock."""

    def __init__(self, now: int = BASE_TIME_MS):
        self.now = now

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int) -> None:
        self.now += ms


def build_item(
    id: int = 1,
    name: str = "Gold",
    type: ItemType = ItemType.ONCHAIN,
    market: Market = Market.US,
    high: float = 100.0,
    low: float = 90.0,
    last_traded_previous: float = 95.0,
    last_traded: float = 96.0,
    lot_size: str = "1",
    currency: str = "USD",
) -> Item:
    """Item factory with sensible defaults."""
    return Item(
        id=id,
        type=ItemType(type),
        price=Price(
            high=high,
            low=low,
            last_traded_previous=last_traded_previous,
            last_traded=last_traded,
        ),
        lot_size=lot_size,
        currency=currency,
        name=name,
        market=Market(market),
    )


@pytest.fixture
def make_item() -> Callable[..., Item]:
    """Factory fixture for catalog items."""
    return build_item


@pytest.fixture
def raw_item() -> Dict[str, Any]:
    """Catalog record in the static source layout."""
    return {
        "id": 7,
        "i": {
            "type": "OFFCHAIN",
            "price": {
                "high": 120.0,
                "low": 100.0,
                "lastTradedPrevious": 110.5,
                "lastTraded": 111.0,
            },
            "lotSize": "10",
            "currency": "CHF",
            "name": "Silver",
        },
        "market": "CH",
    }


@pytest.fixture
def sample_catalog() -> list[Item]:
    """Two-item catalog with distinct names, types and markets."""
    return [
        build_item(id=1, name="Gold", type=ItemType.ONCHAIN, market=Market.US),
        build_item(id=2, name="Silver", type=ItemType.OFFCHAIN, market=Market.CH),
    ]


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def memory_store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def item_cache(memory_store: InMemoryStore, clock: FakeClock) -> ExpiringCache:
    """Expiring item-list cache over an in-memory store and a fake clock."""
    return ExpiringCache(memory_store, ItemListCodec, params=CacheParams(), clock=clock)
