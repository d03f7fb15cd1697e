"""
Parsers converting raw catalog records into Item objects.

Raw records use the static catalog's nested layout:

{
    "id": 1,
    "i": {
        "type": "ONCHAIN",
        "price": {"high": 10.0, "low": 8.0, "lastTradedPrevious": 9.5, "lastTraded": 9.7},
        "lotSize": "10",
        "currency": "USD",
        "name": "Gold"
    },
    "market": "US"
}
"""

import json
from typing import Any

from ..errors import MalformedDataError, MissingDataError
from .models import LOT_SIZES, Item, ItemType, Market, Price

PRICE_FIELDS = {
    "high": "high",
    "low": "low",
    "lastTradedPrevious": "last_traded_previous",
    "lastTraded": "last_traded",
}


def parse_item(raw: dict[str, Any]) -> Item:
    """
    Parse a single raw catalog record.

    Args:
        raw: Record in the static catalog layout

    Returns:
        Parsed Item

    Raises:
        MissingDataError: If a required field is absent
        MalformedDataError: If a field has the wrong type or value
    """
    if not isinstance(raw, dict):
        raise MalformedDataError(
            "Catalog record must be an object",
            raw_data=repr(raw)[:200],
            expected_format="object"
        )

    for field_name in ("id", "i", "market"):
        if field_name not in raw:
            raise MissingDataError(f"Catalog record missing '{field_name}'", data_type=field_name)

    item_id = raw["id"]
    if not isinstance(item_id, int) or isinstance(item_id, bool):
        raise MalformedDataError(f"Item id must be an integer, got {item_id!r}", expected_format="int")

    body = raw["i"]
    if not isinstance(body, dict):
        raise MalformedDataError(f"Item {item_id}: 'i' must be an object", expected_format="object")

    for field_name in ("type", "price", "lotSize", "currency", "name"):
        if field_name not in body:
            raise MissingDataError(f"Item {item_id} missing 'i.{field_name}'", data_type=field_name)

    try:
        item_type = ItemType(body["type"])
    except ValueError:
        raise MalformedDataError(f"Item {item_id}: unknown type {body['type']!r}", expected_format="ItemType")

    try:
        market = Market(raw["market"])
    except ValueError:
        raise MalformedDataError(f"Item {item_id}: unknown market {raw['market']!r}", expected_format="Market")

    lot_size = str(body["lotSize"])
    if lot_size not in LOT_SIZES:
        raise MalformedDataError(f"Item {item_id}: invalid lot size {body['lotSize']!r}", expected_format="lotSize")

    for field_name in ("currency", "name"):
        if not isinstance(body[field_name], str):
            raise MalformedDataError(f"Item {item_id}: '{field_name}' must be a string", expected_format="str")

    return Item(
        id=item_id,
        type=item_type,
        price=_parse_price(item_id, body["price"]),
        lot_size=lot_size,
        currency=body["currency"],
        name=body["name"],
        market=market,
    )


def _parse_price(item_id: int, raw_price: Any) -> Price:
    """Parse the nested price block of a record."""
    if not isinstance(raw_price, dict):
        raise MalformedDataError(f"Item {item_id}: 'price' must be an object", expected_format="object")

    values = {}
    for raw_name, attr_name in PRICE_FIELDS.items():
        if raw_name not in raw_price:
            raise MissingDataError(f"Item {item_id} missing price '{raw_name}'", data_type=raw_name)

        value = raw_price[raw_name]
        if not isinstance(value, (int, float)) or isinstance(value, bool):
            raise MalformedDataError(
                f"Item {item_id}: price '{raw_name}' must be a number, got {value!r}",
                expected_format="number"
            )
        if value < 0:
            raise MalformedDataError(
                f"Item {item_id}: price '{raw_name}' must be non-negative, got {value}",
                expected_format="number >= 0"
            )
        values[attr_name] = float(value)

    return Price(**values)


def parse_items(raw_items: Any) -> list[Item]:
    """
    Parse a list of raw catalog records.

    Raises:
        MalformedDataError: If the payload is not a list or any record is invalid
        MissingDataError: If any record lacks a required field
    """
    if not isinstance(raw_items, list):
        raise MalformedDataError(
            "Catalog payload must be a list",
            raw_data=repr(raw_items)[:200],
            expected_format="array"
        )

    return [parse_item(raw) for raw in raw_items]


def items_to_json(items: list[Item]) -> str:
    """Serialize items to a JSON array string."""
    return json.dumps([item.to_dict() for item in items])


def items_from_json(payload: str) -> list[Item]:
    """
    Deserialize a JSON array string into items.

    Raises:
        MalformedDataError: If the string is not valid JSON or holds invalid records
    """
    try:
        raw_items = json.loads(payload)
    except (TypeError, ValueError, RecursionError) as e:
        raise MalformedDataError(f"Invalid JSON payload: {e}", raw_data=str(payload)[:200], expected_format="json")

    return parse_items(raw_items)
