"""Static catalog source, read once at startup."""

import json
from pathlib import Path
from typing import Optional, Union

from ..errors import CatalogLoadError, DataQualityError
from ..logging.config import get_logger
from .models import Item
from .parsers import parse_items

logger = get_logger(__name__)

BUNDLED_CATALOG_PATH = Path(__file__).parent / "catalog.json"


def load_static_catalog(path: Optional[Union[str, Path]] = None) -> list[Item]:
    """
    Load the catalog from a JSON file.

    Args:
        path: Catalog file; the bundled catalog is used when omitted

    Returns:
        Parsed catalog items, in file order

    Raises:
        CatalogLoadError: If the file is missing, unreadable or holds invalid records
    """
    source = Path(path) if path is not None else BUNDLED_CATALOG_PATH

    try:
        with open(source, encoding="utf-8") as f:
            raw_items = json.load(f)
    except OSError as e:
        logger.error("Catalog file unreadable", source=str(source), error=str(e))
        raise CatalogLoadError(f"Cannot read catalog {source}: {e}", source=str(source)) from e
    except (ValueError, RecursionError) as e:
        logger.error("Catalog file is not valid JSON", source=str(source), error=str(e))
        raise CatalogLoadError(f"Invalid JSON in catalog {source}: {e}", source=str(source)) from e

    try:
        items = parse_items(raw_items)
    except DataQualityError as e:
        logger.error("Catalog contains invalid records", source=str(source), error=str(e))
        raise CatalogLoadError(f"Invalid record in catalog {source}: {e}", source=str(source)) from e

    _check_unique_ids(items, source)

    logger.info("Static catalog loaded", source=str(source), item_count=len(items))
    return items


def _check_unique_ids(items: list[Item], source: Path) -> None:
    seen: set[int] = set()
    for item in items:
        if item.id in seen:
            raise CatalogLoadError(f"Duplicate item id {item.id} in catalog {source}", source=str(source))
        seen.add(item.id)
