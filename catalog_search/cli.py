"""Command-line entry point for searching the catalog.

Usage:
    catalog-search gold
    catalog-search chain --page 2
    catalog-search gold --store memory --log-level DEBUG
"""

import argparse
import sys
from pathlib import Path
from typing import Optional

from .app import CatalogSearchApp
from .config.loader import ConfigLoader
from .config.validation import ConfigValidator
from .errors import CatalogLoadError, PersistenceError
from .logging.config import configure_logging
from .presentation.console import render_page


def parse_args(args: Optional[list[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Args:
        args: Optional list of arguments (uses sys.argv if None)

    Returns:
        Parsed arguments namespace
    """
    parser = argparse.ArgumentParser(
        prog="catalog-search",
        description="Search the item catalog by name or type",
    )

    parser.add_argument("term", help="Search term (at least 2 characters)")

    parser.add_argument(
        "--page",
        "-p",
        type=int,
        default=1,
        help="Result page to show (default: 1)",
    )

    parser.add_argument(
        "--config-dir",
        type=Path,
        help="Directory containing search.yaml overrides",
    )

    parser.add_argument(
        "--catalog",
        type=Path,
        help="Catalog JSON file (default: bundled catalog)",
    )

    parser.add_argument(
        "--store",
        choices=["sqlite", "memory"],
        help="Cache store backend (overrides config)",
    )

    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (default: WARNING)",
    )

    return parser.parse_args(args)


def main(args: Optional[list[str]] = None) -> int:
    """Run one search and print the requested page."""
    parsed = parse_args(args)
    configure_logging(level=parsed.log_level)

    overrides: dict = {}
    if parsed.catalog is not None:
        overrides["catalog"] = {"source_path": str(parsed.catalog)}
    if parsed.store is not None:
        overrides["store"] = {"backend": parsed.store}

    loader = ConfigLoader.create(parsed.config_dir)
    errors = ConfigValidator.validate_config(loader.merge_config(overrides))
    if errors:
        for error in errors:
            print(f"Invalid config {error.field}: {error.message} (got: {error.value})", file=sys.stderr)
        return 2

    try:
        app = CatalogSearchApp.create(loader.build_config(overrides))
    except (CatalogLoadError, PersistenceError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    app.session.on_term_change(parsed.term)
    view = app.session.on_page_change(parsed.page)

    lines = render_page(view)
    if not lines:
        print("No results.")
        return 0

    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
