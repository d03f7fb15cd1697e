#!/usr/bin/env python3
"""
Basic Usage Example - Catalog Search

This script demonstrates the catalog search core with an in-memory store.
It shows how to:
- Bootstrap the app (snapshot cache seeded from the bundled catalog)
- Feed term and page events into a session
- Render pages and observe cache hits on repeated terms

Run: python examples/basic_usage.py
"""

from catalog_search.app import CatalogSearchApp
from catalog_search.logging.config import configure_logging
from catalog_search.persistence.kv_store import InMemoryStore
from catalog_search.presentation.console import render_page


def show(title: str, lines: list[str]) -> None:
    print(f"\n=== {title} ===")
    if not lines:
        print("(nothing to show)")
    for line in lines:
        print(line)


def main() -> None:
    configure_logging(level="INFO")

    store = InMemoryStore()
    app = CatalogSearchApp.create(store=store)
    print(f"Catalog loaded: {len(app.catalog)} items")

    session = app.session

    # Single character: below the search threshold
    show("term 'g'", render_page(session.on_term_change("g")))

    # Type-based search spans many items and pages
    view = session.on_term_change("chain")
    show("term 'chain', page 1", render_page(view))
    show("term 'chain', page 2", render_page(session.on_page_change(2)))
    show(f"term 'chain', page {view.page_count + 1}", render_page(session.on_page_change(view.page_count + 1)))

    # Name search, then the same term again is served from the per-term cache
    show("term 'gold'", render_page(session.on_term_change("gold")))
    show("term 'gold' again", render_page(session.on_term_change("gold")))

    print("\nCached search terms:")
    for key in sorted(store.keys(app.config.cache.results_prefix)):
        if not key.endswith(app.config.cache.timestamp_suffix):
            print(f"  {key}")


if __name__ == "__main__":
    main()
