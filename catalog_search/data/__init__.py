"""
Catalog data module.

Immutable item records, parsing of the static catalog's JSON shape, and the
loader that reads the catalog once at startup.
"""
