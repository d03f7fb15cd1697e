"""
Presentation adapters.

Render PageView data for a terminal; not part of the search core.
"""
