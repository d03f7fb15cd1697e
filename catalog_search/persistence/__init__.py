"""
Persistence module.

String-keyed, string-valued stores backing the expiring cache.
"""
