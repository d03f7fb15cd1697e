"""
Utility functions module.

Time Semantics:
- Cache timestamps are integer epoch milliseconds (UTC)
- The wall clock is read through now_ms() so callers can inject a fake clock
"""
