"""
Configuration module.

Default parameters, YAML overrides and validation for the cache, search,
pagination and store layers.
"""
