"""
Core utilities shared across the bookstore API.

This package hosts configuration helpers (env vars, data file path, server
address) and the logging setup. Routers and services depend on these
primitives instead of reading os.environ directly.
"""
