"""
Core utilities shared across the Garden Monitor package.

This package hosts:
- configuration helpers (env vars, storage backend, data paths)
- logging setup
- clock and timestamp helpers

Domain, repositories and services depend on these primitives instead of
reading os.environ or calling datetime.now() directly.
"""
