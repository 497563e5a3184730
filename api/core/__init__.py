"""
Core utilities shared across the Cylaba API.

- configuration helpers (env vars, data/static paths, storage flags)
- logging setup, error types, id generation and small parsing helpers

Services and repositories depend on these primitives instead of reading the
environment or FastAPI objects directly.
"""
