"""Errors raised by the catalog services and turned into JSON by the routers."""
from __future__ import annotations


class CatalogError(Exception):
    def __init__(self, message: str, code: str = "invalid", status_code: int = 400):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code


class NotFoundError(CatalogError):
    """The id or position does not exist in the collection."""

    def __init__(self, message: str):
        super().__init__(message, "not_found", 404)


class InvalidInputError(CatalogError):
    def __init__(self, message: str):
        super().__init__(message, "invalid", 400)


class PersistenceError(CatalogError):
    """The collection file could not be written; nothing was stored."""

    def __init__(self, message: str):
        super().__init__(message, "persistence", 500)


class CollectionReadError(CatalogError):
    """Raised instead of returning an empty collection when reads are strict."""

    def __init__(self, message: str):
        super().__init__(message, "corrupted", 500)
