"""School list use cases. Schools are plain names kept in insertion order."""

from __future__ import annotations

import logging
from typing import Any

from api.core.errors import InvalidInputError, NotFoundError, PersistenceError
from api.core.utils import parse_int
from api.repositories.json_storage import CollectionStore

logger = logging.getLogger(__name__)


class SchoolService:
    def __init__(self, store: CollectionStore) -> None:
        self.store = store

    def list(self) -> list[str]:
        return self.store.load()

    def create(self, name: Any) -> str:
        if not isinstance(name, str) or not name:
            raise InvalidInputError("Escuela inválida o ya existe")
        with self.store.locked():
            schools = self.store.load()
            if name in schools:
                raise InvalidInputError("Escuela inválida o ya existe")
            schools.append(name)
            if not self.store.save(schools):
                raise PersistenceError("Error al guardar la escuela")
        logger.info("School %r added", name)
        return name

    def delete(self, raw_index: str | int) -> str:
        """
        Remove the school at a zero-based position of the current list.

        Positions shift after every add/remove, so callers must hold a fresh
        listing.
        """
        index = parse_int(raw_index)
        with self.store.locked():
            schools = self.store.load()
            if index is None or not 0 <= index < len(schools):
                raise NotFoundError("Escuela no encontrada")
            removed = schools.pop(index)
            if not self.store.save(schools):
                raise PersistenceError("Error al eliminar la escuela")
        logger.info("School %r removed from position %d", removed, index)
        return removed
