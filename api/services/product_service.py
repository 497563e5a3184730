"""Product catalog use cases (list, create, partial update, delete)."""

from __future__ import annotations

import logging

from api.core.errors import NotFoundError, PersistenceError
from api.core.ids import IdentityAssigner
from api.core.utils import parse_int, record_id
from api.repositories.json_storage import CollectionStore

logger = logging.getLogger(__name__)

DEFAULT_PRODUCT_IMAGE = "fas fa-tshirt"


class ProductService:
    """Wraps the products collection; ids come from the shared IdentityAssigner."""

    def __init__(self, store: CollectionStore, ids: IdentityAssigner) -> None:
        self.store = store
        self.ids = ids

    def list(self) -> list[dict]:
        return self.store.load()

    def create(self, payload: dict) -> dict:
        product = dict(payload or {})
        product["id"] = self.ids.next_id()
        product["image"] = product.get("image") or DEFAULT_PRODUCT_IMAGE
        with self.store.locked():
            products = self.store.load()
            products.append(product)
            if not self.store.save(products):
                raise PersistenceError("Error al guardar el producto")
        logger.info("Product %s created", product["id"])
        return product

    def update(self, raw_id: str | int, payload: dict) -> dict:
        """
        Merge ``payload`` over the stored product.

        Fields not present in the payload keep their value. The stored ``id``
        always wins over an ``id`` sent in the payload.
        """
        product_id = parse_int(raw_id)
        with self.store.locked():
            products = self.store.load()
            index = self._index_of(products, product_id)
            if index is None:
                raise NotFoundError("Producto no encontrado")
            current = products[index]
            updated = {**current, **(payload or {}), "id": current["id"]}
            products[index] = updated
            if not self.store.save(products):
                raise PersistenceError("Error al actualizar el producto")
        logger.info("Product %s updated", updated["id"])
        return updated

    def delete(self, raw_id: str | int) -> None:
        product_id = parse_int(raw_id)
        with self.store.locked():
            products = self.store.load()
            remaining = [p for p in products if product_id is None or record_id(p) != product_id]
            if not self.store.save(remaining):
                raise PersistenceError("Error al eliminar el producto")
        logger.info("Product %s deleted (%d removed)", raw_id, len(products) - len(remaining))

    @staticmethod
    def _index_of(products: list, product_id: int | None) -> int | None:
        if product_id is None:
            return None
        for index, product in enumerate(products):
            if record_id(product) == product_id:
                return index
        return None
