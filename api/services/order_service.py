"""Order use cases: list, create and delete orders in the orders collection."""

from __future__ import annotations

import logging
from typing import Callable

from api.core.errors import PersistenceError
from api.core.ids import IdentityAssigner
from api.core.utils import local_date_string, parse_int, record_id
from api.repositories.json_storage import CollectionStore

logger = logging.getLogger(__name__)

ORDER_STATUS_NEW = "New"


class OrderService:
    def __init__(
        self,
        store: CollectionStore,
        ids: IdentityAssigner,
        today: Callable[[], str] = local_date_string,
    ) -> None:
        self.store = store
        self.ids = ids
        self._today = today

    def list(self) -> list[dict]:
        return self.store.load()

    def create(self, payload: dict) -> dict:
        """
        Build a new order from the caller's fields.

        ``id``, ``date`` and ``status`` are always assigned here; any value the
        client sent for them is discarded. Everything else is stored as-is.
        """
        with self.store.locked():
            orders = self.store.load()
            order = {"id": self.ids.next_id(), "date": self._today()}
            order.update({k: v for k, v in (payload or {}).items() if k not in ("id", "date")})
            order["status"] = ORDER_STATUS_NEW
            orders.append(order)
            if not self.store.save(orders):
                raise PersistenceError("Error al guardar el pedido")
        logger.info("Order %s created", order["id"])
        return order

    def delete(self, raw_id: str | int) -> None:
        """Remove every order with this id. Deleting an absent id still succeeds."""
        order_id = parse_int(raw_id)
        with self.store.locked():
            orders = self.store.load()
            remaining = [o for o in orders if order_id is None or record_id(o) != order_id]
            if not self.store.save(remaining):
                raise PersistenceError("Error al eliminar el pedido")
        logger.info("Order %s deleted (%d removed)", raw_id, len(orders) - len(remaining))
