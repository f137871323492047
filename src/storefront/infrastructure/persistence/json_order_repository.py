"""JSON-file-backed implementation of OrderRepository."""

from __future__ import annotations

from pathlib import Path

from storefront.domain.model.order import Order
from storefront.domain.repository.order_repository import OrderRepository
from storefront.infrastructure.persistence.documents import (
    order_from_document,
    order_to_document,
)
from storefront.infrastructure.persistence.json_store import JsonDocumentFile


class JsonOrderRepository(OrderRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonDocumentFile(file_path, kind="Order")

    # --- OrderRepository interface --------------------------------------------

    def get_by_id(self, order_id: str) -> Order | None:
        raw = self._file.get(order_id)
        return order_from_document(raw["id"], raw) if raw else None

    def list_all(self) -> list[Order]:
        orders = [order_from_document(raw["id"], raw) for raw in self._file.load()]
        return sorted(orders, key=lambda o: o.created_at, reverse=True)

    def list_by_user(self, user_id: str) -> list[Order]:
        return [o for o in self.list_all() if o.user_id == user_id]

    def save(self, order: Order) -> None:
        self._file.upsert(order, order_to_document(order))
