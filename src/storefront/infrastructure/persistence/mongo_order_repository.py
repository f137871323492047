"""MongoDB-backed implementation of OrderRepository."""

from __future__ import annotations

from typing import Any

from pymongo import DESCENDING
from pymongo.database import Database

from storefront.domain.model.order import Order
from storefront.domain.repository.order_repository import OrderRepository
from storefront.infrastructure.persistence.documents import (
    order_from_document,
    order_to_document,
)
from storefront.infrastructure.persistence.mongo_collection import MongoCollection
from storefront.infrastructure.persistence.mongo_store import ORDERS


class MongoOrderRepository(OrderRepository):

    def __init__(self, db: Database) -> None:
        self._docs = MongoCollection(db[ORDERS], kind="Order")

    def get_by_id(self, order_id: str) -> Order | None:
        doc = self._docs.get(order_id)
        return self._to_domain(doc) if doc else None

    def list_all(self) -> list[Order]:
        return self._find({})

    def list_by_user(self, user_id: str) -> list[Order]:
        return self._find({"user_id": user_id})

    def save(self, order: Order) -> None:
        self._docs.upsert(order, order_to_document(order))

    def _find(self, query: dict[str, Any]) -> list[Order]:
        cursor = self._docs.collection.find(query).sort("created_at", DESCENDING)
        return [self._to_domain(doc) for doc in cursor]

    @staticmethod
    def _to_domain(doc: dict[str, Any]) -> Order:
        return order_from_document(str(doc["_id"]), doc)
