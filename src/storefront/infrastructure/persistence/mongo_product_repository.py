"""MongoDB-backed implementation of ProductRepository."""

from __future__ import annotations

from typing import Any

from pymongo import DESCENDING
from pymongo.database import Database

from storefront.domain.model.product import Category, Product
from storefront.domain.queries import (
    CategoryFilter,
    PriceRangeFilter,
    ProductFilter,
    TextFilter,
)
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.service.catalog_statistics import (
    CategoryStats,
    average_price,
    sort_stats,
)
from storefront.infrastructure.persistence.documents import (
    product_from_document,
    product_to_document,
)
from storefront.infrastructure.persistence.mongo_collection import MongoCollection
from storefront.infrastructure.persistence.mongo_store import PRODUCTS


def filter_to_query(criteria: ProductFilter) -> dict[str, Any]:
    """Translate a domain filter into a MongoDB query document."""
    if isinstance(criteria, CategoryFilter):
        return {"category": criteria.category.value}
    if isinstance(criteria, PriceRangeFilter):
        return {
            "price": {
                "$gte": criteria.min_price.amount,
                "$lte": criteria.max_price.amount,
            }
        }
    if isinstance(criteria, TextFilter):
        # Served by the text index on name + description.
        return {"$text": {"$search": " ".join(criteria.tokens)}}
    raise TypeError(f"Unsupported product filter: {type(criteria).__name__}")


class MongoProductRepository(ProductRepository):

    def __init__(self, db: Database) -> None:
        self._docs = MongoCollection(db[PRODUCTS], kind="Product")

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: str) -> Product | None:
        doc = self._docs.get(product_id)
        return self._to_domain(doc) if doc else None

    def list_all(self) -> list[Product]:
        return [self._to_domain(doc) for doc in self._docs.collection.find()]

    def find(self, criteria: ProductFilter) -> list[Product]:
        cursor = self._docs.collection.find(filter_to_query(criteria))
        return [self._to_domain(doc) for doc in cursor]

    def page(self, skip: int, limit: int) -> list[Product]:
        cursor = (
            self._docs.collection.find()
            .sort("created_at", DESCENDING)
            .skip(skip)
            .limit(limit)
        )
        return [self._to_domain(doc) for doc in cursor]

    def count(self) -> int:
        return self._docs.collection.count_documents({})

    def category_stats(self) -> list[CategoryStats]:
        pipeline = [
            {
                "$group": {
                    "_id": "$category",
                    "count": {"$sum": 1},
                    "avg_price": {"$avg": "$price"},
                }
            },
            {"$sort": {"avg_price": -1}},
        ]
        stats = [
            CategoryStats(
                category=Category(row["_id"]),
                count=row["count"],
                average_price=average_price(row["avg_price"]),
            )
            for row in self._docs.collection.aggregate(pipeline)
        ]
        return sort_stats(stats)

    def save(self, product: Product) -> None:
        self._docs.upsert(product, product_to_document(product))

    def delete(self, product_id: str) -> bool:
        return self._docs.delete(product_id)

    @staticmethod
    def _to_domain(doc: dict[str, Any]) -> Product:
        return product_from_document(str(doc["_id"]), doc)
