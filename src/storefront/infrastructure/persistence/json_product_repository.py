"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

from pathlib import Path

from storefront.domain.model.product import Product
from storefront.domain.queries import ProductFilter
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.service.catalog_statistics import (
    CategoryStats,
    summarize_by_category,
)
from storefront.infrastructure.persistence.documents import (
    product_from_document,
    product_to_document,
)
from storefront.infrastructure.persistence.json_store import JsonDocumentFile


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonDocumentFile(file_path, kind="Product")

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: str) -> Product | None:
        raw = self._file.get(product_id)
        return product_from_document(raw["id"], raw) if raw else None

    def list_all(self) -> list[Product]:
        return [product_from_document(raw["id"], raw) for raw in self._file.load()]

    def find(self, criteria: ProductFilter) -> list[Product]:
        return [p for p in self.list_all() if criteria.matches(p)]

    def page(self, skip: int, limit: int) -> list[Product]:
        newest_first = sorted(self.list_all(), key=lambda p: p.created_at, reverse=True)
        return newest_first[skip:skip + limit]

    def count(self) -> int:
        return len(self._file.load())

    def category_stats(self) -> list[CategoryStats]:
        return summarize_by_category(self.list_all())

    def save(self, product: Product) -> None:
        self._file.upsert(product, product_to_document(product))

    def delete(self, product_id: str) -> bool:
        return self._file.delete(product_id)
