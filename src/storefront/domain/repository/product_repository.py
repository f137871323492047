"""Abstract repository for Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, MongoDB, in-memory)
live in the infrastructure layer and in the tests.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.product import Product
from storefront.domain.queries import ProductFilter
from storefront.domain.service.catalog_statistics import CategoryStats


class ProductRepository(ABC):

    @abstractmethod
    def get_by_id(self, product_id: str) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog."""

    @abstractmethod
    def find(self, criteria: ProductFilter) -> list[Product]:
        """Return the products matching *criteria*, in storage order."""

    @abstractmethod
    def page(self, skip: int, limit: int) -> list[Product]:
        """Return one page of products, newest first."""

    @abstractmethod
    def count(self) -> int:
        """Return the number of products in the catalog."""

    @abstractmethod
    def category_stats(self) -> list[CategoryStats]:
        """Group products by category (count, average price), priciest first."""

    @abstractmethod
    def save(self, product: Product) -> None:
        """Insert or update a product.

        Assigns ``id`` on first save, stamps timestamps and bumps
        ``version``. Raises ConflictError if the stored version no
        longer matches the one the product was loaded at.
        """

    @abstractmethod
    def delete(self, product_id: str) -> bool:
        """Delete a product. Returns False if it did not exist."""
