"""Application service: catalog queries (read-only)."""

from __future__ import annotations

import math

from storefront.application.dto import ProductDTO, ProductPageDTO, product_to_dto
from storefront.domain.exceptions import EntityNotFoundError, InvalidArgumentError
from storefront.domain.model.product import Category
from storefront.domain.model.value_objects import Money
from storefront.domain.queries import CategoryFilter, PriceRangeFilter, TextFilter
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.service.catalog_statistics import CategoryStats

DEFAULT_PAGE_SIZE = 10


class ProductQueries:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def get(self, product_id: str) -> ProductDTO:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")
        return product_to_dto(product)

    def by_category(self, category: str) -> list[ProductDTO]:
        criteria = CategoryFilter(Category.parse(category))
        return [product_to_dto(p) for p in self._product_repo.find(criteria)]

    def by_price_range(self, min_price: str, max_price: str) -> list[ProductDTO]:
        """Products priced within [min_price, max_price], both ends included."""
        criteria = PriceRangeFilter(Money.of(min_price), Money.of(max_price))
        return [product_to_dto(p) for p in self._product_repo.find(criteria)]

    def search(self, text: str) -> list[ProductDTO]:
        return [product_to_dto(p) for p in self._product_repo.find(TextFilter(text))]

    def page(self, page: int = 1, limit: int = DEFAULT_PAGE_SIZE) -> ProductPageDTO:
        """One page of the catalog, newest products first. Pages start at 1."""
        if page < 1:
            raise InvalidArgumentError(f"Page must be at least 1, got {page}")
        if limit < 1:
            raise InvalidArgumentError(f"Page size must be at least 1, got {limit}")

        total = self._product_repo.count()
        products = self._product_repo.page(skip=(page - 1) * limit, limit=limit)
        return ProductPageDTO(
            products=[product_to_dto(p) for p in products],
            total=total,
            total_pages=math.ceil(total / limit),
            current_page=page,
        )

    def category_stats(self) -> list[CategoryStats]:
        return self._product_repo.category_stats()
