"""Product filters.

Each filter is a plain predicate over a Product. In-memory repositories
apply ``matches()`` directly; the MongoDB repository translates the same
filters into query documents so the database can use its indexes.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from storefront.domain.exceptions import InvalidArgumentError
from storefront.domain.model.product import Category, Product
from storefront.domain.model.value_objects import Money


class ProductFilter:

    def matches(self, product: Product) -> bool:
        raise NotImplementedError


@dataclass(frozen=True)
class CategoryFilter(ProductFilter):
    category: Category

    def matches(self, product: Product) -> bool:
        return product.category == self.category


@dataclass(frozen=True)
class PriceRangeFilter(ProductFilter):
    """Inclusive at both ends."""

    min_price: Money
    max_price: Money

    def __post_init__(self) -> None:
        if self.min_price > self.max_price:
            raise InvalidArgumentError(
                f"Minimum price {self.min_price} is above maximum {self.max_price}"
            )

    def matches(self, product: Product) -> bool:
        return self.min_price <= product.price <= self.max_price


@dataclass(frozen=True)
class TextFilter(ProductFilter):
    """Matches when any search token occurs in the name or description."""

    text: str

    def __post_init__(self) -> None:
        if not self.tokens:
            raise InvalidArgumentError("Search text is required")

    @property
    def tokens(self) -> list[str]:
        return [t.lower() for t in re.split(r"\s+", self.text.strip()) if t]

    def matches(self, product: Product) -> bool:
        haystack = f"{product.name} {product.description}".lower()
        return any(token in haystack for token in self.tokens)
