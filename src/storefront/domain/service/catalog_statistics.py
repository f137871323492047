"""Domain service: per-category catalog statistics.

Groups products by category with a count and the average price, most
expensive category first. Repositories that cannot push the grouping
down to the database use ``summarize_by_category``.
"""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from storefront.domain.model.product import Category, Product
from storefront.domain.model.value_objects import CENTS, Money


@dataclass(frozen=True)
class CategoryStats:
    category: Category
    count: int
    average_price: Money


def summarize_by_category(products: list[Product]) -> list[CategoryStats]:
    grouped: dict[Category, list[Decimal]] = defaultdict(list)
    for product in products:
        grouped[product.category].append(product.price.amount)

    stats = [
        CategoryStats(
            category=category,
            count=len(prices),
            average_price=average_price(sum(prices) / len(prices)),
        )
        for category, prices in grouped.items()
    ]
    return sort_stats(stats)


def average_price(amount: Decimal | float) -> Money:
    return Money(Decimal(str(amount)).quantize(CENTS, rounding=ROUND_HALF_UP))


def sort_stats(stats: list[CategoryStats]) -> list[CategoryStats]:
    return sorted(stats, key=lambda s: (-s.average_price.amount, s.category.value))
