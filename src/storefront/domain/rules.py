"""Derived-value rules.

Pure projections computed from current entity state. They are recomputed
on every read and never written to storage; entity properties delegate
here.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from storefront.domain.model.value_objects import Money

if TYPE_CHECKING:
    from storefront.domain.model.order import Order
    from storefront.domain.model.product import Product
    from storefront.domain.model.user import User


def average_rating(product: Product) -> float:
    """Arithmetic mean of the product's rating values, 0 when unrated."""
    if not product.ratings:
        return 0
    return sum(r.rating for r in product.ratings) / len(product.ratings)


def is_in_stock(product: Product) -> bool:
    return product.quantity > 0


def display_name(product: Product) -> str:
    return f"{product.name} - {product.price}"


def full_name(user: User) -> str:
    return f"{user.first_name} {user.last_name}"


def item_count(order: Order) -> int:
    return sum(item.quantity.value for item in order.items)


def total_amount(order: Order) -> Money:
    result = Money.zero()
    for item in order.items:
        result = result + item.line_total
    return result
