"""Field-level validation for entities.

``validate()`` is called by the application layer before every save. It
checks required fields, numeric bounds, enum membership and string
patterns, raising the first ``ValidationError`` it finds. Email
uniqueness needs a storage lookup and is checked separately.
"""

from __future__ import annotations

import re

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.order import Order, OrderStatus
from storefront.domain.model.product import MAX_RATING, MIN_RATING, Category, Product
from storefront.domain.model.user import User
from storefront.domain.model.value_objects import Money, Quantity

EMAIL_PATTERN = re.compile(r"\S+@\S+\.\S+")
PHONE_PATTERN = re.compile(r"\d{10}")
MIN_PASSWORD_LENGTH = 6


def validate(entity: Product | User | Order) -> None:
    if isinstance(entity, Product):
        validate_product(entity)
    elif isinstance(entity, User):
        validate_user(entity)
    elif isinstance(entity, Order):
        validate_order(entity)
    else:
        raise TypeError(f"Cannot validate {type(entity).__name__}")


def validate_product(product: Product) -> None:
    _require_text(product.name, "name")
    _require_text(product.description, "description")

    if not isinstance(product.price, Money):
        raise ValidationError("Price is required", field="price")
    if not isinstance(product.category, Category):
        raise ValidationError("Category is required", field="category")
    if isinstance(product.quantity, bool) or not isinstance(product.quantity, int):
        raise ValidationError("Quantity must be an integer", field="quantity")
    if product.quantity < 0:
        raise ValidationError("Quantity cannot be negative", field="quantity")

    for tag in product.tags:
        if not isinstance(tag, str):
            raise ValidationError(f"Tag must be text, got {tag!r}", field="tags")

    for entry in product.ratings:
        if not MIN_RATING <= entry.rating <= MAX_RATING:
            raise ValidationError(
                f"Rating must be between {MIN_RATING} and {MAX_RATING}, got {entry.rating}",
                field="ratings",
            )


def validate_user(user: User) -> None:
    _require_text(user.first_name, "first_name")
    _require_text(user.last_name, "last_name")
    _require_text(user.email, "email")

    if not EMAIL_PATTERN.fullmatch(user.email):
        raise ValidationError("is invalid", field="email")

    if not user.password or len(user.password) < MIN_PASSWORD_LENGTH:
        raise ValidationError(
            f"Password must be at least {MIN_PASSWORD_LENGTH} characters",
            field="password",
        )

    if user.phone_number and not PHONE_PATTERN.fullmatch(user.phone_number):
        raise ValidationError("Phone number must be 10 digits", field="phone_number")

    if len(set(user.wishlist)) != len(user.wishlist):
        raise ValidationError("Wishlist contains duplicate products", field="wishlist")

    seen: set[str] = set()
    for item in user.cart:
        if item.product_id in seen:
            raise ValidationError(
                f"Cart has more than one entry for product '{item.product_id}'",
                field="cart",
            )
        seen.add(item.product_id)
        if item.quantity < 1:
            raise ValidationError("Cart quantity must be at least 1", field="cart")


def validate_order(order: Order) -> None:
    _require_text(order.user_id, "user_id")
    _require_text(order.payment_method, "payment_method")

    if not order.items:
        raise ValidationError("Order must contain at least one item", field="items")
    for item in order.items:
        if not isinstance(item.quantity, Quantity):
            raise ValidationError("Item quantity is required", field="items")
        if not isinstance(item.price, Money):
            raise ValidationError("Item price is required", field="items")

    if not isinstance(order.status, OrderStatus):
        raise ValidationError("Status is required", field="status")


def _require_text(value: str | None, field: str) -> None:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError("is required", field=field)
