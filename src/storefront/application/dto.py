"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world. Money is pre-formatted
(e.g. "$15.00"); references that no longer resolve carry ``None``
instead of a name.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.model.product import Product

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M UTC"


@dataclass(frozen=True)
class ProductDTO:
    id: str
    name: str
    description: str
    price: str
    category: str
    quantity: int
    in_stock: bool
    is_in_stock: bool
    tags: list[str]
    average_rating: float
    rating_count: int
    display_name: str


@dataclass(frozen=True)
class ProductPageDTO:
    products: list[ProductDTO]
    total: int
    total_pages: int
    current_page: int


@dataclass(frozen=True)
class ProductRefDTO:
    """A referenced product; ``product_name`` is None when it was deleted."""

    product_id: str
    product_name: str | None


@dataclass(frozen=True)
class CartLineDTO:
    product_id: str
    product_name: str | None
    quantity: int


@dataclass(frozen=True)
class UserDTO:
    id: str
    full_name: str
    email: str
    phone_number: str | None
    is_admin: bool
    address: str
    wishlist: list[ProductRefDTO]
    cart: list[CartLineDTO]


@dataclass(frozen=True)
class OrderItemDTO:
    product_id: str
    product_name: str | None
    quantity: int
    price: str
    line_total: str


@dataclass(frozen=True)
class OrderDTO:
    id: str
    user_id: str
    customer_name: str | None
    status: str
    items: list[OrderItemDTO]
    item_count: int
    total_amount: str
    shipping_address: str
    payment_method: str
    created_at: str


def product_to_dto(product: Product) -> ProductDTO:
    return ProductDTO(
        id=product.id,  # type: ignore[arg-type]
        name=product.name,
        description=product.description,
        price=str(product.price),
        category=product.category.value,
        quantity=product.quantity,
        in_stock=product.in_stock,
        is_in_stock=product.is_in_stock(),
        tags=list(product.tags),
        average_rating=product.average_rating,
        rating_count=len(product.ratings),
        display_name=product.display_name,
    )
