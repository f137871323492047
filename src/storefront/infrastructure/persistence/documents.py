"""Entity <-> document mapping shared by the JSON and MongoDB stores.

Documents hold native Python values (Decimal, datetime). Each store
converts those to what it can persist: the JSON store writes strings,
the MongoDB store uses a Decimal128 codec and native BSON dates. The
``id`` is left out; each store keys documents its own way.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Any

from storefront.domain.model.order import Order, OrderItem, OrderStatus
from storefront.domain.model.product import Category, Product, ProductRating
from storefront.domain.model.user import CartItem, User
from storefront.domain.model.value_objects import Address, Money, Quantity


# --- Product ------------------------------------------------------------------


def product_to_document(product: Product) -> dict[str, Any]:
    return {
        "name": product.name,
        "description": product.description,
        "price": product.price.amount,
        "currency": product.price.currency,
        "category": product.category.value,
        "in_stock": product.in_stock,
        "quantity": product.quantity,
        "tags": list(product.tags),
        "ratings": [
            {
                "user_id": r.user_id,
                "rating": r.rating,
                "review": r.review,
                "date": r.date,
            }
            for r in product.ratings
        ],
        "image_url": product.image_url,
        "created_at": product.created_at,
        "updated_at": product.updated_at,
        "version": product.version,
    }


def product_from_document(product_id: str, doc: dict[str, Any]) -> Product:
    return Product(
        id=product_id,
        name=doc["name"],
        description=doc.get("description", ""),
        price=Money(_as_decimal(doc["price"]), doc.get("currency", "USD")),
        category=Category(doc["category"]),
        quantity=doc["quantity"],
        in_stock=doc.get("in_stock", True),
        tags=list(doc.get("tags", [])),
        ratings=[
            ProductRating(
                user_id=r["user_id"],
                rating=r["rating"],
                review=r.get("review", ""),
                date=_as_datetime(r["date"]),
            )
            for r in doc.get("ratings", [])
        ],
        image_url=doc.get("image_url"),
        created_at=_as_datetime(doc.get("created_at")),
        updated_at=_as_datetime(doc.get("updated_at")),
        version=doc.get("version", 0),
    )


# --- User ---------------------------------------------------------------------


def user_to_document(user: User) -> dict[str, Any]:
    return {
        "first_name": user.first_name,
        "last_name": user.last_name,
        "email": user.email,
        "password": user.password,
        "address": address_to_document(user.address),
        "phone_number": user.phone_number,
        "is_admin": user.is_admin,
        "wishlist": list(user.wishlist),
        "cart": [{"product_id": c.product_id, "quantity": c.quantity} for c in user.cart],
        "created_at": user.created_at,
        "updated_at": user.updated_at,
        "version": user.version,
    }


def user_from_document(user_id: str, doc: dict[str, Any]) -> User:
    return User(
        id=user_id,
        first_name=doc["first_name"],
        last_name=doc["last_name"],
        email=doc["email"],
        password=doc["password"],
        address=address_from_document(doc.get("address")),
        phone_number=doc.get("phone_number"),
        is_admin=doc.get("is_admin", False),
        wishlist=list(doc.get("wishlist", [])),
        cart=[CartItem(product_id=c["product_id"], quantity=c["quantity"]) for c in doc.get("cart", [])],
        created_at=_as_datetime(doc.get("created_at")),
        updated_at=_as_datetime(doc.get("updated_at")),
        version=doc.get("version", 0),
    )


# --- Order --------------------------------------------------------------------


def order_to_document(order: Order) -> dict[str, Any]:
    return {
        "user_id": order.user_id,
        "items": [
            {
                "product_id": item.product_id,
                "quantity": item.quantity.value,
                "price": item.price.amount,
                "currency": item.price.currency,
            }
            for item in order.items
        ],
        "shipping_address": address_to_document(order.shipping_address),
        "payment_method": order.payment_method,
        "status": order.status.value,
        "created_at": order.created_at,
        "updated_at": order.updated_at,
        "version": order.version,
    }


def order_from_document(order_id: str, doc: dict[str, Any]) -> Order:
    items = [
        OrderItem(
            product_id=i["product_id"],
            quantity=Quantity(i["quantity"]),
            price=Money(_as_decimal(i["price"]), i.get("currency", "USD")),
        )
        for i in doc["items"]
    ]
    return Order(
        id=order_id,
        user_id=doc["user_id"],
        items=items,
        shipping_address=address_from_document(doc.get("shipping_address")),
        payment_method=doc["payment_method"],
        status=OrderStatus(doc["status"]),
        created_at=_as_datetime(doc["created_at"]),
        updated_at=_as_datetime(doc.get("updated_at")),
        version=doc.get("version", 0),
    )


# --- Address ------------------------------------------------------------------


def address_to_document(address: Address) -> dict[str, str]:
    return {
        "street": address.street,
        "city": address.city,
        "state": address.state,
        "zip_code": address.zip_code,
        "country": address.country,
    }


def address_from_document(doc: dict[str, str] | None) -> Address:
    doc = doc or {}
    return Address(
        street=doc.get("street") or "",
        city=doc.get("city") or "",
        state=doc.get("state") or "",
        zip_code=doc.get("zip_code") or "",
        country=doc.get("country") or "",
    )


# --- Scalars ------------------------------------------------------------------


def _as_decimal(value: Any) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def _as_datetime(value: Any) -> datetime | None:
    if value is None or isinstance(value, datetime):
        return value
    return datetime.fromisoformat(value)
