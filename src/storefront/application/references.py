"""Resolves stored ids to the entities they point at.

Deleting a product or user never cascades, so orders, carts and
wishlists may hold ids that no longer resolve. Read paths use this
resolver and render such references as "not found" rather than failing.
"""

from __future__ import annotations

from storefront.application.dto import (
    TIMESTAMP_FORMAT,
    CartLineDTO,
    OrderDTO,
    OrderItemDTO,
    ProductRefDTO,
    UserDTO,
)
from storefront.domain.model.order import Order
from storefront.domain.model.user import User
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.repository.user_repository import UserRepository


class ReferenceResolver:

    def __init__(
        self,
        product_repo: ProductRepository,
        user_repo: UserRepository | None = None,
    ) -> None:
        self._product_repo = product_repo
        self._user_repo = user_repo
        self._product_names: dict[str, str | None] = {}

    def product_name(self, product_id: str) -> str | None:
        if product_id not in self._product_names:
            product = self._product_repo.get_by_id(product_id)
            self._product_names[product_id] = product.name if product else None
        return self._product_names[product_id]

    def customer_name(self, user_id: str) -> str | None:
        if self._user_repo is None:
            return None
        user = self._user_repo.get_by_id(user_id)
        return user.full_name if user else None

    # --- Mapping --------------------------------------------------------------

    def user_to_dto(self, user: User) -> UserDTO:
        return UserDTO(
            id=user.id,  # type: ignore[arg-type]
            full_name=user.full_name,
            email=user.email,
            phone_number=user.phone_number,
            is_admin=user.is_admin,
            address=user.address.one_line(),
            wishlist=[
                ProductRefDTO(product_id=pid, product_name=self.product_name(pid))
                for pid in user.wishlist
            ],
            cart=[
                CartLineDTO(
                    product_id=item.product_id,
                    product_name=self.product_name(item.product_id),
                    quantity=item.quantity,
                )
                for item in user.cart
            ],
        )

    def order_to_dto(self, order: Order) -> OrderDTO:
        return OrderDTO(
            id=order.id,  # type: ignore[arg-type]
            user_id=order.user_id,
            customer_name=self.customer_name(order.user_id),
            status=order.status.value,
            items=[
                OrderItemDTO(
                    product_id=item.product_id,
                    product_name=self.product_name(item.product_id),
                    quantity=item.quantity.value,
                    price=str(item.price),
                    line_total=str(item.line_total),
                )
                for item in order.items
            ],
            item_count=order.item_count,
            total_amount=str(order.total_amount),
            shipping_address=order.shipping_address.one_line(),
            payment_method=order.payment_method,
            created_at=order.created_at.strftime(TIMESTAMP_FORMAT),
        )
