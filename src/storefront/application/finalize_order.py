"""Application service: Finalize Order (checkout) use case.

Turns cart entries into an Order. This is the only place that
coordinates multiple aggregates (User cart + Product prices + Order).
"""

from __future__ import annotations

import logging

from storefront.application.dto import OrderDTO
from storefront.application.references import ReferenceResolver
from storefront.domain.exceptions import EntityNotFoundError, InvalidArgumentError
from storefront.domain.model.order import Order, OrderItem
from storefront.domain.model.user import CartItem, User
from storefront.domain.model.value_objects import Address, Quantity
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.repository.user_repository import UserRepository
from storefront.domain.validation import validate

logger = logging.getLogger(__name__)


class FinalizeOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        user_repo: UserRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._order_repo = order_repo
        self._user_repo = user_repo
        self._product_repo = product_repo

    def handle(
        self,
        user_id: str,
        payment_method: str,
        product_ids: list[str] | None = None,
        shipping_address: Address | None = None,
        clear_cart: bool = False,
    ) -> OrderDTO:
        """Place an order for some or all of the user's cart.

        Steps:
        1. Pick the cart entries (all of them when ``product_ids`` is None).
        2. Build OrderItems with *current* product prices (snapshot).
        3. Let the Order aggregate validate all business rules.
        4. Persist; if ``clear_cart`` is set, drop the ordered entries
           from the cart. The cart is left alone otherwise.
        """
        user = self._user_repo.get_by_id(user_id)
        if user is None:
            raise EntityNotFoundError(f"User '{user_id}' not found")

        selected = self._select_cart_items(user, product_ids)

        items: list[OrderItem] = []
        for entry in selected:
            product = self._product_repo.get_by_id(entry.product_id)
            if product is None:
                raise EntityNotFoundError(
                    f"Product with ID '{entry.product_id}' not found"
                )
            items.append(
                OrderItem(
                    product_id=entry.product_id,
                    quantity=Quantity(entry.quantity),
                    price=product.price,  # <-- price snapshot
                )
            )

        order = Order.create(
            user_id=user_id,
            items=items,
            shipping_address=shipping_address or user.address,
            payment_method=payment_method,
        )
        validate(order)
        if clear_cart:
            for entry in selected:
                user.remove_from_cart(entry.product_id)
            validate(user)

        self._order_repo.save(order)
        logger.info(
            f"Order {order.id} placed by user {user_id}: "
            f"{order.item_count} items, {order.total_amount}"
        )

        if clear_cart:
            self._user_repo.save(user)
            logger.info(f"Cleared {len(selected)} cart entries for user {user_id}")

        return ReferenceResolver(self._product_repo, self._user_repo).order_to_dto(order)

    @staticmethod
    def _select_cart_items(user: User, product_ids: list[str] | None) -> list[CartItem]:
        if product_ids is None:
            return list(user.cart)

        selected: list[CartItem] = []
        for product_id in dict.fromkeys(product_ids):
            entry = user.cart_item(product_id)
            if entry is None:
                raise InvalidArgumentError(f"Product '{product_id}' is not in the cart")
            selected.append(entry)
        return selected
