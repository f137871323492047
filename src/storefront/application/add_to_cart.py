"""Application service: Add To Cart use case.

A product occupies at most one cart entry; adding it again increases
the quantity of that entry.
"""

from __future__ import annotations

import logging

from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.user import User
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.repository.user_repository import UserRepository
from storefront.domain.validation import validate

logger = logging.getLogger(__name__)


class AddToCartHandler:

    def __init__(self, user_repo: UserRepository, product_repo: ProductRepository) -> None:
        self._user_repo = user_repo
        self._product_repo = product_repo

    def handle(self, user_id: str, product_id: str, quantity: int = 1) -> User:
        user = self._user_repo.get_by_id(user_id)
        if user is None:
            raise EntityNotFoundError(f"User '{user_id}' not found")
        if self._product_repo.get_by_id(product_id) is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        item = user.add_to_cart(product_id, quantity)
        validate(user)
        self._user_repo.save(user)

        logger.info(f"User {user_id} cart: product {product_id} x{item.quantity}")
        return user
