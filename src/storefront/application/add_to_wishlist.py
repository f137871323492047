"""Application service: Add To Wishlist use case."""

from __future__ import annotations

import logging

from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.user import User
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.repository.user_repository import UserRepository
from storefront.domain.validation import validate

logger = logging.getLogger(__name__)


class AddToWishlistHandler:

    def __init__(self, user_repo: UserRepository, product_repo: ProductRepository) -> None:
        self._user_repo = user_repo
        self._product_repo = product_repo

    def handle(self, user_id: str, product_id: str) -> User:
        """Add a product to the wishlist. Idempotent: a repeat add saves nothing."""
        user = self._user_repo.get_by_id(user_id)
        if user is None:
            raise EntityNotFoundError(f"User '{user_id}' not found")
        if self._product_repo.get_by_id(product_id) is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        if not user.add_to_wishlist(product_id):
            return user

        validate(user)
        self._user_repo.save(user)
        logger.info(f"User {user_id} wishlisted product {product_id}")
        return user
