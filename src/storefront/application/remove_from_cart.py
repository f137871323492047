"""Application service: Remove From Cart use case."""

from __future__ import annotations

import logging

from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.user import User
from storefront.domain.repository.user_repository import UserRepository
from storefront.domain.validation import validate

logger = logging.getLogger(__name__)


class RemoveFromCartHandler:

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def handle(self, user_id: str, product_id: str) -> User:
        """Remove the product from the cart; a no-op if it is not there.

        The product itself is not looked up, so entries for deleted
        products can still be removed.
        """
        user = self._user_repo.get_by_id(user_id)
        if user is None:
            raise EntityNotFoundError(f"User '{user_id}' not found")

        if not user.remove_from_cart(product_id):
            return user

        validate(user)
        self._user_repo.save(user)
        logger.info(f"User {user_id} removed product {product_id} from cart")
        return user
