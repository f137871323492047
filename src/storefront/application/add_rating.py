"""Application service: Add Rating use case."""

from __future__ import annotations

import logging

from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.product import Product
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.validation import validate

logger = logging.getLogger(__name__)


class AddRatingHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str, user_id: str, rating: int, review: str = "") -> Product:
        """Append a rating (1-5) stamped with the current time.

        ``user_id`` is stored as a reference and is not resolved here.
        """
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        product.add_rating(user_id=user_id, rating=rating, review=review)
        validate(product)
        self._product_repo.save(product)

        logger.info(
            f"User {user_id} rated product {product_id} {rating}/5 "
            f"(average now {product.average_rating:.2f})"
        )
        return product
