"""Application service: Apply Discount use case."""

from __future__ import annotations

import logging
from decimal import Decimal

from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.product import Product
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.validation import validate

logger = logging.getLogger(__name__)


class ApplyDiscountHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str, percentage: Decimal | int | float | str) -> Product:
        """Reduce the product price by *percentage* percent and persist it.

        Raises InvalidArgumentError unless 0 <= percentage <= 100.
        """
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        old_price = product.price
        product.apply_discount(percentage)
        validate(product)
        self._product_repo.save(product)

        logger.info(
            f"Discounted product {product_id} by {percentage}%: {old_price} -> {product.price}"
        )
        return product
