"""Application service: Adjust Stock use case."""

from __future__ import annotations

import logging

from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.product import Product
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.validation import validate

logger = logging.getLogger(__name__)


class AdjustStockHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str, delta: int) -> Product:
        """Add *delta* units to stock (negative to remove). Stock never drops below 0."""
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        product.adjust_stock(delta)
        validate(product)
        self._product_repo.save(product)

        logger.info(f"Stock for product {product_id} adjusted by {delta:+d} to {product.quantity}")
        return product
