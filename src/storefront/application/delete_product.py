"""Application service: Delete Product use case.

Deletion does not cascade. Wishlists, carts and orders that reference
the product keep its id; read paths report it as not found.
"""

from __future__ import annotations

import logging

from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class DeleteProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str) -> None:
        if not self._product_repo.delete(product_id):
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")
        logger.info(f"Deleted product {product_id}")
