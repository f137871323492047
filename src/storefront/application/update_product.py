"""Application service: Update Product use case.

Patches any subset of the editable fields, re-validates the whole
product and saves it. A rejected patch leaves the stored product as it
was.
"""

from __future__ import annotations

import logging

from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.product import Category, Product
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.validation import validate

logger = logging.getLogger(__name__)


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        product_id: str,
        name: str | None = None,
        description: str | None = None,
        price: str | None = None,
        category: str | None = None,
        quantity: int | None = None,
        in_stock: bool | None = None,
        tags: list[str] | None = None,
        image_url: str | None = None,
    ) -> Product:
        """Update a product's fields.

        A price change does NOT affect any existing orders; they
        captured a price snapshot at creation time.
        """
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        if name is not None:
            product.name = name.strip()
        if description is not None:
            product.description = description
        if price is not None:
            product.update_price(Money.of(price))
        if category is not None:
            product.category = Category.parse(category)
        if quantity is not None:
            product.quantity = quantity
        if in_stock is not None:
            product.in_stock = in_stock
        if tags is not None:
            product.tags = [t.strip() for t in tags if t.strip()]
        if image_url is not None:
            product.image_url = image_url

        validate(product)
        self._product_repo.save(product)
        logger.info(f"Updated product {product_id}")
        return product
