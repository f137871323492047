"""Application service: Add Product use case."""

from __future__ import annotations

import logging

from storefront.domain.model.product import Category, Product
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.validation import validate

logger = logging.getLogger(__name__)


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        name: str,
        description: str,
        price: str,
        category: str,
        quantity: int,
        tags: list[str] | None = None,
        image_url: str | None = None,
        in_stock: bool = True,
    ) -> Product:
        """Add a new product to the catalog."""
        product = Product(
            id=None,
            name=(name or "").strip(),
            description=description,
            price=Money.of(price),
            category=Category.parse(category),
            quantity=quantity,
            in_stock=in_stock,
            tags=[t.strip() for t in tags or [] if t.strip()],
            image_url=image_url,
        )
        validate(product)

        self._product_repo.save(product)
        logger.info(f"Added product {product.id} '{product.name}' at {product.price}")
        return product
