"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass

from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.repository.user_repository import UserRepository
from storefront.infrastructure.config import Settings
from storefront.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from storefront.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from storefront.infrastructure.persistence.json_user_repository import (
    JsonUserRepository,
)
from storefront.infrastructure.persistence.mongo_order_repository import (
    MongoOrderRepository,
)
from storefront.infrastructure.persistence.mongo_product_repository import (
    MongoProductRepository,
)
from storefront.infrastructure.persistence.mongo_store import MongoStore
from storefront.infrastructure.persistence.mongo_user_repository import (
    MongoUserRepository,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Repositories:
    products: ProductRepository
    users: UserRepository
    orders: OrderRepository


@contextmanager
def open_repositories(settings: Settings) -> Iterator[Repositories]:
    """Open the configured store and yield its repositories.

    The underlying connection is released when the block exits, even on
    error.
    """
    if settings.backend == "mongo":
        with MongoStore(settings.mongodb_uri, settings.mongodb_database) as db:
            yield Repositories(
                products=MongoProductRepository(db),
                users=MongoUserRepository(db),
                orders=MongoOrderRepository(db),
            )
        return

    logger.info(f"Using JSON store in {settings.data_dir}")
    yield Repositories(
        products=JsonProductRepository(settings.data_dir / "products.json"),
        users=JsonUserRepository(settings.data_dir / "users.json"),
        orders=JsonOrderRepository(settings.data_dir / "orders.json"),
    )
