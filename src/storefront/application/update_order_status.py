"""Application service: Update Order Status use case.

No transition table is enforced; any status may replace any other.
"""

from __future__ import annotations

import logging

from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.order import Order, OrderStatus
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.validation import validate

logger = logging.getLogger(__name__)


class UpdateOrderStatusHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: str, status: str) -> Order:
        new_status = OrderStatus.parse(status)

        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order '{order_id}' not found")

        old_status = order.status
        order.change_status(new_status)
        validate(order)
        self._order_repo.save(order)

        logger.info(f"Order {order_id} status {old_status.value} -> {new_status.value}")
        return order
