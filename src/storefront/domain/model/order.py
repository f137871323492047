"""Order aggregate.

The Order owns its items. Each item carries a price snapshot taken at
checkout; later price changes on the Product never reach the order.
The user and the products are referenced by id only.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from storefront.domain import rules
from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Address, Money, Quantity


class OrderStatus(Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"

    @staticmethod
    def parse(raw: str) -> OrderStatus:
        try:
            return OrderStatus(raw.strip().lower())
        except ValueError:
            allowed = ", ".join(s.value for s in OrderStatus)
            raise ValidationError(f"'{raw}' is not one of: {allowed}", field="status")


@dataclass(frozen=True)
class OrderItem:
    """A product line with its price locked at order-creation time."""

    product_id: str
    quantity: Quantity
    price: Money

    @property
    def line_total(self) -> Money:
        return self.price * self.quantity.value


@dataclass
class Order:
    """Aggregate root for purchase orders.

    Use the ``Order.create()`` factory for new orders; it enforces all
    business rules.  The ``__init__`` is intentionally simple so the
    repository can reconstitute persisted orders without re-validating.
    """

    id: str | None
    user_id: str
    items: list[OrderItem]
    shipping_address: Address
    payment_method: str
    status: OrderStatus = OrderStatus.PENDING
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime | None = None
    version: int = 0

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def create(
        user_id: str,
        items: list[OrderItem],
        shipping_address: Address,
        payment_method: str,
    ) -> Order:
        """Create a new order, enforcing all invariants."""
        if not items:
            raise ValidationError("Order must contain at least one item", field="items")

        if not payment_method or not payment_method.strip():
            raise ValidationError("Payment method is required", field="payment_method")

        return Order(
            id=None,
            user_id=user_id,
            items=list(items),
            shipping_address=shipping_address,
            payment_method=payment_method.strip(),
        )

    # --- Status ---------------------------------------------------------------

    def change_status(self, status: OrderStatus) -> None:
        """Overwrite the status. Any transition is allowed."""
        self.status = status

    # --- Computed properties --------------------------------------------------

    @property
    def item_count(self) -> int:
        return rules.item_count(self)

    @property
    def total_amount(self) -> Money:
        return rules.total_amount(self)

    @property
    def product_ids(self) -> list[str]:
        return [item.product_id for item in self.items]
