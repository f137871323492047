"""User aggregate: a registered customer with a wishlist and a cart.

Wishlist and cart hold product *ids* only. Entries are compared by id,
so a product appears at most once in each.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from storefront.domain import rules
from storefront.domain.exceptions import InvalidArgumentError
from storefront.domain.model.value_objects import Address


@dataclass
class CartItem:
    product_id: str
    quantity: int = 1


@dataclass
class User:

    id: str | None
    first_name: str
    last_name: str
    email: str
    password: str
    address: Address = field(default_factory=Address)
    phone_number: str | None = None
    is_admin: bool = False
    wishlist: list[str] = field(default_factory=list)
    cart: list[CartItem] = field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None
    version: int = 0

    @property
    def full_name(self) -> str:
        return rules.full_name(self)

    # --- Wishlist -------------------------------------------------------------

    def add_to_wishlist(self, product_id: str) -> bool:
        """Append *product_id* unless already present.

        Returns True if the wishlist changed.
        """
        if product_id in self.wishlist:
            return False
        self.wishlist.append(product_id)
        return True

    # --- Cart -----------------------------------------------------------------

    def add_to_cart(self, product_id: str, quantity: int = 1) -> CartItem:
        """Add *quantity* units, merging into an existing entry for the product."""
        if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 1:
            raise InvalidArgumentError(f"Cart quantity must be at least 1, got {quantity!r}")

        existing = self.cart_item(product_id)
        if existing is not None:
            existing.quantity += quantity
            return existing

        item = CartItem(product_id=product_id, quantity=quantity)
        self.cart.append(item)
        return item

    def remove_from_cart(self, product_id: str) -> bool:
        """Drop every cart entry for *product_id*. Returns True if any was removed."""
        remaining = [item for item in self.cart if item.product_id != product_id]
        removed = len(remaining) != len(self.cart)
        self.cart = remaining
        return removed

    def cart_item(self, product_id: str) -> CartItem | None:
        for item in self.cart:
            if item.product_id == product_id:
                return item
        return None
