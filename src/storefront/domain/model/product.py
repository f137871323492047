"""Product aggregate.

Products live independently of users and orders. They have their own
lifecycle: prices change, ratings accumulate, stock moves up and down,
products are added and removed from the catalog.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation
from enum import Enum

from storefront.domain import rules
from storefront.domain.exceptions import InvalidArgumentError, ValidationError
from storefront.domain.model.value_objects import Money

MIN_RATING = 1
MAX_RATING = 5


class Category(Enum):
    ELECTRONICS = "Electronics"
    CLOTHING = "Clothing"
    BOOKS = "Books"
    HOME_AND_GARDEN = "Home & Garden"
    SPORTS = "Sports"
    OTHER = "Other"

    @staticmethod
    def parse(raw: str) -> Category:
        for category in Category:
            if category.value.lower() == raw.strip().lower():
                return category
        allowed = ", ".join(c.value for c in Category)
        raise ValidationError(f"'{raw}' is not one of: {allowed}", field="category")


@dataclass(frozen=True)
class ProductRating:
    user_id: str
    rating: int
    review: str = ""
    date: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


@dataclass
class Product:
    """A product in the catalog.

    ``id`` is None until the repository assigns one on first save, and
    ``version`` counts successful saves so concurrent writers can detect
    each other.
    """

    id: str | None
    name: str
    description: str
    price: Money
    category: Category
    quantity: int
    in_stock: bool = True
    tags: list[str] = field(default_factory=list)
    ratings: list[ProductRating] = field(default_factory=list)
    image_url: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    version: int = 0

    # --- Derived values -------------------------------------------------------

    @property
    def average_rating(self) -> float:
        return rules.average_rating(self)

    @property
    def display_name(self) -> str:
        return rules.display_name(self)

    def is_in_stock(self) -> bool:
        return rules.is_in_stock(self)

    # --- Mutations (in memory; the caller persists) ---------------------------

    def update_price(self, new_price: Money) -> None:
        """Change the product price.

        This does NOT affect any existing orders because orders
        capture a price snapshot at creation time.
        """
        self.price = new_price

    def apply_discount(self, percentage: Decimal | int | float | str) -> None:
        try:
            pct = Decimal(str(percentage))
        except (InvalidOperation, ValueError) as exc:
            raise InvalidArgumentError(f"Invalid discount percentage: {percentage!r}") from exc
        if not pct.is_finite():
            raise InvalidArgumentError(f"Invalid discount percentage: {percentage!r}")
        self.price = self.price.discounted(pct)

    def add_rating(
        self,
        user_id: str,
        rating: int,
        review: str = "",
        date: datetime | None = None,
    ) -> ProductRating:
        if isinstance(rating, bool) or not isinstance(rating, int):
            raise InvalidArgumentError(f"Rating must be an integer, got {rating!r}")
        if not MIN_RATING <= rating <= MAX_RATING:
            raise InvalidArgumentError(
                f"Rating must be between {MIN_RATING} and {MAX_RATING}, got {rating}"
            )
        entry = ProductRating(
            user_id=user_id,
            rating=rating,
            review=review,
            date=date or datetime.now(timezone.utc),
        )
        self.ratings.append(entry)
        return entry

    def adjust_stock(self, delta: int) -> None:
        """Add (or with a negative delta, remove) units from stock."""
        if self.quantity + delta < 0:
            raise InvalidArgumentError(
                f"Cannot remove {-delta} units of {self.name} "
                f"(only {self.quantity} in stock)"
            )
        self.quantity += delta
