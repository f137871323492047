"""Abstract repository for Order aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.order import Order


class OrderRepository(ABC):

    @abstractmethod
    def get_by_id(self, order_id: str) -> Order | None:
        """Return an order by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Order]:
        """Return every order, newest first."""

    @abstractmethod
    def list_by_user(self, user_id: str) -> list[Order]:
        """Return the orders placed by *user_id*, newest first."""

    @abstractmethod
    def save(self, order: Order) -> None:
        """Persist a new or updated order."""
