"""Abstract repository for User aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.user import User


class UserRepository(ABC):

    @abstractmethod
    def get_by_id(self, user_id: str) -> User | None:
        """Return a user by ID, or None if not found."""

    @abstractmethod
    def get_by_email(self, email: str) -> User | None:
        """Return the user registered under *email* (case-insensitive), or None."""

    @abstractmethod
    def list_all(self) -> list[User]:
        """Return every registered user."""

    @abstractmethod
    def save(self, user: User) -> None:
        """Insert or update a user.

        Raises ConflictError on a duplicate email or a stale ``version``.
        """

    @abstractmethod
    def delete(self, user_id: str) -> bool:
        """Delete a user. Returns False if it did not exist."""
