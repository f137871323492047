"""Application service: Register User use case."""

from __future__ import annotations

import logging

from storefront.domain.exceptions import ConflictError
from storefront.domain.model.user import User
from storefront.domain.model.value_objects import Address
from storefront.domain.repository.user_repository import UserRepository
from storefront.domain.validation import validate

logger = logging.getLogger(__name__)


def normalize_email(email: str | None) -> str:
    return (email or "").strip().lower()


class RegisterUserHandler:

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def handle(
        self,
        first_name: str,
        last_name: str,
        email: str,
        password: str,
        address: Address | None = None,
        phone_number: str | None = None,
        is_admin: bool = False,
    ) -> User:
        """Register a new user.

        Raises ValidationError for a malformed field and ConflictError if
        the email is already taken.
        """
        user = User(
            id=None,
            first_name=(first_name or "").strip(),
            last_name=(last_name or "").strip(),
            email=normalize_email(email),
            password=password,
            address=address or Address(),
            phone_number=phone_number or None,
            is_admin=is_admin,
        )
        validate(user)

        if self._user_repo.get_by_email(user.email) is not None:
            raise ConflictError(f"Email '{user.email}' is already registered")

        self._user_repo.save(user)
        logger.info(f"Registered user {user.id} <{user.email}>")
        return user
