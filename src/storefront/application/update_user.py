"""Application service: Update User use case."""

from __future__ import annotations

import logging

from storefront.application.register_user import normalize_email
from storefront.domain.exceptions import ConflictError, EntityNotFoundError
from storefront.domain.model.user import User
from storefront.domain.model.value_objects import Address
from storefront.domain.repository.user_repository import UserRepository
from storefront.domain.validation import validate

logger = logging.getLogger(__name__)


class UpdateUserHandler:

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def handle(
        self,
        user_id: str,
        first_name: str | None = None,
        last_name: str | None = None,
        email: str | None = None,
        password: str | None = None,
        address: Address | None = None,
        phone_number: str | None = None,
        is_admin: bool | None = None,
    ) -> User:
        """Patch profile fields. Wishlist and cart have their own use cases."""
        user = self._user_repo.get_by_id(user_id)
        if user is None:
            raise EntityNotFoundError(f"User '{user_id}' not found")

        if first_name is not None:
            user.first_name = first_name.strip()
        if last_name is not None:
            user.last_name = last_name.strip()
        if email is not None:
            user.email = normalize_email(email)
        if password is not None:
            user.password = password
        if address is not None:
            user.address = address
        if phone_number is not None:
            user.phone_number = phone_number or None
        if is_admin is not None:
            user.is_admin = is_admin

        validate(user)

        if email is not None:
            owner = self._user_repo.get_by_email(user.email)
            if owner is not None and owner.id != user.id:
                raise ConflictError(f"Email '{user.email}' is already registered")

        self._user_repo.save(user)
        logger.info(f"Updated user {user_id}")
        return user
