"""Application service: Delete User use case.

Orders placed by the user are kept; they keep the user id and show the
customer as not found.
"""

from __future__ import annotations

import logging

from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.repository.user_repository import UserRepository

logger = logging.getLogger(__name__)


class DeleteUserHandler:

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def handle(self, user_id: str) -> None:
        if not self._user_repo.delete(user_id):
            raise EntityNotFoundError(f"User '{user_id}' not found")
        logger.info(f"Deleted user {user_id}")
