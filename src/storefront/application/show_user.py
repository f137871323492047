"""Application service: Show User use case (query)."""

from __future__ import annotations

from storefront.application.dto import UserDTO
from storefront.application.references import ReferenceResolver
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.repository.user_repository import UserRepository


class ShowUserHandler:

    def __init__(self, user_repo: UserRepository, product_repo: ProductRepository) -> None:
        self._user_repo = user_repo
        self._product_repo = product_repo

    def handle(self, user_id: str) -> UserDTO:
        """Return the user with wishlist and cart resolved to product names."""
        user = self._user_repo.get_by_id(user_id)
        if user is None:
            raise EntityNotFoundError(f"User '{user_id}' not found")
        return ReferenceResolver(self._product_repo).user_to_dto(user)

    def list_all(self) -> list[UserDTO]:
        resolver = ReferenceResolver(self._product_repo)
        return [resolver.user_to_dto(u) for u in self._user_repo.list_all()]
