"""Application service: Show / List Orders use cases (queries)."""

from __future__ import annotations

from storefront.application.dto import OrderDTO
from storefront.application.references import ReferenceResolver
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.repository.user_repository import UserRepository


class ShowOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        user_repo: UserRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._order_repo = order_repo
        self._user_repo = user_repo
        self._product_repo = product_repo

    def handle(self, order_id: str) -> OrderDTO:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order '{order_id}' not found")
        return ReferenceResolver(self._product_repo, self._user_repo).order_to_dto(order)


class ListOrdersHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        user_repo: UserRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._order_repo = order_repo
        self._user_repo = user_repo
        self._product_repo = product_repo

    def handle(self, user_id: str | None = None) -> list[OrderDTO]:
        """All orders, or only those placed by *user_id*; newest first."""
        if user_id is None:
            orders = self._order_repo.list_all()
        else:
            orders = self._order_repo.list_by_user(user_id)
        resolver = ReferenceResolver(self._product_repo, self._user_repo)
        return [resolver.order_to_dto(o) for o in orders]
