"""MongoDB-backed implementation of UserRepository.

Email uniqueness is backed by a unique index; a duplicate insert
surfaces as ConflictError.
"""

from __future__ import annotations

from typing import Any

from pymongo.database import Database

from storefront.domain.model.user import User
from storefront.domain.repository.user_repository import UserRepository
from storefront.infrastructure.persistence.documents import (
    user_from_document,
    user_to_document,
)
from storefront.infrastructure.persistence.mongo_collection import MongoCollection
from storefront.infrastructure.persistence.mongo_store import USERS


class MongoUserRepository(UserRepository):

    def __init__(self, db: Database) -> None:
        self._docs = MongoCollection(db[USERS], kind="User")

    def get_by_id(self, user_id: str) -> User | None:
        doc = self._docs.get(user_id)
        return self._to_domain(doc) if doc else None

    def get_by_email(self, email: str) -> User | None:
        doc = self._docs.collection.find_one({"email": email.strip().lower()})
        return self._to_domain(doc) if doc else None

    def list_all(self) -> list[User]:
        return [self._to_domain(doc) for doc in self._docs.collection.find()]

    def save(self, user: User) -> None:
        self._docs.upsert(user, user_to_document(user))

    def delete(self, user_id: str) -> bool:
        return self._docs.delete(user_id)

    @staticmethod
    def _to_domain(doc: dict[str, Any]) -> User:
        return user_from_document(str(doc["_id"]), doc)
