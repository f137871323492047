"""JSON-file-backed implementation of UserRepository."""

from __future__ import annotations

from pathlib import Path

from storefront.domain.exceptions import ConflictError
from storefront.domain.model.user import User
from storefront.domain.repository.user_repository import UserRepository
from storefront.infrastructure.persistence.documents import (
    user_from_document,
    user_to_document,
)
from storefront.infrastructure.persistence.json_store import JsonDocumentFile


class JsonUserRepository(UserRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonDocumentFile(file_path, kind="User")

    # --- UserRepository interface ---------------------------------------------

    def get_by_id(self, user_id: str) -> User | None:
        raw = self._file.get(user_id)
        return user_from_document(raw["id"], raw) if raw else None

    def get_by_email(self, email: str) -> User | None:
        for raw in self._file.load():
            if raw["email"].lower() == email.lower():
                return user_from_document(raw["id"], raw)
        return None

    def list_all(self) -> list[User]:
        return [user_from_document(raw["id"], raw) for raw in self._file.load()]

    def save(self, user: User) -> None:
        # Unique email, the JSON equivalent of a unique index.
        owner = self.get_by_email(user.email)
        if owner is not None and owner.id != user.id:
            raise ConflictError(f"Email '{user.email}' is already registered")
        self._file.upsert(user, user_to_document(user))

    def delete(self, user_id: str) -> bool:
        return self._file.delete(user_id)
