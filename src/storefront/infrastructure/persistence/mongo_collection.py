"""Versioned document access on top of a pymongo collection.

Shared by the MongoDB-backed repositories. Inserts start at version 1;
updates are ``replace_one`` filtered on the version the entity was
loaded at, so a concurrent writer makes the update match nothing.
"""

from __future__ import annotations

import logging
from typing import Any

from bson.objectid import ObjectId
from pymongo.collection import Collection
from pymongo.errors import DuplicateKeyError

from storefront.domain.exceptions import ConflictError, ValidationError
from storefront.domain.repository.versioning import (
    Versioned,
    check_version,
    mark_saved,
    utc_now,
)
from storefront.infrastructure.persistence.mongo_store import to_object_id

logger = logging.getLogger(__name__)


class MongoCollection:

    def __init__(self, collection: Collection, kind: str) -> None:
        self.collection = collection
        self._kind = kind

    def get(self, doc_id: str) -> dict[str, Any] | None:
        oid = to_object_id(doc_id)
        if oid is None:
            return None
        return self.collection.find_one({"_id": oid})

    def upsert(self, entity: Versioned, document: dict[str, Any]) -> None:
        now = utc_now()
        doc = {
            **document,
            "created_at": entity.created_at or now,
            "updated_at": now,
            "version": entity.version + 1,
        }

        try:
            if entity.id is None or entity.version == 0:
                oid = self._new_object_id(entity.id)
                self.collection.insert_one({"_id": oid, **doc})
            else:
                oid = to_object_id(entity.id)
                result = self.collection.replace_one(
                    {"_id": oid, "version": entity.version}, doc
                )
                if result.matched_count == 0:
                    stored = self.collection.find_one({"_id": oid}, {"version": 1})
                    check_version(self._kind, entity, stored.get("version", 0) if stored else None)
                    raise ConflictError(f"{self._kind} '{entity.id}' was modified concurrently")
        except DuplicateKeyError as exc:
            raise ConflictError(
                f"{self._kind} violates a unique constraint: {exc.details.get('keyValue') if exc.details else exc}"
            ) from exc

        mark_saved(entity, str(oid), now)
        logger.debug(f"Saved {self._kind} {entity.id} (version {entity.version})")

    def delete(self, doc_id: str) -> bool:
        oid = to_object_id(doc_id)
        if oid is None:
            return False
        return self.collection.delete_one({"_id": oid}).deleted_count > 0

    def _new_object_id(self, requested: str | None) -> ObjectId:
        if requested is None:
            return ObjectId()
        oid = to_object_id(requested)
        if oid is None:
            raise ValidationError(f"'{requested}' is not a valid {self._kind} id", field="id")
        return oid
