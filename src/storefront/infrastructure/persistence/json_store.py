"""A JSON file holding one collection of documents.

Shared by the JSON-backed repositories. The file stores the records
together with a ``next_id`` counter that only grows, so an id freed by a
delete is never handed out again. Every write rewrites the whole file;
saves are compare-and-set on the document ``version``.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime
from decimal import Decimal
from pathlib import Path
from typing import Any

from storefront.domain.repository.versioning import (
    Versioned,
    check_version,
    mark_saved,
    utc_now,
)

logger = logging.getLogger(__name__)


class JsonDocumentFile:

    def __init__(self, file_path: Path, kind: str) -> None:
        self._file_path = file_path
        self._kind = kind
        self._ensure_file()

    # --- Collection operations ------------------------------------------------

    def get(self, doc_id: str) -> dict[str, Any] | None:
        for raw in self.load():
            if raw["id"] == doc_id:
                return raw
        return None

    def upsert(self, entity: Versioned, document: dict[str, Any]) -> None:
        """Write *document* for *entity*, assigning an id to new entities.

        On success the entity's id, timestamps and version are updated.
        """
        data = self._read()
        records = data["records"]

        entity_id = entity.id
        if entity_id is None:
            entity_id = str(data["next_id"])
            data["next_id"] += 1

        index = next((i for i, r in enumerate(records) if r["id"] == entity_id), None)
        stored_version = records[index].get("version", 0) if index is not None else None
        check_version(self._kind, entity, stored_version)

        now = utc_now()
        raw = {
            "id": entity_id,
            **document,
            "created_at": entity.created_at or now,
            "updated_at": now,
            "version": entity.version + 1,
        }
        if index is None:
            records.append(raw)
        else:
            records[index] = raw

        self._write(data)
        mark_saved(entity, entity_id, now)
        logger.debug(f"Saved {self._kind} {entity_id} (version {entity.version})")

    def delete(self, doc_id: str) -> bool:
        data = self._read()
        remaining = [r for r in data["records"] if r["id"] != doc_id]
        if len(remaining) == len(data["records"]):
            return False
        data["records"] = remaining
        self._write(data)
        return True

    # --- File helpers ---------------------------------------------------------

    def load(self) -> list[dict[str, Any]]:
        return self._read()["records"]

    def _read(self) -> dict[str, Any]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _write(self, data: dict[str, Any]) -> None:
        self._file_path.write_text(
            json.dumps(data, indent=2, default=_encode) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._write({"next_id": 1, "records": []})


def _encode(value: Any) -> str:
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, datetime):
        return value.isoformat()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")
