"""Optimistic concurrency helpers shared by repository implementations.

Every entity carries a ``version`` counter. A save succeeds only if the
stored record still has the version the caller loaded; the repository then
bumps the counter and stamps the timestamps on the caller's copy.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Protocol

from storefront.domain.exceptions import ConflictError


class Versioned(Protocol):
    id: str | None
    version: int
    created_at: datetime | None
    updated_at: datetime | None


def utc_now() -> datetime:
    # Storage keeps millisecond precision (BSON dates), so drop the rest.
    now = datetime.now(timezone.utc)
    return now.replace(microsecond=now.microsecond // 1000 * 1000)


def check_version(kind: str, entity: Versioned, stored_version: int | None) -> None:
    """Raise ConflictError unless *stored_version* is what *entity* was loaded at."""
    if entity.id is None or entity.version == 0:
        return
    if stored_version is None:
        raise ConflictError(f"{kind} '{entity.id}' no longer exists")
    if stored_version != entity.version:
        raise ConflictError(
            f"{kind} '{entity.id}' was modified concurrently "
            f"(expected version {entity.version}, found {stored_version})"
        )


def mark_saved(entity: Versioned, entity_id: str, now: datetime) -> None:
    entity.id = entity_id
    if entity.created_at is None:
        entity.created_at = now
    entity.updated_at = now
    entity.version += 1
