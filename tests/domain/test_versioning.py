"""Unit tests for the optimistic concurrency helpers."""

from datetime import datetime, timezone

import pytest

from storefront.domain.exceptions import ConflictError
from storefront.domain.model.user import User
from storefront.domain.repository.versioning import check_version, mark_saved, utc_now


def _user(user_id: str | None = None, version: int = 0) -> User:
    return User(
        id=user_id,
        first_name="A",
        last_name="B",
        email="a@b.co",
        password="secret",
        version=version,
    )


class TestCheckVersion:

    def test_new_entity_always_passes(self):
        check_version("User", _user(), None)
        check_version("User", _user("1", 0), None)

    def test_matching_version_passes(self):
        check_version("User", _user("1", 3), 3)

    def test_stale_version_conflicts(self):
        with pytest.raises(ConflictError, match="modified concurrently"):
            check_version("User", _user("1", 2), 3)

    def test_deleted_entity_conflicts(self):
        with pytest.raises(ConflictError, match="no longer exists"):
            check_version("User", _user("1", 2), None)


class TestMarkSaved:

    def test_first_save(self):
        user = _user()
        now = datetime(2024, 5, 1, tzinfo=timezone.utc)
        mark_saved(user, "7", now)
        assert user.id == "7"
        assert user.created_at == now
        assert user.updated_at == now
        assert user.version == 1

    def test_later_save_keeps_created_at(self):
        user = _user()
        first = datetime(2024, 5, 1, tzinfo=timezone.utc)
        later = datetime(2024, 6, 1, tzinfo=timezone.utc)
        mark_saved(user, "7", first)
        mark_saved(user, "7", later)
        assert user.created_at == first
        assert user.updated_at == later
        assert user.version == 2


def test_utc_now_has_millisecond_precision():
    now = utc_now()
    assert now.tzinfo is timezone.utc
    assert now.microsecond % 1000 == 0
