"""Unit tests for index bootstrap (ensure_indexes)."""

import logging
from unittest.mock import AsyncMock, MagicMock

import pytest
from pymongo.errors import DuplicateKeyError, OperationFailure

from app.infrastructure.mongo.client import MongoStore
from app.infrastructure.mongo.indexes import REQUIRED_INDEXES, IndexSpec, ensure_indexes


def test_required_indexes_cover_lookup_fields() -> None:
    """Unique email plus secondary indexes on the filter/reference fields."""
    specs = {(s.collection, s.field): s.unique for s in REQUIRED_INDEXES}
    assert specs == {
        ("users", "email"): True,
        ("users", "role"): False,
        ("users", "status"): False,
        ("tuitions", "studentId"): False,
        ("applications", "tuitionPostId"): False,
        ("applications", "tutorId"): False,
    }


async def test_ensure_indexes_logs_and_skips_failures(
    caplog: pytest.LogCaptureFixture,
) -> None:
    """A failing index is logged; the remaining ones are still created."""
    good = MagicMock()
    good.create_index = AsyncMock(side_effect=["email_1", "role_1"])
    bad = MagicMock()
    bad.create_index = AsyncMock(side_effect=OperationFailure("not authorized"))
    database = MagicMock()
    database.get_collection.side_effect = lambda name: good if name == "users" else bad
    specs = (
        IndexSpec("users", "email", unique=True),
        IndexSpec("tuitions", "studentId"),
        IndexSpec("users", "role"),
    )

    with caplog.at_level(logging.WARNING):
        created = await ensure_indexes(database, specs)

    assert created == ["email_1", "role_1"]
    good.create_index.assert_any_await("email", unique=True)
    assert "tuitions.studentId" in caplog.text


async def test_unique_email_index_rejects_duplicates(store: MongoStore) -> None:
    """After ensure_indexes, a second user with the same email is rejected."""
    created = await ensure_indexes(store.database)
    assert len(created) == len(REQUIRED_INDEXES)

    users = store.database.get_collection("users")
    await users.insert_one({"email": "same@example.com", "role": "tutor"})
    with pytest.raises(DuplicateKeyError):
        await users.insert_one({"email": "same@example.com", "role": "student"})
