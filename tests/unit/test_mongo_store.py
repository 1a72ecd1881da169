"""Unit tests for MongoStore (mongomock-motor for queries, mocks for errors)."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from bson import ObjectId
from pymongo import DESCENDING
from pymongo.errors import OperationFailure, ServerSelectionTimeoutError

from app.domain.exceptions import QueryException, StoreConnectionException
from app.infrastructure.mongo.client import MongoStore


async def _seed(store: MongoStore) -> None:
    await store.database.get_collection("items").insert_many(
        [
            {"name": "a", "score": 1, "secret": "x"},
            {"name": "b", "score": 3, "secret": "y"},
            {"name": "c", "score": 2, "secret": "z"},
        ]
    )


async def test_query_applies_filter_sort_limit_and_projection(
    store: MongoStore,
) -> None:
    """query() honors sort, limit and exclusion projection."""
    await _seed(store)

    docs = await store.query(
        "items",
        {"score": {"$gte": 1}},
        projection={"secret": 0},
        sort=[("score", DESCENDING)],
        limit=2,
    )

    assert [d["name"] for d in docs] == ["b", "c"]
    assert all("secret" not in d for d in docs)
    assert all(isinstance(d["_id"], ObjectId) for d in docs)


async def test_query_without_limit_returns_everything(store: MongoStore) -> None:
    await _seed(store)
    docs = await store.query("items", {})
    assert len(docs) == 3


@pytest.mark.parametrize("limit", [0, -1])
async def test_query_with_non_positive_limit_returns_nothing(
    store: MongoStore, limit: int
) -> None:
    """limit=0 means zero documents, not the driver's "unbounded"."""
    await _seed(store)
    assert await store.query("items", {}, limit=limit) == []


async def test_find_one_returns_document_or_none(store: MongoStore) -> None:
    """find_one() returns the match, or None when nothing matches."""
    await _seed(store)

    found = await store.find_one("items", {"name": "c"}, projection={"secret": 0})
    missing = await store.find_one("items", {"name": "nope"})

    assert found is not None
    assert found["score"] == 2
    assert "secret" not in found
    assert missing is None


def _store_with_collection(collection: MagicMock) -> MongoStore:
    client = MagicMock()
    client.get_database.return_value.get_collection.return_value = collection
    return MongoStore(client, "db")


async def test_query_driver_error_becomes_query_exception() -> None:
    """Driver errors are wrapped in QueryException with the driver message."""
    collection = MagicMock()
    collection.find.side_effect = OperationFailure("bad query")
    store = _store_with_collection(collection)

    with pytest.raises(QueryException) as exc_info:
        await store.query("users", {})

    assert exc_info.value.message == "bad query"
    assert exc_info.value.details == {"collection": "users"}


async def test_find_one_driver_error_becomes_query_exception() -> None:
    collection = MagicMock()
    collection.find_one = AsyncMock(side_effect=OperationFailure("boom"))
    store = _store_with_collection(collection)

    with pytest.raises(QueryException):
        await store.find_one("users", {"_id": ObjectId()})


async def test_ping_runs_admin_ping_command() -> None:
    client = MagicMock()
    admin = MagicMock()
    admin.command = AsyncMock(return_value={"ok": 1.0})
    client.get_database.side_effect = lambda name: admin if name == "admin" else MagicMock()
    store = MongoStore(client, "tutorhub")

    await store.ping()

    admin.command.assert_awaited_once_with({"ping": 1})


async def test_connect_failure_raises_store_connection_exception() -> None:
    """connect() reports network/timeout failures as StoreConnectionException."""
    client = MagicMock()
    client.get_database.return_value.command = AsyncMock(
        side_effect=ServerSelectionTimeoutError("No servers found")
    )
    store = MongoStore(client, "tutorhub")

    with pytest.raises(StoreConnectionException) as exc_info:
        await store.connect()

    assert "No servers found" in exc_info.value.message
    assert exc_info.value.error_code == "STORE_UNAVAILABLE"


def test_close_closes_client() -> None:
    client = MagicMock()
    MongoStore(client, "tutorhub").close()
    client.close.assert_called_once_with()
