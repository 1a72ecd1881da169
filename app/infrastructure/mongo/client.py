"""MongoDB client (motor, one connection pool per process).

Built once at app startup from settings and shared by all requests through
app.state.store. Motor owns connection pooling; this wrapper only adds the
connect/ping contract and maps driver errors to domain exceptions.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from motor.motor_asyncio import AsyncIOMotorClient
from pymongo.errors import PyMongoError
from pymongo.server_api import ServerApi

from app.core.config import Settings
from app.domain.exceptions import QueryException, StoreConnectionException

logger = logging.getLogger(__name__)

SortSpec = Sequence[tuple[str, int]]


class MongoStore:
    """Async document store over a single motor client.

    Same operations for every collection (all async):
    - await store.query(collection, filter, projection, sort, limit) -> list[dict]
    - await store.find_one(collection, filter, projection) -> dict | None
    - await store.ping() -> None (raises StoreConnectionException)
    """

    def __init__(self, client: Any, db_name: str) -> None:
        """Wrap an existing client (motor or a motor-compatible test double).

        Args:
            client: AsyncIOMotorClient-like object.
            db_name: Database holding the application collections.
        """
        self._client = client
        self._db_name = db_name
        self._db = client.get_database(db_name)

    @classmethod
    def from_settings(cls, settings: Settings) -> MongoStore:
        """Build the process-wide store with the configured timeouts.

        Raises:
            StoreConnectionException: If the connection string is invalid.
        """
        try:
            client = AsyncIOMotorClient(
                settings.mongo_uri,
                server_api=ServerApi("1", strict=True, deprecation_errors=True),
                connectTimeoutMS=settings.mongo_connect_timeout_ms,
                socketTimeoutMS=settings.mongo_socket_timeout_ms,
                serverSelectionTimeoutMS=settings.mongo_server_selection_timeout_ms,
            )
        except PyMongoError as e:
            raise StoreConnectionException(f"Invalid MongoDB configuration: {e}") from e
        return cls(client, settings.mongo_db_name)

    @property
    def database(self) -> Any:
        """Database handle for the application collections."""
        return self._db

    @property
    def db_name(self) -> str:
        return self._db_name

    async def ping(self) -> None:
        """Run the ping command against the admin database.

        Raises:
            StoreConnectionException: On network, auth or server selection timeout.
        """
        try:
            await self._client.get_database("admin").command({"ping": 1})
        except PyMongoError as e:
            raise StoreConnectionException(str(e)) from e

    async def connect(self) -> None:
        """Establish the connection; motor connects lazily so a ping forces it."""
        logger.info("Connecting to MongoDB (database=%s)...", self._db_name)
        await self.ping()
        logger.info("Successfully connected to MongoDB")

    async def query(
        self,
        collection: str,
        filter: Mapping[str, Any],
        projection: Mapping[str, Any] | None = None,
        sort: SortSpec | None = None,
        limit: int | None = None,
    ) -> list[dict[str, Any]]:
        """Return all matching documents in sort order.

        Args:
            collection: Collection name.
            filter: MongoDB query filter.
            projection: Optional inclusion or exclusion map.
            sort: Optional list of (field, direction) pairs.
            limit: Maximum number of documents; None means unbounded, 0 or less
                returns nothing.

        Raises:
            QueryException: If the driver reports an error.
        """
        kwargs: dict[str, Any] = {}
        if sort:
            kwargs["sort"] = list(sort)
        if limit is not None:
            # The driver reads limit=0 as "no limit".
            if limit <= 0:
                return []
            kwargs["limit"] = limit
        try:
            cursor = self._db.get_collection(collection).find(
                dict(filter), projection, **kwargs
            )
            return await cursor.to_list(length=None)
        except PyMongoError as e:
            raise QueryException(str(e), collection) from e

    async def find_one(
        self,
        collection: str,
        filter: Mapping[str, Any],
        projection: Mapping[str, Any] | None = None,
    ) -> dict[str, Any] | None:
        """Return the first matching document, or None.

        Raises:
            QueryException: If the driver reports an error.
        """
        try:
            return await self._db.get_collection(collection).find_one(
                dict(filter), projection
            )
        except PyMongoError as e:
            raise QueryException(str(e), collection) from e

    def close(self) -> None:
        """Close the client's connection pool. Call from app shutdown."""
        self._client.close()
        logger.info("MongoDB client closed")
