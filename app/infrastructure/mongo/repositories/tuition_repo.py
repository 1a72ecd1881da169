"""MongoDB-backed tuition posting queries (implements ITuitionRepository)."""

from __future__ import annotations

from typing import Any

from app.infrastructure.mongo.client import MongoStore
from app.infrastructure.mongo.collections import COLLECTION_TUITIONS


class MongoTuitionRepository:
    """Read-only tuition queries over the shared MongoStore."""

    def __init__(self, store: MongoStore) -> None:
        self._store = store

    async def list_all(self) -> list[dict[str, Any]]:
        """Return every tuition posting in natural order."""
        return await self._store.query(COLLECTION_TUITIONS, {})
