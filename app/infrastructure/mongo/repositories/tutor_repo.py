"""MongoDB-backed tutor queries (implements ITutorRepository).

Tutors are documents in the users collection with role "tutor". Secret
fields are excluded at query time; the API views strip them again.
"""

from __future__ import annotations

from typing import Any

from bson import ObjectId
from pymongo import DESCENDING

from app.core.constants import (
    FEATURED_FIELDS,
    FEATURED_LIMIT,
    FEATURED_MIN_RATING,
    TUTOR_SECRET_FIELDS,
)
from app.domain.enums import UserRole, UserStatus
from app.infrastructure.mongo.client import MongoStore
from app.infrastructure.mongo.collections import COLLECTION_USERS

RATING_SORT = [("rating", DESCENDING), ("totalReviews", DESCENDING)]

_EXCLUDE_SECRETS = {field: 0 for field in TUTOR_SECRET_FIELDS}
_FEATURED_PROJECTION = {field: 1 for field in FEATURED_FIELDS}


class MongoTutorRepository:
    """Read-only tutor queries over the shared MongoStore."""

    def __init__(self, store: MongoStore) -> None:
        self._store = store

    async def list_active(self) -> list[dict[str, Any]]:
        """Return active tutors, best rated first (ties: most reviews first)."""
        return await self._store.query(
            COLLECTION_USERS,
            {"role": UserRole.TUTOR.value, "status": UserStatus.ACTIVE.value},
            projection=_EXCLUDE_SECRETS,
            sort=RATING_SORT,
        )

    async def list_featured(
        self,
        limit: int = FEATURED_LIMIT,
        min_rating: float = FEATURED_MIN_RATING,
    ) -> list[dict[str, Any]]:
        """Return up to ``limit`` active tutors rated at least ``min_rating``."""
        return await self._store.query(
            COLLECTION_USERS,
            {
                "role": UserRole.TUTOR.value,
                "status": UserStatus.ACTIVE.value,
                "rating": {"$gte": min_rating},
            },
            projection=_FEATURED_PROJECTION,
            sort=RATING_SORT,
            limit=limit,
        )

    async def get_by_id(self, tutor_id: ObjectId) -> dict[str, Any] | None:
        """Return the tutor with this id, or None (also None for non-tutors)."""
        return await self._store.find_one(
            COLLECTION_USERS,
            {"_id": tutor_id, "role": UserRole.TUTOR.value},
            projection=_EXCLUDE_SECRETS,
        )
