"""Index bootstrap run once after the first successful connection.

create_index is idempotent, so running this on every start is safe.
Failures are logged per index and never stop the service.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from pymongo.errors import PyMongoError

from app.infrastructure.mongo.collections import (
    COLLECTION_APPLICATIONS,
    COLLECTION_TUITIONS,
    COLLECTION_USERS,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IndexSpec:
    """Single-field ascending index on a collection."""

    collection: str
    field: str
    unique: bool = False


REQUIRED_INDEXES: tuple[IndexSpec, ...] = (
    IndexSpec(COLLECTION_USERS, "email", unique=True),
    IndexSpec(COLLECTION_USERS, "role"),
    IndexSpec(COLLECTION_USERS, "status"),
    IndexSpec(COLLECTION_TUITIONS, "studentId"),
    IndexSpec(COLLECTION_APPLICATIONS, "tuitionPostId"),
    IndexSpec(COLLECTION_APPLICATIONS, "tutorId"),
)


async def ensure_indexes(
    database: Any,
    specs: tuple[IndexSpec, ...] = REQUIRED_INDEXES,
) -> list[str]:
    """Create the required indexes.

    Args:
        database: Motor database handle.
        specs: Indexes to create (defaults to REQUIRED_INDEXES).

    Returns:
        Names of the indexes that were created or already existed.
    """
    created: list[str] = []
    for index in specs:
        try:
            name = await database.get_collection(index.collection).create_index(
                index.field, unique=index.unique
            )
        except PyMongoError as e:
            logger.warning(
                "Index creation failed on %s.%s: %s", index.collection, index.field, e
            )
            continue
        created.append(name)
        logger.info("Index ensured: %s.%s", index.collection, name)
    return created
