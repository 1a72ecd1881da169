"""MongoDB integration: client, collection names, indexes and repositories."""

from app.infrastructure.mongo.client import MongoStore
from app.infrastructure.mongo.indexes import REQUIRED_INDEXES, ensure_indexes

__all__ = [
    "MongoStore",
    "REQUIRED_INDEXES",
    "ensure_indexes",
]
