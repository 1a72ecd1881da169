"""Shared utilities: datetime and ObjectId helpers."""

from app.shared.utils.datetime import utc_isoformat, utc_now
from app.shared.utils.object_ids import parse_object_id, stringify_object_ids

__all__ = [
    "utc_now",
    "utc_isoformat",
    "parse_object_id",
    "stringify_object_ids",
]
