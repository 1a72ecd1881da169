"""MongoDB ObjectId helpers for the API boundary."""

from typing import Any

from bson import ObjectId
from bson.errors import InvalidId

from app.domain.exceptions import ValidationException


def parse_object_id(raw: str, resource: str = "resource") -> ObjectId:
    """Convert a path parameter into an ObjectId.

    Args:
        raw: Value from the URL (expected: 24 hex characters).
        resource: Resource name used in the error message.

    Returns:
        The parsed ObjectId.

    Raises:
        ValidationException: If raw is not a valid ObjectId.
    """
    try:
        return ObjectId(raw)
    except (InvalidId, TypeError) as e:
        raise ValidationException(f"Invalid {resource} id: {raw}", field="id") from e


def stringify_object_ids(value: Any) -> Any:
    """Return value with every ObjectId (at any depth) replaced by its hex string."""
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, dict):
        return {k: stringify_object_ids(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [stringify_object_ids(v) for v in value]
    return value
