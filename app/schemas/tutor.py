"""Tutor API views.

Store documents are mapped into these views before they leave the service.
Stored fields pass through unchanged (users are written by other services,
so their shape is not enforced here). Secret fields are removed even if the
query projection let them through.
"""

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator

from app.core.constants import FEATURED_FIELDS, TUTOR_SECRET_FIELDS
from app.shared.utils.object_ids import stringify_object_ids


def prepare_document(data: Any, allowed: tuple[str, ...] | None = None) -> Any:
    """Drop secret fields (and fields outside ``allowed``), stringify ObjectIds."""
    if not isinstance(data, dict):
        return data
    cleaned = {
        k: v
        for k, v in data.items()
        if k not in TUTOR_SECRET_FIELDS
        and (allowed is None or k in allowed or k in ("_id", "id"))
    }
    return stringify_object_ids(cleaned)


class TutorPublicView(BaseModel):
    """Full tutor profile: every stored field except password and firebaseUID."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: Any = Field(
        ...,
        validation_alias=AliasChoices("_id", "id"),
        serialization_alias="_id",
    )

    @model_validator(mode="before")
    @classmethod
    def _strip_secrets(cls, data: Any) -> Any:
        return prepare_document(data)


class TutorFeaturedView(TutorPublicView):
    """Display fields shown on the featured tutors strip (allow-list)."""

    @model_validator(mode="before")
    @classmethod
    def _strip_secrets(cls, data: Any) -> Any:
        return prepare_document(data, allowed=FEATURED_FIELDS)
