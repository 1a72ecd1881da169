"""Tuition posting API view."""

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator

from app.shared.utils.object_ids import stringify_object_ids


class TuitionView(BaseModel):
    """Tuition posting as stored (all fields, unchanged), with ids as strings."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: Any = Field(
        ...,
        validation_alias=AliasChoices("_id", "id"),
        serialization_alias="_id",
    )

    @model_validator(mode="before")
    @classmethod
    def _stringify_ids(cls, data: Any) -> Any:
        return stringify_object_ids(data)
