"""Uniform JSON envelope for every API response."""

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class ListEnvelope(BaseModel, Generic[T]):
    """Successful list response: ``{success, count, data: [...]}``."""

    success: bool = True
    count: int = Field(..., ge=0, description="Number of items in data")
    data: list[T]

    @classmethod
    def of(cls, items: list[T]) -> "ListEnvelope[T]":
        return cls(count=len(items), data=items)


class ItemEnvelope(BaseModel, Generic[T]):
    """Successful single-item response: ``{success, data: {...}}``."""

    success: bool = True
    data: T


class ErrorEnvelope(BaseModel):
    """Failure response: ``{success: false, error}``."""

    success: bool = False
    error: str
    details: Any | None = Field(
        default=None, description="Validation errors, when the request was malformed"
    )
