"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
Repositories return raw store documents; the API layer maps them into views.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from bson import ObjectId


class ITutorRepository(Protocol):
    """Protocol for tutor queries (DIP)."""

    async def list_active(self) -> list[dict[str, Any]]:
        """Return active tutors sorted by rating then review count, both descending."""

    async def list_featured(
        self, limit: int = ..., min_rating: float = ...
    ) -> list[dict[str, Any]]:
        """Return at most ``limit`` active tutors with rating >= ``min_rating``."""

    async def get_by_id(self, tutor_id: ObjectId) -> dict[str, Any] | None:
        """Return one tutor by id, or None when absent or not a tutor."""


class ITuitionRepository(Protocol):
    """Protocol for tuition posting queries (DIP)."""

    async def list_all(self) -> list[dict[str, Any]]:
        """Return every tuition posting."""
