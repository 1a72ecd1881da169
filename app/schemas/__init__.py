"""Pydantic response schemas (views) for the API."""

from app.schemas.envelope import ErrorEnvelope, ItemEnvelope, ListEnvelope
from app.schemas.health import HealthErrorResponse, HealthResponse
from app.schemas.tuition import TuitionView
from app.schemas.tutor import TutorFeaturedView, TutorPublicView

__all__ = [
    "ErrorEnvelope",
    "HealthErrorResponse",
    "HealthResponse",
    "ItemEnvelope",
    "ListEnvelope",
    "TuitionView",
    "TutorFeaturedView",
    "TutorPublicView",
]
