"""Application interfaces (ports) implemented by infrastructure."""

from app.application.interfaces.repositories import (
    ITuitionRepository,
    ITutorRepository,
)
from app.application.interfaces.services import ITokenVerifier

__all__ = [
    "ITokenVerifier",
    "ITuitionRepository",
    "ITutorRepository",
]
