"""Domain layer: enums and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from app.domain.enums import AuthErrorReason, UserRole, UserStatus
from app.domain.exceptions import (
    AuthenticationException,
    QueryException,
    ResourceNotFoundException,
    StoreConnectionException,
    TutorHubException,
    ValidationException,
)

__all__ = [
    # Enums
    "AuthErrorReason",
    "UserRole",
    "UserStatus",
    # Exceptions
    "AuthenticationException",
    "QueryException",
    "ResourceNotFoundException",
    "StoreConnectionException",
    "TutorHubException",
    "ValidationException",
]
