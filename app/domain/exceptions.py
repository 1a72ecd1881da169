"""Domain exceptions for the tutoring marketplace API.

Defines the error taxonomy of the service. These exceptions are independent
of HTTP; the presentation layer maps them to JSON envelopes in
app.core.exception_handlers.
"""

from typing import Any

from app.domain.enums import AuthErrorReason


class TutorHubException(Exception):
    """Base exception for all application errors.

    All custom exceptions should inherit from this class to allow
    consistent error handling and logging. Presentation layer maps
    these to HTTP responses using message, error_code, and details.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, resource_id).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Return the error as a failure envelope."""
        return {"success": False, "error": self.message}


class ValidationException(TutorHubException):
    """Raised when client input is malformed (e.g. an invalid identifier)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional field or parameter that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class AuthenticationException(TutorHubException):
    """Raised when a bearer token is missing or fails verification."""

    def __init__(
        self,
        reason: AuthErrorReason,
        message: str | None = None,
    ) -> None:
        """Initialize with the rejection reason.

        Args:
            reason: NO_TOKEN when no usable bearer token was sent,
                INVALID_TOKEN when verification failed.
            message: Optional override of the default message.
        """
        if message is None:
            message = (
                "No token provided"
                if reason is AuthErrorReason.NO_TOKEN
                else "Invalid or expired token"
            )
        self.reason = reason
        super().__init__(message, "AUTHENTICATION_ERROR", {"reason": reason.value})


class ResourceNotFoundException(TutorHubException):
    """Raised when a single-resource lookup finds nothing."""

    def __init__(
        self,
        resource_type: str,
        resource_id: str,
        message: str | None = None,
    ) -> None:
        """Initialize with resource type and id.

        Args:
            resource_type: Type of resource (e.g. 'tutor').
            resource_id: The ID that was not found.
            message: Optional client-facing message.
        """
        super().__init__(
            message or f"{resource_type} not found: {resource_id}",
            "RESOURCE_NOT_FOUND",
            {"resource_type": resource_type, "resource_id": resource_id},
        )


class StoreConnectionException(TutorHubException):
    """Raised when MongoDB cannot be reached (network, auth or timeout)."""

    def __init__(self, message: str) -> None:
        super().__init__(message, "STORE_UNAVAILABLE")


class QueryException(TutorHubException):
    """Raised when a MongoDB query fails for any other reason."""

    def __init__(self, message: str, collection: str | None = None) -> None:
        details = {"collection": collection} if collection else {}
        super().__init__(message, "QUERY_ERROR", details)
