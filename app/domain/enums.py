"""Domain enumerations for the tutoring marketplace.

Enums represent fixed sets of domain values stored on documents
(e.g. user role and account status).
"""

from enum import Enum


class UserRole(str, Enum):
    """Role of a marketplace user.

    Only tutors are exposed by the listing endpoints.
    """

    TUTOR = "tutor"
    STUDENT = "student"
    ADMIN = "admin"


class UserStatus(str, Enum):
    """Account status. Listings only show active tutors."""

    ACTIVE = "active"
    INACTIVE = "inactive"
    SUSPENDED = "suspended"


class AuthErrorReason(str, Enum):
    """Why a bearer token was rejected."""

    NO_TOKEN = "NO_TOKEN"
    INVALID_TOKEN = "INVALID_TOKEN"
