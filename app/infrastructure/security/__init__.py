"""Security: Firebase bearer token verification."""

from app.infrastructure.security.firebase_auth import (
    FirebaseTokenVerifier,
    extract_bearer_token,
    init_token_verifier,
)

__all__ = [
    "FirebaseTokenVerifier",
    "extract_bearer_token",
    "init_token_verifier",
]
