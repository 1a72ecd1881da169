"""Firebase ID token verification (google-auth, no firebase-admin).

Firebase ID tokens are RS256 JWTs signed by Google's securetoken service.
google-auth fetches the public certificates and checks signature, expiry
and audience; issuer and subject are checked here. Verification does
blocking HTTP, so it runs in a worker thread.

Project id comes from FIREBASE_PROJECT_ID, or from a service account given
as FIREBASE_SERVICE_ACCOUNT_KEY (JSON string) or FIREBASE_SERVICE_ACCOUNT_PATH.
"""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path
from typing import Any

from google.auth import exceptions as google_auth_exceptions
from google.auth.transport import requests as google_requests
from google.oauth2 import id_token

from app.core.config import Settings
from app.domain.enums import AuthErrorReason
from app.domain.exceptions import AuthenticationException

logger = logging.getLogger(__name__)

_ISSUER_PREFIX = "https://securetoken.google.com/"
_BEARER_SCHEME = "bearer"


def extract_bearer_token(authorization: str | None) -> str:
    """Return the token from an ``Authorization: Bearer <token>`` header.

    Raises:
        AuthenticationException: NO_TOKEN when the header is missing, uses
            another scheme, or carries an empty token.
    """
    if not authorization:
        raise AuthenticationException(AuthErrorReason.NO_TOKEN)
    scheme, _, token = authorization.strip().partition(" ")
    token = token.strip()
    if scheme.lower() != _BEARER_SCHEME or not token:
        raise AuthenticationException(AuthErrorReason.NO_TOKEN)
    return token


class FirebaseTokenVerifier:
    """Verify Firebase ID tokens for one project (implements ITokenVerifier)."""

    def __init__(self, project_id: str, request: Any | None = None) -> None:
        """Initialize for a Firebase project.

        Args:
            project_id: Expected audience and issuer suffix.
            request: google-auth transport request used to fetch certificates.
        """
        self.project_id = project_id
        self._request = request or google_requests.Request()

    def _verify_sync(self, token: str) -> dict[str, Any]:
        return id_token.verify_firebase_token(
            token, self._request, audience=self.project_id
        )

    async def verify(self, token: str) -> dict[str, Any]:
        """Verify the token and return its claims.

        Raises:
            AuthenticationException: NO_TOKEN for an empty token, INVALID_TOKEN
                for a bad signature, expiry, wrong audience/issuer or a failed
                certificate fetch.
        """
        if not token:
            raise AuthenticationException(AuthErrorReason.NO_TOKEN)
        try:
            claims = await asyncio.to_thread(self._verify_sync, token)
        except (ValueError, google_auth_exceptions.GoogleAuthError) as e:
            logger.info("Firebase token rejected: %s", e)
            raise AuthenticationException(AuthErrorReason.INVALID_TOKEN) from e
        if not claims:
            raise AuthenticationException(AuthErrorReason.INVALID_TOKEN)
        if claims.get("iss") != f"{_ISSUER_PREFIX}{self.project_id}":
            raise AuthenticationException(AuthErrorReason.INVALID_TOKEN)
        if not claims.get("sub"):
            raise AuthenticationException(AuthErrorReason.INVALID_TOKEN)
        return claims


def _load_service_account(settings: Settings) -> dict[str, Any] | None:
    """Return service account dict from env key or file path."""
    key_json = (
        settings.firebase_service_account_key.get_secret_value()
        if settings.firebase_service_account_key
        else None
    )
    if key_json:
        try:
            return json.loads(key_json)
        except json.JSONDecodeError as e:
            raise ValueError("FIREBASE_SERVICE_ACCOUNT_KEY is not valid JSON") from e
    path = settings.firebase_service_account_path
    if path:
        resolved = Path(path).expanduser().resolve()
        if not resolved.is_file():
            logger.warning(
                "FIREBASE_SERVICE_ACCOUNT_PATH set but file not found: %s (resolved: %s)",
                path,
                resolved,
            )
            return None
        with open(resolved, encoding="utf-8") as f:
            return json.load(f)
    return None


def _check_service_account_fields(settings: Settings) -> None:
    """Warn when only half of the service account credentials are set."""
    has_email = bool(settings.firebase_client_email)
    has_key = bool(
        settings.firebase_private_key
        and settings.firebase_private_key.get_secret_value()
    )
    if has_email != has_key:
        logger.warning(
            "FIREBASE_CLIENT_EMAIL and FIREBASE_PRIVATE_KEY should be set together"
        )


def resolve_project_id(settings: Settings) -> str | None:
    """Return the Firebase project id from settings or the service account JSON."""
    if settings.firebase_project_id:
        _check_service_account_fields(settings)
        return settings.firebase_project_id
    key_dict = _load_service_account(settings)
    if not key_dict:
        return None
    project_id = key_dict.get("project_id")
    if not project_id:
        logger.error("Firebase service account JSON missing 'project_id'")
        return None
    return project_id


def init_token_verifier(settings: Settings) -> FirebaseTokenVerifier | None:
    """Build the verifier, or None when Firebase is not configured.

    Safe to call when nothing is set (no-op). On malformed configuration,
    logs the exception and returns None so the app can start without auth.
    """
    try:
        project_id = resolve_project_id(settings)
    except (ValueError, OSError):
        logger.exception("Firebase configuration invalid; token verification disabled")
        return None
    if not project_id:
        logger.info("Firebase not configured; token verification disabled")
        return None
    logger.info("Firebase token verification enabled (project=%s)", project_id)
    return FirebaseTokenVerifier(project_id)
