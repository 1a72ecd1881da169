"""FastAPI dependencies (composition root).

Routes receive repositories and the authenticated principal through these
functions; nothing in an endpoint constructs infrastructure directly.
"""

from __future__ import annotations

from typing import Annotated, Any

from bson import ObjectId
from fastapi import Depends, Header, Request

from app.application.interfaces import ITokenVerifier, ITuitionRepository, ITutorRepository
from app.domain.enums import AuthErrorReason
from app.domain.exceptions import AuthenticationException, StoreConnectionException
from app.infrastructure.mongo.client import MongoStore
from app.infrastructure.mongo.repositories import (
    MongoTuitionRepository,
    MongoTutorRepository,
)
from app.infrastructure.security.firebase_auth import extract_bearer_token
from app.shared.utils.object_ids import parse_object_id


def get_store(request: Request) -> MongoStore:
    """Return the process-wide store created at startup."""
    store = getattr(request.app.state, "store", None)
    if store is None:
        raise StoreConnectionException("MongoDB client is not initialized")
    return store


def get_tutor_repo(
    store: Annotated[MongoStore, Depends(get_store)],
) -> ITutorRepository:
    """Tutor repository over the shared store."""
    return MongoTutorRepository(store)


def get_tuition_repo(
    store: Annotated[MongoStore, Depends(get_store)],
) -> ITuitionRepository:
    """Tuition repository over the shared store."""
    return MongoTuitionRepository(store)


def get_token_verifier(request: Request) -> ITokenVerifier | None:
    """Return the Firebase token verifier, or None when auth is not configured."""
    return getattr(request.app.state, "token_verifier", None)


def get_tutor_object_id(tutor_id: str) -> ObjectId:
    """Parse the ``{tutor_id}`` path parameter; 400 on malformed ids."""
    return parse_object_id(tutor_id, resource="tutor")


async def get_current_principal(
    request: Request,
    verifier: Annotated[ITokenVerifier | None, Depends(get_token_verifier)],
    authorization: Annotated[str | None, Header()] = None,
) -> dict[str, Any]:
    """Verify the bearer token and attach its claims to request.state.principal.

    Raises:
        AuthenticationException: NO_TOKEN without a usable bearer header,
            INVALID_TOKEN when verification fails or auth is not configured.
    """
    token = extract_bearer_token(authorization)
    if verifier is None:
        raise AuthenticationException(
            AuthErrorReason.INVALID_TOKEN, "Token verification is not configured"
        )
    claims = await verifier.verify(token)
    request.state.principal = claims
    return claims
