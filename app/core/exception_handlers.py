"""Centralized exception handlers for the FastAPI app.

Register with register_exception_handlers(app). Maps domain and framework
exceptions to the ``{success: false, error}`` envelope; errors no handler
claims are enveloped by app.middleware.unhandled_errors.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.domain.exceptions import TutorHubException
from app.schemas.envelope import ErrorEnvelope

logger = logging.getLogger(__name__)

# Map domain error_code to HTTP status
_ERROR_CODE_STATUS: dict[str, int] = {
    "VALIDATION_ERROR": 400,
    "AUTHENTICATION_ERROR": 401,
    "RESOURCE_NOT_FOUND": 404,
    "QUERY_ERROR": 500,
    "STORE_UNAVAILABLE": 500,
}


def _envelope(status_code: int, envelope: ErrorEnvelope, **kwargs) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=envelope.model_dump(exclude_none=True),
        **kwargs,
    )


def _tutorhub_exception_handler(
    request: Request, exc: TutorHubException
) -> JSONResponse:
    """Return the failure envelope with the status mapped from error_code."""
    status = _ERROR_CODE_STATUS.get(exc.error_code, 400)
    if status >= 500:
        logger.error("%s on %s: %s", exc.error_code, request.url.path, exc.message)
    headers = {"WWW-Authenticate": "Bearer"} if status == 401 else None
    return JSONResponse(status_code=status, content=exc.to_dict(), headers=headers)


def _validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Return 422 with validation error details."""
    return _envelope(
        422,
        ErrorEnvelope(error="Request validation failed", details=jsonable_encoder(exc.errors())),
    )


def _http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Return the failure envelope for Starlette HTTP exceptions (404, 405, ...)."""
    return _envelope(
        exc.status_code,
        ErrorEnvelope(error=str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI app.

    Call once after creating the app. Handlers: TutorHubException (and
    subclasses), RequestValidationError, StarletteHTTPException. Anything else is
    turned into the 500 envelope by UnhandledErrorMiddleware.
    """
    app.add_exception_handler(TutorHubException, _tutorhub_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
