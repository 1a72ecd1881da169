"""Request context management using contextvars.

Provides async-safe storage for request-scoped data (the request id) so that
log records emitted anywhere during a request can carry it.

Usage:
    token = set_request_id("abc123")
    try:
        ...
    finally:
        reset_request_id(token)
"""

from contextvars import ContextVar, Token

NO_REQUEST_ID = "-"

_current_request_id: ContextVar[str] = ContextVar(
    "current_request_id", default=NO_REQUEST_ID
)


def set_request_id(request_id: str) -> Token[str]:
    """Set the request id for the current task; returns a token for reset."""
    return _current_request_id.set(request_id)


def reset_request_id(token: Token[str]) -> None:
    """Restore the request id that was current before set_request_id."""
    _current_request_id.reset(token)


def get_request_id() -> str:
    """Return the current request id, or "-" outside a request."""
    return _current_request_id.get()
