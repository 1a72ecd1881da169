"""Unhandled error middleware.

Turns exceptions that escaped every exception handler into the 500 failure
envelope. It sits inside the CORS and request-id middleware so those still
decorate the error response (Starlette's own last-resort handler runs
outside all user middleware). Raw ASGI (no BaseHTTPMiddleware).
"""

import json
import logging
from typing import Callable

logger = logging.getLogger(__name__)


def UnhandledErrorMiddleware(app: Callable) -> Callable:
    """Send ``{success: false, error}`` with 500 for any unhandled exception."""

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        response_started = False

        async def send_wrapper(message: dict) -> None:
            nonlocal response_started
            if message["type"] == "http.response.start":
                response_started = True
            await send(message)

        try:
            await app(scope, receive, send_wrapper)
        except Exception as exc:
            logger.exception(
                "Unhandled exception on %s %s: %s",
                scope.get("method", ""),
                scope.get("path", ""),
                exc,
            )
            if response_started:
                raise
            body = json.dumps(
                {"success": False, "error": str(exc) or exc.__class__.__name__}
            ).encode()
            await send({
                "type": "http.response.start",
                "status": 500,
                "headers": [
                    (b"content-type", b"application/json"),
                    (b"content-length", str(len(body)).encode()),
                ],
            })
            await send({
                "type": "http.response.body",
                "body": body,
                "more_body": False,
            })

    return asgi_app
