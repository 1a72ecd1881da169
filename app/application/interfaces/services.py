"""Service interfaces (ports) for the application layer."""

from __future__ import annotations

from typing import Any, Protocol


class ITokenVerifier(Protocol):
    """Protocol for bearer token verification against an identity provider."""

    async def verify(self, token: str) -> dict[str, Any]:
        """Return the token's claims.

        Raises:
            AuthenticationException: If the token is missing, invalid or expired.
        """
