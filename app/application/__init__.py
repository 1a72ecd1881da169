"""Application layer: interfaces (ports).

Depends only on domain and protocol definitions (DIP).
Infrastructure implements the interfaces (repositories, token verifier).
"""

from app.application.interfaces import (
    ITokenVerifier,
    ITuitionRepository,
    ITutorRepository,
)

__all__ = [
    "ITokenVerifier",
    "ITuitionRepository",
    "ITutorRepository",
]
