"""HTTP layer: routers, endpoints and dependencies."""

from app.api.router import api_router, health_router

__all__ = ["api_router", "health_router"]
