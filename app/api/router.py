"""API router aggregation.

Includes all endpoint modules with consistent prefix and tags. All routes
use dependencies from app.api.dependencies (no manual repo construction).
"""

from fastapi import APIRouter

from app.api.endpoints import health, tuitions, tutors

api_router = APIRouter()

api_router.include_router(tutors.router, prefix="/tutors", tags=["tutors"])
api_router.include_router(tuitions.router, prefix="/tuitions", tags=["tuitions"])

# Mounted at the application root, outside /api.
health_router = APIRouter()
health_router.include_router(health.router, prefix="/health", tags=["health"])
