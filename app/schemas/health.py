"""Health check API schemas."""

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Response for GET /health when the database answers ping."""

    status: str = Field(default="healthy", description="Service status")
    mongodb: str = Field(default="connected", description="Database connectivity")
    timestamp: str = Field(..., description="ISO-8601 UTC time of the check")


class HealthErrorResponse(BaseModel):
    """Response for GET /health when ping fails (503)."""

    status: str = Field(default="unhealthy", description="Service status")
    mongodb: str = Field(default="disconnected", description="Database connectivity")
    error: str = Field(..., description="Driver error message")
    timestamp: str = Field(..., description="ISO-8601 UTC time of the check")
