"""Health check endpoint. Pings MongoDB; used for liveness and readiness probes."""

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from app.domain.exceptions import StoreConnectionException
from app.schemas.health import HealthErrorResponse, HealthResponse
from app.shared.utils.datetime import utc_isoformat

router = APIRouter()


@router.get(
    "",
    response_model=HealthResponse,
    responses={503: {"description": "MongoDB unreachable", "model": HealthErrorResponse}},
)
async def health_check(request: Request) -> HealthResponse | JSONResponse:
    """Return 200 when MongoDB answers ping; 503 with the driver error otherwise."""
    store = getattr(request.app.state, "store", None)
    try:
        if store is None:
            raise StoreConnectionException("MongoDB client is not initialized")
        await store.ping()
    except StoreConnectionException as e:
        return JSONResponse(
            status_code=503,
            content=HealthErrorResponse(
                error=e.message, timestamp=utc_isoformat()
            ).model_dump(),
        )
    return HealthResponse(timestamp=utc_isoformat())
