"""Application lifespan: startup and shutdown.

Single place for all startup/shutdown logic (SRP). Used by main.py;
no business logic here, only wiring of infrastructure (MongoDB store,
Firebase token verifier, telemetry).

The HTTP listener does not wait for MongoDB: the connection and index
bootstrap run in a background task, and a failed connection is logged
without stopping the service (/health reports 503 until it recovers).
"""

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from app.core.config import get_settings
from app.domain.exceptions import StoreConnectionException
from app.infrastructure.mongo.client import MongoStore
from app.infrastructure.mongo.indexes import ensure_indexes
from app.infrastructure.security.firebase_auth import init_token_verifier

logger = logging.getLogger(__name__)


async def connect_and_prepare(store: MongoStore) -> bool:
    """Connect to MongoDB, then ensure indexes.

    Returns:
        True when connected (index failures are logged only), False when the
        connection failed.
    """
    try:
        await store.connect()
    except StoreConnectionException as e:
        logger.error("MongoDB connection error: %s", e.message)
        return False
    await ensure_indexes(store.database)
    return True


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Startup order: store, token verifier, background connect, telemetry (if
    enabled). Shutdown order: cancel background connect, close store,
    telemetry shutdown.
    """
    settings = get_settings()

    # ---- Startup ----
    try:
        store: MongoStore | None = MongoStore.from_settings(settings)
    except StoreConnectionException as e:
        logger.error("MongoDB client not created: %s", e.message)
        store = None
    app.state.store = store
    app.state.token_verifier = init_token_verifier(settings)
    app.state.store_startup_task = (
        asyncio.create_task(connect_and_prepare(store)) if store is not None else None
    )

    if settings.telemetry_enabled:
        from app.shared.telemetry.telemetry import TelemetryConfig, set_telemetry

        telemetry = TelemetryConfig(
            service_name=settings.app_name,
            service_version=settings.app_version,
            enabled=True,
            environment=settings.telemetry_environment,
        )
        telemetry.setup_telemetry(
            exporter_type=settings.telemetry_exporter,
            otlp_endpoint=settings.telemetry_otlp_endpoint,
            sample_rate=settings.telemetry_sample_rate,
        )
        set_telemetry(telemetry)
        telemetry.instrument_fastapi(app)
        telemetry.instrument_pymongo()
        telemetry.instrument_logging()
        logger.info("Telemetry initialized")

    logger.info("Server ready on port %s (health check: /health)", settings.port)

    yield

    # ---- Shutdown ----
    startup_task = getattr(app.state, "store_startup_task", None)
    if startup_task is not None and not startup_task.done():
        startup_task.cancel()
        try:
            await startup_task
        except asyncio.CancelledError:
            pass
        logger.info("MongoDB startup task cancelled")

    if getattr(app.state, "store", None) is not None:
        app.state.store.close()
        app.state.store = None

    from app.shared.telemetry.telemetry import get_telemetry, set_telemetry

    telemetry_instance = get_telemetry()
    if telemetry_instance is not None:
        telemetry_instance.shutdown()
        set_telemetry(None)
