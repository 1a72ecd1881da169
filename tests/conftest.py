"""Pytest configuration and fixtures.

HTTP tests run against a fresh app from app.main.create_app() over ASGI.
The lifespan is not run; fixtures attach an in-memory motor-compatible
store (mongomock-motor) to app.state instead of a real MongoDB.
"""

from collections.abc import AsyncIterator
from typing import Any

import pytest
from bson import ObjectId
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from mongomock_motor import AsyncMongoMockClient

from app.core.config import get_settings
from app.infrastructure.mongo.client import MongoStore
from app.infrastructure.mongo.collections import COLLECTION_TUITIONS, COLLECTION_USERS
from app.main import create_app

TEST_DB_NAME = "tutorhub_test"


def make_tutor(**overrides: Any) -> dict[str, Any]:
    """Return a complete tutor document (secrets included) with overrides applied."""
    doc: dict[str, Any] = {
        "_id": ObjectId(),
        "name": "Test Tutor",
        "email": f"tutor-{ObjectId()}@example.com",
        "role": "tutor",
        "status": "active",
        "photoURL": "https://example.com/p.jpg",
        "location": "Dhaka",
        "rating": 4.0,
        "totalReviews": 10,
        "hourlyRate": 500,
        "subjects": ["Mathematics"],
        "qualifications": ["BSc"],
        "isVerified": True,
        "password": "$2b$12$hashedpassword",
        "firebaseUID": "firebase-uid-123",
    }
    doc.update(overrides)
    return doc


@pytest.fixture
def store() -> MongoStore:
    """Store over an in-memory mongomock-motor client (fresh per test)."""
    return MongoStore(AsyncMongoMockClient(), TEST_DB_NAME)


@pytest.fixture
def app(store: MongoStore) -> FastAPI:
    """Application with the in-memory store and no token verifier."""
    application = create_app()
    application.state.store = store
    application.state.token_verifier = None
    return application


@pytest.fixture
async def client(app: FastAPI) -> AsyncIterator[AsyncClient]:
    """Async HTTP client against the FastAPI app (ASGI)."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def insert_users(store: MongoStore):
    """Insert user documents into the users collection."""

    async def _insert(*docs: dict[str, Any]) -> None:
        await store.database.get_collection(COLLECTION_USERS).insert_many(
            [dict(d) for d in docs]
        )

    return _insert


@pytest.fixture
def insert_tuitions(store: MongoStore):
    """Insert tuition documents into the tuitions collection."""

    async def _insert(*docs: dict[str, Any]) -> None:
        await store.database.get_collection(COLLECTION_TUITIONS).insert_many(
            [dict(d) for d in docs]
        )

    return _insert


_ENV_VARS = (
    "MONGO_URI",
    "MONGO_URI_TEST",
    "MONGO_DB_NAME",
    "PORT",
    "MONGO_CONNECT_TIMEOUT_MS",
    "MONGO_SOCKET_TIMEOUT_MS",
    "MONGO_SERVER_SELECTION_TIMEOUT_MS",
    "ALLOWED_ORIGINS",
    "FIREBASE_PROJECT_ID",
    "FIREBASE_CLIENT_EMAIL",
    "FIREBASE_PRIVATE_KEY",
    "FIREBASE_SERVICE_ACCOUNT_KEY",
    "FIREBASE_SERVICE_ACCOUNT_PATH",
    "TELEMETRY_ENABLED",
    "TELEMETRY_EXPORTER",
)


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch):
    """Run each test with no deployment env vars and a fresh settings cache."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
