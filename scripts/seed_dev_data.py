"""Seed dev data from scripts/seed-data.json into MongoDB.

Loads users (by email; inserted if missing, left untouched otherwise) and
tuition postings (studentEmail resolved to the student's _id), then ensures
the indexes the API relies on.

Usage:
    python -m scripts.seed_dev_data [path/to/seed-data.json]

Default path: scripts/seed-data.json (relative to project root).
Requires: MONGO_URI (or MONGO_URI_TEST) and MONGO_DB_NAME.
"""

from __future__ import annotations

import asyncio
import json
import sys
from pathlib import Path

from dotenv import load_dotenv

from app.core.config import get_settings
from app.domain.exceptions import StoreConnectionException
from app.infrastructure.mongo.client import MongoStore
from app.infrastructure.mongo.collections import COLLECTION_TUITIONS, COLLECTION_USERS
from app.infrastructure.mongo.indexes import ensure_indexes


def _project_root() -> Path:
    return Path(__file__).resolve().parent.parent


def _load_env() -> None:
    """Load .env from project root so get_settings() sees MONGO_* when run as script."""
    load_dotenv(_project_root() / ".env", override=True)
    get_settings.cache_clear()


async def _seed_users(store: MongoStore, users: list[dict]) -> dict[str, object]:
    """Insert users missing by email; return email -> _id for all seeded users."""
    coll = store.database.get_collection(COLLECTION_USERS)
    ids: dict[str, object] = {}
    for u in users:
        email = u.get("email")
        if not email:
            print(f"  Skip user without email: {u.get('name')!r}", file=sys.stderr)
            continue
        existing = await coll.find_one({"email": email}, {"_id": 1})
        if existing:
            ids[email] = existing["_id"]
            print(f"  User {email} already exists, skip")
            continue
        result = await coll.insert_one(dict(u))
        ids[email] = result.inserted_id
        print(f"  User {email} ({u.get('role')}) -> {result.inserted_id}")
    return ids


async def _seed_tuitions(
    store: MongoStore, tuitions: list[dict], user_ids: dict[str, object]
) -> None:
    coll = store.database.get_collection(COLLECTION_TUITIONS)
    for t in tuitions:
        doc = dict(t)
        student_email = doc.pop("studentEmail", None)
        if student_email is not None:
            if student_email not in user_ids:
                print(f"  Skip tuition: unknown student {student_email}", file=sys.stderr)
                continue
            doc["studentId"] = user_ids[student_email]
        result = await coll.insert_one(doc)
        print(f"  Tuition {doc.get('title', '')!r} -> {result.inserted_id}")


async def run(path: Path) -> None:
    _load_env()
    if not path.exists():
        print(f"Seed file not found: {path}", file=sys.stderr)
        sys.exit(1)
    with path.open() as f:
        data = json.load(f)

    try:
        store = MongoStore.from_settings(get_settings())
        await store.connect()
    except StoreConnectionException as e:
        print(f"Cannot connect to MongoDB: {e.message}", file=sys.stderr)
        sys.exit(1)

    try:
        user_ids = await _seed_users(store, data.get("users", []))
        await _seed_tuitions(store, data.get("tuitions", []), user_ids)
        created = await ensure_indexes(store.database)
        print(f"Indexes: {', '.join(created) or 'none'}")
    finally:
        store.close()

    print("Seed completed.")


def main() -> None:
    root = _project_root()
    path_arg = sys.argv[1] if len(sys.argv) > 1 else None
    path = Path(path_arg) if path_arg else root / "scripts" / "seed-data.json"
    if not path.is_absolute():
        path = (root / path).resolve()
    asyncio.run(run(path))


if __name__ == "__main__":
    main()
