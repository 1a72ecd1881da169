"""MongoDB collection names (schema-in-code).

MongoDB has no DDL or migrations. Collections are created automatically
when the first document is written. Use these constants so collection names
stay consistent and act as the single source of truth for the "schema".

Example:
    from app.infrastructure.mongo.collections import COLLECTION_USERS

    docs = await store.query(COLLECTION_USERS, {"role": "tutor"})
"""

COLLECTION_USERS = "users"
COLLECTION_TUITIONS = "tuitions"

# Written by other services; only indexed here.
COLLECTION_APPLICATIONS = "applications"
COLLECTION_PAYMENTS = "payments"
