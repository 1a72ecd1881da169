"""Core constants: shared literal values for tutor listings.

Single source of truth for the secret fields and the featured-tutor rules,
used by the Mongo repositories (projections) and the API views.
"""

# Never returned by any endpoint.
TUTOR_SECRET_FIELDS = ("password", "firebaseUID")

FEATURED_LIMIT = 8
FEATURED_MIN_RATING = 4.5

# Allow-list for the featured view (plus _id).
FEATURED_FIELDS = (
    "name",
    "email",
    "photoURL",
    "location",
    "rating",
    "totalReviews",
    "hourlyRate",
    "subjects",
    "qualifications",
    "isVerified",
)
