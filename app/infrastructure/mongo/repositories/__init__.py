"""MongoDB repository implementations."""

from app.infrastructure.mongo.repositories.tuition_repo import MongoTuitionRepository
from app.infrastructure.mongo.repositories.tutor_repo import MongoTutorRepository

__all__ = [
    "MongoTuitionRepository",
    "MongoTutorRepository",
]
