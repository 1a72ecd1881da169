"""Tutor API: thin routes delegating to the tutor repository."""

from typing import Annotated

from bson import ObjectId
from fastapi import APIRouter, Depends

from app.api.dependencies import get_tutor_object_id, get_tutor_repo
from app.application.interfaces import ITutorRepository
from app.domain.exceptions import ResourceNotFoundException
from app.schemas.envelope import ErrorEnvelope, ItemEnvelope, ListEnvelope
from app.schemas.tutor import TutorFeaturedView, TutorPublicView

router = APIRouter()


@router.get("", response_model=ListEnvelope[TutorPublicView])
async def list_tutors(
    tutor_repo: Annotated[ITutorRepository, Depends(get_tutor_repo)],
) -> ListEnvelope[TutorPublicView]:
    """List active tutors, highest rating first (ties: most reviews first)."""
    docs = await tutor_repo.list_active()
    return ListEnvelope[TutorPublicView].of(
        [TutorPublicView.model_validate(d) for d in docs]
    )


@router.get("/featured", response_model=ListEnvelope[TutorFeaturedView])
async def list_featured_tutors(
    tutor_repo: Annotated[ITutorRepository, Depends(get_tutor_repo)],
) -> ListEnvelope[TutorFeaturedView]:
    """Up to 8 active tutors rated 4.5 or higher."""
    docs = await tutor_repo.list_featured()
    return ListEnvelope[TutorFeaturedView].of(
        [TutorFeaturedView.model_validate(d) for d in docs]
    )


@router.get(
    "/{tutor_id}",
    response_model=ItemEnvelope[TutorPublicView],
    responses={
        400: {"description": "Malformed tutor id", "model": ErrorEnvelope},
        404: {"description": "Tutor not found", "model": ErrorEnvelope},
    },
)
async def get_tutor(
    tutor_oid: Annotated[ObjectId, Depends(get_tutor_object_id)],
    tutor_repo: Annotated[ITutorRepository, Depends(get_tutor_repo)],
) -> ItemEnvelope[TutorPublicView]:
    """Return one tutor profile by id."""
    doc = await tutor_repo.get_by_id(tutor_oid)
    if doc is None:
        raise ResourceNotFoundException(
            "tutor", str(tutor_oid), message="Tutor not found"
        )
    return ItemEnvelope[TutorPublicView](data=TutorPublicView.model_validate(doc))
