"""Tuition postings API."""

from typing import Annotated

from fastapi import APIRouter, Depends

from app.api.dependencies import get_tuition_repo
from app.application.interfaces import ITuitionRepository
from app.schemas.envelope import ListEnvelope
from app.schemas.tuition import TuitionView

router = APIRouter()


@router.get("", response_model=ListEnvelope[TuitionView])
async def list_tuitions(
    tuition_repo: Annotated[ITuitionRepository, Depends(get_tuition_repo)],
) -> ListEnvelope[TuitionView]:
    """List every tuition posting."""
    docs = await tuition_repo.list_all()
    return ListEnvelope[TuitionView].of([TuitionView.model_validate(d) for d in docs])
