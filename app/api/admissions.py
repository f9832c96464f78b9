"""Public admission form intake."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.schemas.admissions import AdmissionCreate
from app.schemas.common import ErrorResponse, SuccessResponse
from app.services.admissions import submit_admission

router = APIRouter()


@router.post(
    "",
    response_model=SuccessResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
)
def post_admission(
    body: AdmissionCreate,
    db: Annotated[Session, Depends(get_db)],
) -> SuccessResponse:
    """Store a submitted admission application for admin review."""
    row = submit_admission(db, body)
    return SuccessResponse(id=row.id)
