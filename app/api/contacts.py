"""Public contact form intake."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.schemas.common import ErrorResponse, SuccessResponse
from app.schemas.contacts import ContactCreate
from app.services.contacts import submit_contact

router = APIRouter()


@router.post(
    "",
    response_model=SuccessResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
)
def post_contact(
    body: ContactCreate,
    db: Annotated[Session, Depends(get_db)],
) -> SuccessResponse:
    row = submit_contact(db, body)
    return SuccessResponse(id=row.id)
