"""Public news bulletin endpoints (active items only)."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.schemas.common import ErrorResponse
from app.schemas.news import NewsRead
from app.services import news as news_service

router = APIRouter()


@router.get("", response_model=list[NewsRead])
def list_public_news(
    db: Annotated[Session, Depends(get_db)],
    limit: Annotated[int, Query(ge=1, le=200)] = 50,
    offset: Annotated[int, Query(ge=0)] = 0,
) -> list[NewsRead]:
    """Active bulletin items, newest display date first."""
    items = news_service.list_news(db, limit=limit, offset=offset)
    return [NewsRead.model_validate(item) for item in items]


@router.get("/{news_id}", response_model=NewsRead, responses={404: {"model": ErrorResponse}})
def get_public_news(news_id: int, db: Annotated[Session, Depends(get_db)]) -> NewsRead:
    return NewsRead.model_validate(news_service.get_news(db, news_id))
