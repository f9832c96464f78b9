"""News bulletin reads (public and admin) and admin mutations."""

import logging
from datetime import UTC, datetime

from sqlalchemy.orm import Session

from app.core.errors import NotFound
from app.models import NewsItem
from app.schemas.news import NewsCreate, NewsUpdate

logger = logging.getLogger(__name__)


def list_news(
    session: Session,
    *,
    include_inactive: bool = False,
    limit: int = 50,
    offset: int = 0,
) -> list[NewsItem]:
    """Return news newest first by display date. Public callers only see active items."""
    query = session.query(NewsItem)
    if not include_inactive:
        query = query.filter(NewsItem.is_active.is_(True))
    return (
        query.order_by(NewsItem.date.desc(), NewsItem.id.desc())
        .offset(offset)
        .limit(limit)
        .all()
    )


def get_news(session: Session, news_id: int, *, include_inactive: bool = False) -> NewsItem:
    item = session.get(NewsItem, news_id)
    if item is None or (not include_inactive and not item.is_active):
        raise NotFound("News item not found")
    return item


def create_news(session: Session, data: NewsCreate, author_id: int | None = None) -> NewsItem:
    item = NewsItem(
        title=data.title,
        content=data.content,
        date=data.date or datetime.now(UTC),
        is_active=data.is_active,
        author_id=author_id,
    )
    session.add(item)
    session.commit()
    session.refresh(item)
    logger.info("News item created", extra={"news_id": item.id, "author_id": author_id})
    return item


def update_news(session: Session, news_id: int, data: NewsUpdate) -> NewsItem:
    """Apply the fields present in data; raises NotFound for an unknown id."""
    item = get_news(session, news_id, include_inactive=True)
    changes = data.model_dump(exclude_unset=True, exclude_none=True)
    for field, value in changes.items():
        setattr(item, field, value)
    session.commit()
    session.refresh(item)
    logger.info("News item updated", extra={"news_id": item.id, "fields": sorted(changes)})
    return item


def delete_news(session: Session, news_id: int) -> None:
    item = get_news(session, news_id, include_inactive=True)
    session.delete(item)
    session.commit()
    logger.info("News item deleted", extra={"news_id": news_id})
