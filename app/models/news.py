"""ORM model for news bulletin items."""

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String, Text, func, true

from app.models.base import Base


class NewsItem(Base):
    """
    One entry of the public news bulletin.

    Only rows with is_active set are shown publicly; `date` is the display date
    and can be edited, unlike created_at.
    """

    __tablename__ = "news_updates"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False)
    content = Column(Text, nullable=False)
    date = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        index=True,
    )
    is_active = Column(Boolean, nullable=False, default=True, server_default=true())
    author_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
    )
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
    updated_at = Column(
        DateTime(timezone=True),
        nullable=True,
        onupdate=func.now(),
    )
