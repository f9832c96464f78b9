"""SQLAlchemy ORM models."""

from app.models.admission import Admission
from app.models.base import Base
from app.models.contact import ContactMessage
from app.models.news import NewsItem
from app.models.user import User

__all__ = ["Admission", "Base", "ContactMessage", "NewsItem", "User"]
