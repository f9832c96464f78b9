"""SQLAlchemy declarative Base shared by the users, news, admissions and contacts tables."""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass
