"""ORM model for submitted admission applications."""

from sqlalchemy import Column, Date, DateTime, Integer, String, Text, func

from app.models.base import Base


class Admission(Base):
    __tablename__ = "admissions"

    id = Column(Integer, primary_key=True, autoincrement=True)
    student_name = Column(String(255), nullable=False)
    guardian_name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False, index=True)
    phone = Column(String(32), nullable=False)
    date_of_birth = Column(Date, nullable=True)
    program = Column(String(255), nullable=False)
    address = Column(Text, nullable=True)
    message = Column(Text, nullable=True)
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        index=True,
    )
