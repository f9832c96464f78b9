"""Pydantic schemas for contact-form messages."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator


class ContactCreate(BaseModel):
    """Public contact form submission."""

    name: str = Field(..., max_length=255)
    email: EmailStr
    phone: str | None = Field(default=None, max_length=32)
    subject: str | None = Field(default=None, max_length=255)
    message: str = Field(..., max_length=5000)

    @field_validator("name", "message")
    @classmethod
    def validate_required_text(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("must not be empty")
        return v


class ContactRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    phone: str | None = None
    subject: str | None = None
    message: str
    created_at: datetime
