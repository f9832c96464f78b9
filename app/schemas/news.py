"""Pydantic schemas for the news bulletin."""

from datetime import datetime

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


def _strip_required(value: str) -> str:
    value = value.strip()
    if not value:
        raise ValueError("must not be empty")
    return value


class NewsCreate(BaseModel):
    """Admin payload for a new bulletin item; date defaults to now."""

    title: str = Field(..., max_length=255)
    content: str = Field(...)
    date: datetime | None = None
    is_active: bool = Field(
        default=True,
        validation_alias=AliasChoices("is_active", "isActive"),
    )

    @field_validator("title", "content")
    @classmethod
    def validate_text(cls, v: str) -> str:
        return _strip_required(v)


class NewsUpdate(BaseModel):
    """Partial update; omitted fields keep their stored values."""

    title: str | None = Field(default=None, max_length=255)
    content: str | None = None
    date: datetime | None = None
    is_active: bool | None = Field(
        default=None,
        validation_alias=AliasChoices("is_active", "isActive"),
    )

    @field_validator("title", "content")
    @classmethod
    def validate_text(cls, v: str | None) -> str | None:
        if v is None:
            return None
        return _strip_required(v)


class NewsRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    content: str
    date: datetime
    is_active: bool
    author_id: int | None = None
    created_at: datetime
    updated_at: datetime | None = None
