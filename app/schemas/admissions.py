"""Pydantic schemas for admission applications."""

from datetime import date, datetime

from pydantic import AliasChoices, BaseModel, ConfigDict, EmailStr, Field, field_validator


class AdmissionCreate(BaseModel):
    """Public admission form submission."""

    student_name: str = Field(
        ...,
        max_length=255,
        validation_alias=AliasChoices("student_name", "studentName"),
    )
    guardian_name: str = Field(
        ...,
        max_length=255,
        validation_alias=AliasChoices("guardian_name", "guardianName"),
    )
    email: EmailStr
    phone: str = Field(..., max_length=32)
    date_of_birth: date | None = Field(
        default=None,
        validation_alias=AliasChoices("date_of_birth", "dateOfBirth"),
    )
    program: str = Field(..., max_length=255, description="Class or course applied for")
    address: str | None = Field(default=None, max_length=2000)
    message: str | None = Field(default=None, max_length=5000)

    @field_validator("student_name", "guardian_name", "phone", "program")
    @classmethod
    def validate_required_text(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("must not be empty")
        return v


class AdmissionRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    student_name: str
    guardian_name: str
    email: str
    phone: str
    date_of_birth: date | None = None
    program: str
    address: str | None = None
    message: str | None = None
    created_at: datetime
