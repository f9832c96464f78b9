"""Request/response schemas for auth endpoints."""

from datetime import datetime

from pydantic import AliasChoices, BaseModel, ConfigDict, EmailStr, Field, model_validator


class RegisterRequest(BaseModel):
    """New account details. Accounts created here always get role 'user'."""

    username: str = Field(..., max_length=255, description="Username")
    email: EmailStr = Field(..., description="Email address")
    password: str = Field(..., max_length=128, description="Password")


class LoginRequest(BaseModel):
    """Credentials for login: username or email, plus password."""

    username: str | None = Field(default=None, max_length=255)
    email: str | None = Field(default=None, max_length=255)
    password: str = Field(..., max_length=128, description="Password")

    @model_validator(mode="after")
    def require_identifier(self) -> "LoginRequest":
        if not self.username and not self.email:
            raise ValueError("username or email is required")
        return self

    @property
    def identifier(self) -> str:
        return self.username or self.email or ""


class ChangePasswordRequest(BaseModel):
    current_password: str = Field(
        ...,
        max_length=128,
        validation_alias=AliasChoices("current_password", "currentPassword"),
    )
    new_password: str = Field(
        ...,
        max_length=128,
        validation_alias=AliasChoices("new_password", "newPassword"),
    )


class TokenIdentity(BaseModel):
    """Identity decoded from a verified token; attached to protected requests."""

    id: int
    username: str | None = None
    role: str


class UserSummary(BaseModel):
    """Sanitized user projection returned with a login token."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    role: str


class UserProfile(BaseModel):
    """Sanitized user record (never includes the password hash)."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    email: str
    role: str
    created_at: datetime | None = None


class LoginResponse(BaseModel):
    """JWT access token returned after successful login."""

    token: str = Field(..., description="JWT access token")
    token_type: str = Field(default="bearer", description="Token type")
    user: UserSummary


class UsersListResponse(BaseModel):
    """Response for GET /admin/users (admin only)."""

    users: list[UserProfile]
