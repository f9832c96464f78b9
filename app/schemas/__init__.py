"""Pydantic request/response schemas."""

from app.schemas.admissions import AdmissionCreate, AdmissionRead
from app.schemas.auth import (
    ChangePasswordRequest,
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    TokenIdentity,
    UserProfile,
    UserSummary,
    UsersListResponse,
)
from app.schemas.common import ErrorResponse, SuccessResponse
from app.schemas.contacts import ContactCreate, ContactRead
from app.schemas.health import HealthResponse
from app.schemas.news import NewsCreate, NewsRead, NewsUpdate

__all__ = [
    "AdmissionCreate",
    "AdmissionRead",
    "ChangePasswordRequest",
    "ContactCreate",
    "ContactRead",
    "ErrorResponse",
    "HealthResponse",
    "LoginRequest",
    "LoginResponse",
    "NewsCreate",
    "NewsRead",
    "NewsUpdate",
    "RegisterRequest",
    "SuccessResponse",
    "TokenIdentity",
    "UserProfile",
    "UserSummary",
    "UsersListResponse",
]
