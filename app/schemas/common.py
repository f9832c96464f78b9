"""Response shapes shared across endpoints."""

from pydantic import BaseModel, Field


class SuccessResponse(BaseModel):
    """Acknowledgement for writes; id is set when a record was created."""

    success: bool = Field(default=True)
    id: int | None = Field(default=None, description="Id of the created record, if any")


class ErrorResponse(BaseModel):
    """Body of every error response."""

    error: str = Field(..., description="Short, client-safe error message")
