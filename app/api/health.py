"""Health check endpoint with database connectivity check."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.database import check_db_connected, get_db
from app.schemas.health import HealthResponse

router = APIRouter()


@router.get("", response_model=HealthResponse)
def get_health(request: Request, db: Annotated[Session, Depends(get_db)]) -> HealthResponse:
    """Liveness plus database reachability, for load balancers and uptime checks."""
    db_status = "connected" if check_db_connected(db) else "disconnected"
    return HealthResponse(
        environment=settings.APP_ENV,
        version=request.app.version,
        database=db_status,
    )
