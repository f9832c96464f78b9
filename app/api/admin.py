"""
Admin endpoints. Every route here is an AdminRoute, so the token is checked
before the body is parsed: no token gives 401, a non-admin token gives 403.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.api.auth import AdminRoute, get_credential_store, require_admin
from app.core.database import get_db
from app.schemas.admissions import AdmissionRead
from app.schemas.auth import TokenIdentity, UserProfile, UsersListResponse
from app.schemas.common import ErrorResponse, SuccessResponse
from app.schemas.contacts import ContactRead
from app.schemas.news import NewsCreate, NewsRead, NewsUpdate
from app.services import admissions as admissions_service
from app.services import contacts as contacts_service
from app.services import news as news_service
from app.services.credential_store import CredentialStore

router = APIRouter(
    route_class=AdminRoute,
    dependencies=[Depends(require_admin)],
    responses={401: {"model": ErrorResponse}, 403: {"model": ErrorResponse}},
)

DB = Annotated[Session, Depends(get_db)]
Admin = Annotated[TokenIdentity, Depends(require_admin)]
Limit = Annotated[int, Query(ge=1, le=200)]
Offset = Annotated[int, Query(ge=0)]
NOT_FOUND = {404: {"model": ErrorResponse}}


# --- news ---


@router.get("/news", response_model=list[NewsRead], tags=["admin-news"])
def admin_list_news(db: DB, limit: Limit = 50, offset: Offset = 0) -> list[NewsRead]:
    """All bulletin items, including inactive ones."""
    items = news_service.list_news(db, include_inactive=True, limit=limit, offset=offset)
    return [NewsRead.model_validate(item) for item in items]


@router.post(
    "/news",
    response_model=NewsRead,
    status_code=status.HTTP_201_CREATED,
    tags=["admin-news"],
)
def admin_create_news(body: NewsCreate, db: DB, admin: Admin) -> NewsRead:
    item = news_service.create_news(db, body, author_id=admin.id)
    return NewsRead.model_validate(item)


@router.put("/news/{news_id}", response_model=NewsRead, responses=NOT_FOUND, tags=["admin-news"])
def admin_update_news(news_id: int, body: NewsUpdate, db: DB) -> NewsRead:
    return NewsRead.model_validate(news_service.update_news(db, news_id, body))


@router.delete(
    "/news/{news_id}", response_model=SuccessResponse, responses=NOT_FOUND, tags=["admin-news"]
)
def admin_delete_news(news_id: int, db: DB) -> SuccessResponse:
    news_service.delete_news(db, news_id)
    return SuccessResponse()


# --- admissions ---


@router.get("/admissions", response_model=list[AdmissionRead], tags=["admin-admissions"])
def admin_list_admissions(db: DB, limit: Limit = 50, offset: Offset = 0) -> list[AdmissionRead]:
    rows = admissions_service.list_admissions(db, limit=limit, offset=offset)
    return [AdmissionRead.model_validate(row) for row in rows]


@router.get(
    "/admissions/{admission_id}",
    response_model=AdmissionRead,
    responses=NOT_FOUND,
    tags=["admin-admissions"],
)
def admin_get_admission(admission_id: int, db: DB) -> AdmissionRead:
    return AdmissionRead.model_validate(admissions_service.get_admission(db, admission_id))


@router.delete(
    "/admissions/{admission_id}",
    response_model=SuccessResponse,
    responses=NOT_FOUND,
    tags=["admin-admissions"],
)
def admin_delete_admission(admission_id: int, db: DB) -> SuccessResponse:
    admissions_service.delete_admission(db, admission_id)
    return SuccessResponse()


# --- contacts ---


@router.get("/contacts", response_model=list[ContactRead], tags=["admin-contacts"])
def admin_list_contacts(db: DB, limit: Limit = 50, offset: Offset = 0) -> list[ContactRead]:
    rows = contacts_service.list_contacts(db, limit=limit, offset=offset)
    return [ContactRead.model_validate(row) for row in rows]


@router.get(
    "/contacts/{contact_id}",
    response_model=ContactRead,
    responses=NOT_FOUND,
    tags=["admin-contacts"],
)
def admin_get_contact(contact_id: int, db: DB) -> ContactRead:
    return ContactRead.model_validate(contacts_service.get_contact(db, contact_id))


@router.delete(
    "/contacts/{contact_id}",
    response_model=SuccessResponse,
    responses=NOT_FOUND,
    tags=["admin-contacts"],
)
def admin_delete_contact(contact_id: int, db: DB) -> SuccessResponse:
    contacts_service.delete_contact(db, contact_id)
    return SuccessResponse()


# --- users ---


@router.get("/users", response_model=UsersListResponse, tags=["admin-users"])
def admin_list_users(
    store: Annotated[CredentialStore, Depends(get_credential_store)],
) -> UsersListResponse:
    """List all accounts without password hashes."""
    return UsersListResponse(
        users=[UserProfile.model_validate(u) for u in store.list_users()]
    )
