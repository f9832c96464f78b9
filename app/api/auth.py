"""Auth routes (register, login, change-password, me) and the bearer-token dependencies."""

from collections.abc import Callable, Coroutine
from typing import Annotated, Any

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.routing import APIRoute
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from fastapi.security.utils import get_authorization_scheme_param
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.errors import NotFound
from app.core.security import ROLE_ADMIN
from app.schemas.auth import (
    ChangePasswordRequest,
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    TokenIdentity,
    UserProfile,
    UserSummary,
)
from app.schemas.common import ErrorResponse, SuccessResponse
from app.services import authenticator
from app.services.credential_store import CredentialStore

router = APIRouter()
security = HTTPBearer(auto_error=False)

BearerCredentials = Annotated[HTTPAuthorizationCredentials | None, Depends(security)]


def get_credential_store(db: Annotated[Session, Depends(get_db)]) -> CredentialStore:
    """Dependency: credential store bound to the request's DB session."""
    return CredentialStore(db)


def _token(credentials: HTTPAuthorizationCredentials | None) -> str | None:
    return credentials.credentials if credentials is not None else None


def get_current_identity(credentials: BearerCredentials) -> TokenIdentity:
    """Dependency: require a valid Bearer JWT. Raises Unauthenticated (401) if missing or invalid."""
    return authenticator.authorize(_token(credentials))


def require_admin(credentials: BearerCredentials) -> TokenIdentity:
    """Dependency: require a valid Bearer JWT with role 'admin'. Raises Forbidden (403) for non-admin."""
    return authenticator.authorize(_token(credentials), required_role=ROLE_ADMIN)


def bearer_token(request: Request) -> str | None:
    """Raw token from an `Authorization: Bearer ...` header, or None."""
    scheme, token = get_authorization_scheme_param(request.headers.get("Authorization"))
    if scheme.lower() != "bearer" or not token:
        return None
    return token


class AdminRoute(APIRoute):
    """
    Route that checks the admin token before FastAPI reads the request body,
    so an anonymous caller gets 401 even when the body is malformed.
    """

    def get_route_handler(self) -> Callable[[Request], Coroutine[Any, Any, Response]]:
        handler = super().get_route_handler()

        async def admin_handler(request: Request) -> Response:
            authenticator.authorize(bearer_token(request), required_role=ROLE_ADMIN)
            return await handler(request)

        return admin_handler


Store = Annotated[CredentialStore, Depends(get_credential_store)]
CurrentIdentity = Annotated[TokenIdentity, Depends(get_current_identity)]


@router.post(
    "/register",
    response_model=SuccessResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
)
def register(body: RegisterRequest, store: Store) -> SuccessResponse:
    """Create a regular ('user' role) account."""
    user = authenticator.register(store, body.username, body.email, body.password)
    return SuccessResponse(id=user.id)


@router.post(
    "/login",
    response_model=LoginResponse,
    responses={401: {"model": ErrorResponse}},
)
def login(body: LoginRequest, store: Store) -> LoginResponse:
    """
    Authenticate with username (or email) and password; returns a JWT access token.
    Include the token in the Authorization header as: Bearer <token>
    """
    result = authenticator.login(store, body.identifier, body.password)
    return LoginResponse(token=result.token, user=UserSummary.model_validate(result.user))


@router.post(
    "/change-password",
    response_model=SuccessResponse,
    responses={400: {"model": ErrorResponse}, 401: {"model": ErrorResponse}},
)
def change_password(
    body: ChangePasswordRequest,
    identity: CurrentIdentity,
    store: Store,
) -> SuccessResponse:
    authenticator.change_password(store, identity.id, body.current_password, body.new_password)
    return SuccessResponse()


@router.get(
    "/me",
    response_model=UserProfile,
    responses={401: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
def me(identity: CurrentIdentity, store: Store) -> UserProfile:
    """Return the caller's own account, without the password hash."""
    user = store.find_by_id(identity.id)
    if user is None:
        raise NotFound("User not found")
    return UserProfile.model_validate(user)
