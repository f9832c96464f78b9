"""Registration, login, password change and token-based authorization."""

import logging
from dataclasses import dataclass

import jwt
from pydantic import EmailStr, TypeAdapter, ValidationError

from app.core.config import get_settings
from app.core.errors import (
    Conflict,
    Forbidden,
    InvalidCredentials,
    InvalidInput,
    NotFound,
    Unauthenticated,
)
from app.core.security import (
    EMAIL_MAX_LEN,
    PASSWORD_MAX_LEN,
    ROLE_ADMIN,
    ROLE_USER,
    ROLES,
    USERNAME_MAX_LEN,
    USERNAME_MIN_LEN,
    create_access_token,
    decode_access_token,
    dummy_password_hash,
    hash_password,
    verify_password,
)
from app.models.user import User
from app.schemas.auth import TokenIdentity
from app.services.credential_store import CredentialStore

logger = logging.getLogger(__name__)

_email_adapter = TypeAdapter(EmailStr)

INVALID_CREDENTIALS_MESSAGE = "Invalid credentials"


@dataclass(frozen=True)
class LoginResult:
    """Issued token plus the authenticated user (callers must not expose password_hash)."""

    token: str
    user: User


def _validate_username(username: str) -> None:
    if not (USERNAME_MIN_LEN <= len(username) <= USERNAME_MAX_LEN):
        raise InvalidInput("Invalid username length.")


def _validate_email(email: str) -> str:
    """Return the normalized address; raises InvalidInput if it is not a valid email."""
    if len(email) > EMAIL_MAX_LEN:
        raise InvalidInput("Invalid email address.")
    try:
        return _email_adapter.validate_python(email)
    except ValidationError:
        raise InvalidInput("Invalid email address.")


def _validate_new_password(password: str) -> None:
    min_len = get_settings().PASSWORD_MIN_LENGTH
    if len(password) < min_len:
        raise InvalidInput(f"Password must be at least {min_len} characters.")
    if len(password) > PASSWORD_MAX_LEN:
        raise InvalidInput(f"Password must be at most {PASSWORD_MAX_LEN} characters.")


def register(store: CredentialStore, username: str, email: str, password: str) -> User:
    """Create a 'user' account. Raises InvalidInput or Conflict."""
    username = (username or "").strip()
    email = (email or "").strip()
    if not username or not email or not password:
        raise InvalidInput("All fields required")
    _validate_username(username)
    email = _validate_email(email)
    _validate_new_password(password)

    user = store.create(username, email, hash_password(password), role=ROLE_USER)
    logger.info("User registered", extra={"user_id": user.id, "username": user.username})
    return user


def login(store: CredentialStore, identifier: str, password: str) -> LoginResult:
    """
    Verify username-or-email and password; return a signed access token.

    Unknown identifier and wrong password raise the same InvalidCredentials, and
    both paths run one bcrypt check so response time does not reveal which it was.
    """
    user = store.find_by_identifier((identifier or "").strip())
    if user is None:
        verify_password(password, dummy_password_hash())
        logger.info("Login failed", extra={"identifier": identifier})
        raise InvalidCredentials(INVALID_CREDENTIALS_MESSAGE)
    if not verify_password(password, user.password_hash):
        logger.info("Login failed", extra={"identifier": identifier})
        raise InvalidCredentials(INVALID_CREDENTIALS_MESSAGE)

    token = create_access_token(sub=user.id, role=user.role, username=user.username)
    logger.info("Login succeeded", extra={"user_id": user.id, "role": user.role})
    return LoginResult(token=token, user=user)


def change_password(
    store: CredentialStore,
    user_id: int,
    current_password: str,
    new_password: str,
) -> None:
    """
    Replace the password of an already-authenticated user.

    The current password must still match; on mismatch the stored hash is left
    untouched. Tokens issued before the change stay valid until they expire.
    """
    _validate_new_password(new_password)
    user = store.find_by_id(user_id)
    if user is None:
        raise NotFound("User not found")
    if not verify_password(current_password, user.password_hash):
        logger.info("Password change rejected", extra={"user_id": user_id})
        raise InvalidCredentials("Current password is incorrect")
    store.update_password_hash(user_id, hash_password(new_password))
    logger.info("Password changed", extra={"user_id": user_id})


def bootstrap_admin(store: CredentialStore, username: str, email: str, password: str) -> User | None:
    """Create the default admin on first boot. Returns None if it already exists."""
    _validate_username(username)
    email = _validate_email(email)
    _validate_new_password(password)
    if store.find_by_identifier(username) or store.find_by_identifier(email):
        logger.info("Bootstrap admin already present", extra={"username": username})
        return None
    try:
        user = store.create(username, email, hash_password(password), role=ROLE_ADMIN)
    except Conflict:
        # Another worker created it between the check and the insert.
        return None
    logger.info("Bootstrap admin created", extra={"user_id": user.id, "username": username})
    return user


def authorize(token: str | None, required_role: str | None = None) -> TokenIdentity:
    """
    Gate a request on its bearer token.

    No token, or a token that fails signature, expiry or claim checks, raises
    Unauthenticated. A valid token whose role does not meet required_role raises
    Forbidden. required_role=None accepts any authenticated identity.
    """
    if not token:
        raise Unauthenticated("Not authenticated")
    try:
        payload = decode_access_token(token)
    except jwt.PyJWTError:
        raise Unauthenticated("Invalid or expired token")

    try:
        user_id = int(payload.get("sub"))
    except (TypeError, ValueError):
        raise Unauthenticated("Invalid token payload")
    role = payload.get("role")
    if role not in ROLES:
        raise Unauthenticated("Invalid token payload")
    username = payload.get("username")
    if username is not None and not isinstance(username, str):
        raise Unauthenticated("Invalid token payload")

    if required_role is not None and role != required_role:
        raise Forbidden("Admin access required" if required_role == ROLE_ADMIN else "Forbidden")
    return TokenIdentity(id=user_id, username=username, role=role)
