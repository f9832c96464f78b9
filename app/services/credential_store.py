"""Persistence of user credentials. Every write commits immediately."""

import logging

from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.errors import Conflict, NotFound
from app.core.security import ROLE_USER
from app.models.user import User

logger = logging.getLogger(__name__)


class CredentialStore:
    """Lookup and mutation of User rows over one SQLAlchemy session."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def find_by_identifier(self, identifier: str) -> User | None:
        """Exact, case-sensitive match on username or email."""
        if not identifier:
            return None
        return (
            self.session.query(User)
            .filter(or_(User.username == identifier, User.email == identifier))
            .order_by(User.id)
            .first()
        )

    def find_by_id(self, user_id: int) -> User | None:
        return self.session.get(User, user_id)

    def list_users(self) -> list[User]:
        return self.session.query(User).order_by(User.id).all()

    def create(
        self,
        username: str,
        email: str,
        password_hash: str,
        role: str = ROLE_USER,
    ) -> User:
        """
        Insert a user. Raises Conflict if the username or email is taken.

        Login resolves one identifier against both columns, so a new username
        must not equal any existing email and a new email must not equal any
        existing username.
        """
        identifiers = (username, email)
        existing = (
            self.session.query(User)
            .filter(or_(User.username.in_(identifiers), User.email.in_(identifiers)))
            .first()
        )
        if existing is not None:
            raise Conflict("Username or email already registered")

        user = User(
            username=username,
            email=email,
            password_hash=password_hash,
            role=role,
        )
        self.session.add(user)
        try:
            self.session.commit()
        except IntegrityError as e:
            # Lost a race against a concurrent insert of the same username/email.
            self.session.rollback()
            raise Conflict("Username or email already registered") from e
        self.session.refresh(user)
        return user

    def update_password_hash(self, user_id: int, new_hash: str) -> None:
        """Replace the stored hash. Raises NotFound for an unknown user id."""
        user = self.find_by_id(user_id)
        if user is None:
            raise NotFound("User not found")
        user.password_hash = new_hash
        self.session.commit()
        logger.debug("Password hash replaced", extra={"user_id": user_id})
