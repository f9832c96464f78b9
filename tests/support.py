"""Shared fixtures: an in-memory SQLite database wired into the FastAPI app."""

import unittest

from fastapi.testclient import TestClient
from sqlalchemy.orm import Session, sessionmaker

from app.core.database import build_engine, get_db
from app.core.security import ROLE_ADMIN, hash_password
from app.main import app
from app.models import Base, User


class DatabaseTestCase(unittest.TestCase):
    """Fresh schema per test on a private in-memory SQLite engine."""

    def setUp(self) -> None:
        self.engine = build_engine("sqlite://")
        Base.metadata.create_all(self.engine)
        self.session_factory = sessionmaker(
            bind=self.engine, autocommit=False, autoflush=False
        )
        self.db: Session = self.session_factory()

    def tearDown(self) -> None:
        self.db.close()
        Base.metadata.drop_all(self.engine)
        self.engine.dispose()

    def create_user_row(
        self,
        username: str,
        email: str,
        password: str,
        role: str = "user",
    ) -> User:
        """Insert a user directly, bypassing the API (used for admins)."""
        user = User(
            username=username,
            email=email,
            password_hash=hash_password(password),
            role=role,
        )
        self.db.add(user)
        self.db.commit()
        self.db.refresh(user)
        return user


class ApiTestCase(DatabaseTestCase):
    """DatabaseTestCase plus a TestClient whose get_db yields sessions on the test engine."""

    def setUp(self) -> None:
        super().setUp()

        def override_get_db():
            db = self.session_factory()
            try:
                yield db
            finally:
                db.close()

        app.dependency_overrides[get_db] = override_get_db
        self.client = TestClient(app)

    def tearDown(self) -> None:
        app.dependency_overrides.pop(get_db, None)
        super().tearDown()

    def register(self, username: str, email: str, password: str):
        return self.client.post(
            "/api/auth/register",
            json={"username": username, "email": email, "password": password},
        )

    def login(self, password: str, username: str | None = None, email: str | None = None):
        body: dict[str, str] = {"password": password}
        if username is not None:
            body["username"] = username
        if email is not None:
            body["email"] = email
        return self.client.post("/api/auth/login", json=body)

    def token_for(self, username: str, password: str) -> str:
        response = self.login(password, username=username)
        self.assertEqual(response.status_code, 200, response.text)
        return response.json()["token"]

    def admin_headers(self) -> dict[str, str]:
        self.create_user_row("admin", "admin@sainik.edu", "admin-pass", role=ROLE_ADMIN)
        return bearer(self.token_for("admin", "admin-pass"))


def bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}
