"""Startup checks in app.main: fatal on unreachable database, optional admin bootstrap."""

import unittest
from unittest.mock import MagicMock, patch

from pydantic import SecretStr

from app import main
from app.models import User
from tests.support import DatabaseTestCase


class TestVerifyDatabase(unittest.TestCase):
    def test_unreachable_database_is_fatal(self) -> None:
        session = MagicMock()
        with patch.object(main, "SessionLocal", return_value=session), patch.object(
            main, "check_db_connected", return_value=False
        ):
            with self.assertRaises(RuntimeError):
                main.verify_database()
        session.close.assert_called_once()

    def test_reachable_database_without_bootstrap(self) -> None:
        session = MagicMock()
        with patch.object(main, "SessionLocal", return_value=session), patch.object(
            main, "check_db_connected", return_value=True
        ), patch.object(main, "bootstrap_admin") as bootstrap:
            main.verify_database()
        bootstrap.assert_not_called()
        session.close.assert_called_once()


class TestBootstrapOnStartup(DatabaseTestCase):
    def test_creates_admin_once(self) -> None:
        fake_settings = MagicMock()
        fake_settings.bootstrap_admin_enabled = True
        fake_settings.BOOTSTRAP_ADMIN_USERNAME = "admin"
        fake_settings.BOOTSTRAP_ADMIN_EMAIL = "admin@sainik.edu"
        fake_settings.BOOTSTRAP_ADMIN_PASSWORD = SecretStr("admin-pass")
        with patch.object(main, "SessionLocal", self.session_factory), patch.object(
            main, "settings", fake_settings
        ):
            main.verify_database()
            main.verify_database()

        admins = self.db.query(User).filter(User.role == "admin").all()
        self.assertEqual([a.username for a in admins], ["admin"])


class TestHealth(unittest.TestCase):
    def test_health_reports_database(self) -> None:
        from fastapi.testclient import TestClient

        response = TestClient(main.app).get("/api/health")
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["status"], "ok")
        self.assertEqual(body["database"], "connected")


if __name__ == "__main__":
    unittest.main()
