"""Tests for the create_user CLI."""

import unittest
from unittest.mock import patch

from app.models import User
from app.scripts import create_user
from tests.support import DatabaseTestCase


class TestCreateUserCli(DatabaseTestCase):
    def _run(self, *argv: str) -> int:
        with patch.object(create_user, "SessionLocal", self.session_factory):
            return create_user.main(list(argv))

    def test_creates_admin(self) -> None:
        code = self._run("principal", "principal@sainik.edu", "secret-pass", "admin")
        self.assertEqual(code, 0)
        user = self.db.query(User).filter(User.username == "principal").one()
        self.assertEqual(user.role, "admin")

    def test_creates_regular_user_by_default(self) -> None:
        self.assertEqual(self._run("cadet", "cadet@sainik.edu", "secret-pass"), 0)
        self.assertEqual(self.db.query(User).one().role, "user")

    def test_duplicate_fails(self) -> None:
        self._run("cadet", "cadet@sainik.edu", "secret-pass")
        self.assertEqual(self._run("cadet", "other@sainik.edu", "secret-pass"), 1)
        self.assertEqual(self._run("principal", "cadet@sainik.edu", "secret-pass", "admin"), 1)

    def test_malformed_email_fails(self) -> None:
        self.assertEqual(self._run("cadet", "cadet@sainik..edu", "secret-pass"), 1)
        self.assertEqual(self._run("principal", "principal@", "secret-pass", "admin"), 1)
        self.assertEqual(self.db.query(User).count(), 0)

    def test_short_password_fails(self) -> None:
        self.assertEqual(self._run("cadet", "cadet@sainik.edu", "123"), 1)
        self.assertEqual(self.db.query(User).count(), 0)


if __name__ == "__main__":
    unittest.main()
