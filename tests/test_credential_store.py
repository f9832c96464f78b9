"""Tests for app.services.credential_store against an in-memory SQLite database."""

import unittest

from app.core.errors import Conflict, NotFound
from app.core.security import verify_password, hash_password
from app.services.credential_store import CredentialStore
from tests.support import DatabaseTestCase


class TestCredentialStore(DatabaseTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.store = CredentialStore(self.db)

    def test_create_defaults_to_user_role(self) -> None:
        user = self.store.create("alice", "alice@x.com", hash_password("secret1"))
        self.assertIsNotNone(user.id)
        self.assertEqual(user.role, "user")
        self.assertIsNotNone(user.created_at)

    def test_duplicate_username_conflicts(self) -> None:
        self.store.create("alice", "alice@x.com", "h")
        with self.assertRaises(Conflict):
            self.store.create("alice", "other@x.com", "h")

    def test_duplicate_email_conflicts(self) -> None:
        self.store.create("alice", "alice@x.com", "h")
        with self.assertRaises(Conflict):
            self.store.create("bob", "alice@x.com", "h")

    def test_username_equal_to_existing_email_conflicts(self) -> None:
        self.store.create("alice", "alice@x.com", "h")
        with self.assertRaises(Conflict):
            self.store.create("alice@x.com", "mallory@x.com", "h")
        self.assertEqual(self.store.find_by_identifier("alice@x.com").username, "alice")

    def test_email_equal_to_existing_username_conflicts(self) -> None:
        self.store.create("bob@x.com", "bob@y.com", "h")
        with self.assertRaises(Conflict):
            self.store.create("carol", "bob@x.com", "h")
        self.assertEqual(len(self.store.list_users()), 1)

    def test_find_by_username_or_email(self) -> None:
        created = self.store.create("alice", "alice@x.com", "h")
        self.assertEqual(self.store.find_by_identifier("alice").id, created.id)
        self.assertEqual(self.store.find_by_identifier("alice@x.com").id, created.id)
        self.assertIsNone(self.store.find_by_identifier("bob"))
        self.assertIsNone(self.store.find_by_identifier(""))

    def test_lookup_is_case_sensitive(self) -> None:
        self.store.create("alice", "alice@x.com", "h")
        self.assertIsNone(self.store.find_by_identifier("Alice"))
        self.assertIsNone(self.store.find_by_identifier("ALICE@X.COM"))

    def test_update_password_hash(self) -> None:
        user = self.store.create("alice", "alice@x.com", hash_password("secret1"))
        self.store.update_password_hash(user.id, hash_password("brand-new"))
        reloaded = self.store.find_by_id(user.id)
        self.assertTrue(verify_password("brand-new", reloaded.password_hash))
        self.assertFalse(verify_password("secret1", reloaded.password_hash))

    def test_update_password_hash_unknown_user(self) -> None:
        with self.assertRaises(NotFound):
            self.store.update_password_hash(12345, "h")

    def test_list_users_ordered_by_id(self) -> None:
        self.store.create("bob", "bob@x.com", "h")
        self.store.create("alice", "alice@x.com", "h")
        self.assertEqual([u.username for u in self.store.list_users()], ["bob", "alice"])


if __name__ == "__main__":
    unittest.main()
