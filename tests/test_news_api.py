"""HTTP-level tests for the public news bulletin and its admin CRUD."""

import unittest

from app.models import NewsItem, User
from tests.support import ApiTestCase


class TestNewsApi(ApiTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.headers = self.admin_headers()

    def _create(self, **fields):
        body = {"title": "Annual Sports Day", "content": "Held on the parade ground."}
        body.update(fields)
        response = self.client.post("/api/admin/news", json=body, headers=self.headers)
        self.assertEqual(response.status_code, 201, response.text)
        return response.json()

    def test_created_item_is_public_iff_active(self) -> None:
        active = self._create(title="Visible")
        hidden = self._create(title="Hidden", is_active=False)

        public = self.client.get("/api/news").json()
        public_ids = [n["id"] for n in public]
        self.assertIn(active["id"], public_ids)
        self.assertNotIn(hidden["id"], public_ids)

        admin_ids = [n["id"] for n in self.client.get("/api/admin/news", headers=self.headers).json()]
        self.assertIn(hidden["id"], admin_ids)

    def test_deactivating_removes_from_public_list(self) -> None:
        item = self._create()
        response = self.client.put(
            f"/api/admin/news/{item['id']}", json={"isActive": False}, headers=self.headers
        )
        self.assertEqual(response.status_code, 200, response.text)
        self.assertFalse(response.json()["is_active"])
        self.assertEqual(self.client.get("/api/news").json(), [])
        self.assertEqual(self.client.get(f"/api/news/{item['id']}").status_code, 404)

    def test_public_list_newest_date_first(self) -> None:
        self._create(title="Older", date="2025-01-10T09:00:00Z")
        self._create(title="Newer", date="2025-06-01T09:00:00Z")
        titles = [n["title"] for n in self.client.get("/api/news").json()]
        self.assertEqual(titles, ["Newer", "Older"])

    def test_create_records_author(self) -> None:
        item = self._create()
        admin = self.db.query(User).filter(User.username == "admin").one()
        self.assertEqual(item["author_id"], admin.id)

    def test_update_changes_only_given_fields(self) -> None:
        item = self._create()
        response = self.client.put(
            f"/api/admin/news/{item['id']}", json={"title": "Sports Day postponed"}, headers=self.headers
        )
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["title"], "Sports Day postponed")
        self.assertEqual(body["content"], item["content"])

    def test_delete(self) -> None:
        item = self._create()
        response = self.client.delete(f"/api/admin/news/{item['id']}", headers=self.headers)
        self.assertEqual(response.status_code, 200)
        self.assertTrue(response.json()["success"])
        self.assertIsNone(self.db.get(NewsItem, item["id"]))

    def test_unknown_id_is_404(self) -> None:
        put = self.client.put("/api/admin/news/999", json={"title": "x"}, headers=self.headers)
        delete = self.client.delete("/api/admin/news/999", headers=self.headers)
        self.assertEqual(put.status_code, 404)
        self.assertEqual(delete.status_code, 404)
        self.assertEqual(self.client.get("/api/news/999").status_code, 404)

    def test_blank_title_is_400(self) -> None:
        response = self.client.post(
            "/api/admin/news", json={"title": "   ", "content": "c"}, headers=self.headers
        )
        self.assertEqual(response.status_code, 400)
        self.assertIn("title", response.json()["error"])

    def test_pagination_limits(self) -> None:
        for i in range(3):
            self._create(title=f"Item {i}")
        self.assertEqual(len(self.client.get("/api/news?limit=2").json()), 2)
        self.assertEqual(len(self.client.get("/api/news?limit=2&offset=2").json()), 1)
        self.assertEqual(self.client.get("/api/news?limit=0").status_code, 400)


if __name__ == "__main__":
    unittest.main()
