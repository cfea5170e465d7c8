"""HTTP tests for /projects: ownership rules, patch schema, cascades."""

import unittest

from helpers import ApiTestCase


class TestProjects(ApiTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.alice, self.alice_h = self.signup("alice@x.com")
        self.bob, self.bob_h = self.signup("bob@x.com")
        self.admin, self.admin_h = self.signup("admin@x.com", role="admin")

    def _create(self, headers: dict, **body: object):
        payload = {"title": "Launch", **body}
        return self.client.post(f"{self.api}/projects", json=payload, headers=headers)

    def test_create_defaults_owner_to_caller(self) -> None:
        resp = self._create(self.alice_h, description="Q3 launch")
        self.assertEqual(resp.status_code, 201)
        body = resp.json()
        self.assertEqual(body["ownerId"], self.alice["id"])
        self.assertEqual(body["owner"]["email"], "alice@x.com")
        self.assertEqual(body["tasks"], [])
        self.assertIsNotNone(body["createdAt"])

    def test_user_cannot_create_for_someone_else(self) -> None:
        resp = self._create(self.alice_h, ownerId=self.bob["id"])
        self.assertEqual(resp.status_code, 403)

    def test_admin_can_create_for_someone_else(self) -> None:
        resp = self._create(self.admin_h, ownerId=self.bob["id"])
        self.assertEqual(resp.status_code, 201)
        self.assertEqual(resp.json()["ownerId"], self.bob["id"])

    def test_admin_create_for_unknown_owner(self) -> None:
        self.assertEqual(self._create(self.admin_h, ownerId=9999).status_code, 404)

    def test_list_and_filter_by_owner(self) -> None:
        self._create(self.alice_h, title="A1")
        self._create(self.alice_h, title="A2")
        self._create(self.bob_h, title="B1")
        everything = self.client.get(f"{self.api}/projects", headers=self.bob_h).json()
        self.assertEqual([p["title"] for p in everything], ["A1", "A2", "B1"])
        mine = self.client.get(
            f"{self.api}/projects", params={"owner_id": self.alice["id"]}, headers=self.bob_h
        ).json()
        self.assertEqual([p["title"] for p in mine], ["A1", "A2"])

    def test_get_missing_project(self) -> None:
        resp = self.client.get(f"{self.api}/projects/404", headers=self.alice_h)
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.json()["detail"], "Project with ID 404 not found")

    def test_owner_updates_other_user_forbidden(self) -> None:
        pid = self._create(self.alice_h).json()["id"]
        ok = self.client.patch(
            f"{self.api}/projects/{pid}", json={"title": "Renamed", "description": None}, headers=self.alice_h
        )
        self.assertEqual(ok.status_code, 200)
        self.assertEqual(ok.json()["title"], "Renamed")
        self.assertIsNone(ok.json()["description"])
        denied = self.client.patch(f"{self.api}/projects/{pid}", json={"title": "Mine"}, headers=self.bob_h)
        self.assertEqual(denied.status_code, 403)
        by_admin = self.client.patch(f"{self.api}/projects/{pid}", json={"title": "Admin"}, headers=self.admin_h)
        self.assertEqual(by_admin.status_code, 200)

    def test_patch_rejects_unknown_and_null_fields(self) -> None:
        pid = self._create(self.alice_h).json()["id"]
        unknown = self.client.patch(f"{self.api}/projects/{pid}", json={"ownerId": 2}, headers=self.alice_h)
        self.assertEqual(unknown.status_code, 422)
        null_title = self.client.patch(f"{self.api}/projects/{pid}", json={"title": None}, headers=self.alice_h)
        self.assertEqual(null_title.status_code, 422)

    def test_delete_cascades_to_tasks(self) -> None:
        pid = self._create(self.alice_h).json()["id"]
        task = self.client.post(
            f"{self.api}/tasks", json={"title": "T", "projectId": pid}, headers=self.alice_h
        ).json()
        self.assertEqual(self.client.delete(f"{self.api}/projects/{pid}", headers=self.bob_h).status_code, 403)
        self.assertEqual(self.client.delete(f"{self.api}/projects/{pid}", headers=self.alice_h).status_code, 204)
        self.assertEqual(self.client.get(f"{self.api}/projects/{pid}", headers=self.alice_h).status_code, 404)
        self.assertEqual(self.client.get(f"{self.api}/tasks/{task['id']}", headers=self.alice_h).status_code, 404)


if __name__ == "__main__":
    unittest.main()
