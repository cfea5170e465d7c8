"""HTTP tests for /users: admin management, self-service profile and password changes."""

import unittest

from helpers import PASSWORD, ApiTestCase

NEW_PASSWORD = "Xyz789$%"


class TestUsers(ApiTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.alice, self.alice_h = self.signup("alice@x.com")
        self.bob, self.bob_h = self.signup("bob@x.com")
        self.admin, self.admin_h = self.signup("admin@x.com", role="admin")

    def _url(self, user: dict, suffix: str = "") -> str:
        return f"{self.api}/users/{user['id']}{suffix}"

    def test_get_user_lists_projects(self) -> None:
        self.client.post(f"{self.api}/projects", json={"title": "Garden"}, headers=self.alice_h)
        resp = self.client.get(self._url(self.alice), headers=self.bob_h)
        self.assertEqual(resp.status_code, 200)
        body = resp.json()
        self.assertEqual(body["email"], "alice@x.com")
        self.assertEqual([p["title"] for p in body["projects"]], ["Garden"])
        self.assertNotIn("password_hash", body)

    def test_get_missing_user(self) -> None:
        self.assertEqual(self.client.get(f"{self.api}/users/999", headers=self.alice_h).status_code, 404)

    def test_self_service_profile_update(self) -> None:
        resp = self.client.patch(
            self._url(self.alice),
            json={"email": "alice.new@x.com", "profilePhoto": "https://cdn.x.com/a.png"},
            headers=self.alice_h,
        )
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["email"], "alice.new@x.com")
        self.assertEqual(resp.json()["profilePhoto"], "https://cdn.x.com/a.png")
        self.assertEqual(self.login("alice.new@x.com").status_code, 200)

    def test_cannot_update_someone_else(self) -> None:
        resp = self.client.patch(self._url(self.bob), json={"profilePhoto": "x"}, headers=self.alice_h)
        self.assertEqual(resp.status_code, 403)

    def test_email_clash_conflicts(self) -> None:
        resp = self.client.patch(self._url(self.alice), json={"email": "bob@x.com"}, headers=self.alice_h)
        self.assertEqual(resp.status_code, 409)

    def test_role_change_is_admin_only(self) -> None:
        self_promote = self.client.patch(self._url(self.alice), json={"role": "admin"}, headers=self.alice_h)
        self.assertEqual(self_promote.status_code, 403)
        same_role = self.client.patch(self._url(self.alice), json={"role": "user"}, headers=self.alice_h)
        self.assertEqual(same_role.status_code, 200)
        by_admin = self.client.patch(self._url(self.alice), json={"role": "admin"}, headers=self.admin_h)
        self.assertEqual(by_admin.status_code, 200)
        self.assertEqual(by_admin.json()["role"], "admin")

    def test_patch_rejects_unknown_fields_and_bad_role(self) -> None:
        for body in ({"password": NEW_PASSWORD}, {"role": "root"}, {"email": None}):
            with self.subTest(body=body):
                resp = self.client.patch(self._url(self.alice), json=body, headers=self.admin_h)
                self.assertEqual(resp.status_code, 422)

    def test_change_own_password(self) -> None:
        wrong = self.client.patch(
            self._url(self.alice, "/password"),
            json={"currentPassword": "Nope123!@", "newPassword": NEW_PASSWORD},
            headers=self.alice_h,
        )
        self.assertEqual(wrong.status_code, 400)
        missing = self.client.patch(
            self._url(self.alice, "/password"), json={"newPassword": NEW_PASSWORD}, headers=self.alice_h
        )
        self.assertEqual(missing.status_code, 400)
        ok = self.client.patch(
            self._url(self.alice, "/password"),
            json={"currentPassword": PASSWORD, "newPassword": NEW_PASSWORD},
            headers=self.alice_h,
        )
        self.assertEqual(ok.status_code, 204)
        self.assertEqual(self.login("alice@x.com", PASSWORD).status_code, 401)
        self.assertEqual(self.login("alice@x.com", NEW_PASSWORD).status_code, 200)

    def test_weak_new_password_rejected(self) -> None:
        resp = self.client.patch(
            self._url(self.alice, "/password"),
            json={"currentPassword": PASSWORD, "newPassword": "password"},
            headers=self.alice_h,
        )
        self.assertEqual(resp.status_code, 422)

    def test_password_reset_rules_for_others(self) -> None:
        denied = self.client.patch(
            self._url(self.bob, "/password"), json={"newPassword": NEW_PASSWORD}, headers=self.alice_h
        )
        self.assertEqual(denied.status_code, 403)
        reset = self.client.patch(
            self._url(self.bob, "/password"), json={"newPassword": NEW_PASSWORD}, headers=self.admin_h
        )
        self.assertEqual(reset.status_code, 204)
        self.assertEqual(self.login("bob@x.com", NEW_PASSWORD).status_code, 200)

    def test_delete_user_cascades_owned_and_unassigns(self) -> None:
        alice_project = self.client.post(
            f"{self.api}/projects", json={"title": "Alice's"}, headers=self.alice_h
        ).json()
        bob_project = self.client.post(f"{self.api}/projects", json={"title": "Bob's"}, headers=self.bob_h).json()
        assigned = self.client.post(
            f"{self.api}/tasks",
            json={"title": "Review", "projectId": bob_project["id"], "assignedUserId": self.alice["id"]},
            headers=self.bob_h,
        ).json()

        self.assertEqual(self.client.delete(self._url(self.alice), headers=self.bob_h).status_code, 403)
        self.assertEqual(self.client.delete(self._url(self.alice), headers=self.admin_h).status_code, 204)

        self.assertEqual(self.client.get(self._url(self.alice), headers=self.admin_h).status_code, 404)
        self.assertEqual(
            self.client.get(f"{self.api}/projects/{alice_project['id']}", headers=self.bob_h).status_code, 404
        )
        task = self.client.get(f"{self.api}/tasks/{assigned['id']}", headers=self.bob_h).json()
        self.assertIsNone(task["assignedUserId"])
        self.assertEqual(self.login("alice@x.com").status_code, 401)

    def test_delete_missing_user(self) -> None:
        self.assertEqual(self.client.delete(f"{self.api}/users/999", headers=self.admin_h).status_code, 404)


if __name__ == "__main__":
    unittest.main()
