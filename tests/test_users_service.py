"""Unit tests for taskboard.services.users with a mocked session."""

import unittest
from unittest.mock import MagicMock

from sqlalchemy.exc import IntegrityError

from taskboard.models import User
from taskboard.schemas.auth import Identity
from taskboard.schemas.user import UserUpdate
from taskboard.services import users as users_service
from taskboard.services.errors import ConflictError


class TestUpdateUserCommit(unittest.TestCase):
    def setUp(self) -> None:
        self.user = User(id=1, email="a@x.com", password_hash="x", role="user")
        self.db = MagicMock()
        self.db.get.return_value = self.user
        # Pre-check sees no clash; the unique index catches the concurrent write.
        self.db.query.return_value.filter.return_value.first.return_value = None
        self.actor = Identity(id=1, email="a@x.com", role="user")

    def test_unique_violation_on_commit_becomes_conflict(self) -> None:
        self.db.commit.side_effect = IntegrityError("UPDATE users", {}, Exception("UNIQUE"))
        with self.assertRaises(ConflictError) as ctx:
            users_service.update_user(self.db, 1, UserUpdate(email="b@x.com"), self.actor)
        self.assertEqual(ctx.exception.message, "Email is already in use")
        self.db.rollback.assert_called_once()
        self.db.refresh.assert_not_called()

    def test_successful_commit_refreshes(self) -> None:
        result = users_service.update_user(self.db, 1, UserUpdate(email="B@x.com"), self.actor)
        self.assertIs(result, self.user)
        self.assertEqual(self.user.email, "b@x.com")
        self.db.commit.assert_called_once()
        self.db.refresh.assert_called_once_with(self.user)


if __name__ == "__main__":
    unittest.main()
