"""Shared test scaffolding: in-memory SQLite database, settings overrides and an API client."""

import unittest

from fastapi.testclient import TestClient
from pydantic import SecretStr
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from taskboard.core.config import Settings, get_settings
from taskboard.core.database import build_engine, get_db
from taskboard.main import app
from taskboard.models import Base

ADMIN_CODE = "letmein-as-admin"
PASSWORD = "Abc123!@"
TEST_JWT_SECRET = "unit-test-secret-0123456789abcdef0123456789"


def make_settings(**overrides: object) -> Settings:
    """Build Settings for tests without reading .env; fast bcrypt and a known admin code."""
    values: dict[str, object] = {
        "DATABASE_URL": "sqlite://",
        "JWT_SECRET": SecretStr(TEST_JWT_SECRET),
        "BCRYPT_ROUNDS": 4,
        "ADMIN_ACTIVATION_CODE": SecretStr(ADMIN_CODE),
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


class DatabaseTestCase(unittest.TestCase):
    """Fresh in-memory database per test, exposed as self.db."""

    def setUp(self) -> None:
        self.engine = build_engine("sqlite://", poolclass=StaticPool)
        Base.metadata.create_all(self.engine)
        self.session_factory = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)
        self.db = self.session_factory()
        self.settings = make_settings()

    def tearDown(self) -> None:
        self.db.close()
        Base.metadata.drop_all(self.engine)
        self.engine.dispose()


class ApiTestCase(DatabaseTestCase):
    """DatabaseTestCase plus a TestClient wired to the same database and settings."""

    api = "/api/v1"

    def setUp(self) -> None:
        super().setUp()

        def override_get_db():
            db = self.session_factory()
            try:
                yield db
            finally:
                db.close()

        app.dependency_overrides[get_db] = override_get_db
        app.dependency_overrides[get_settings] = lambda: self.settings
        self.client = TestClient(app)

    def tearDown(self) -> None:
        app.dependency_overrides.clear()
        self.client.close()
        super().tearDown()

    def register(
        self,
        email: str,
        password: str = PASSWORD,
        role: str = "user",
        admin_code: str | None = None,
        confirm_password: str | None = None,
    ):
        body = {
            "email": email,
            "password": password,
            "confirmPassword": password if confirm_password is None else confirm_password,
            "role": role,
        }
        if admin_code is not None:
            body["adminCode"] = admin_code
        return self.client.post(f"{self.api}/auth/register", json=body)

    def login(self, email: str, password: str = PASSWORD):
        return self.client.post(f"{self.api}/auth/login", json={"email": email, "password": password})

    def signup(self, email: str, role: str = "user") -> tuple[dict, dict]:
        """Register and return (user, Authorization headers)."""
        resp = self.register(email, role=role, admin_code=ADMIN_CODE if role == "admin" else None)
        self.assertEqual(resp.status_code, 201, resp.text)
        data = resp.json()
        return data["user"], {"Authorization": f"Bearer {data['access_token']}"}
