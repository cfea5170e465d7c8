"""Validation rules for taskboard.core.config.Settings."""

import unittest

from pydantic import SecretStr, ValidationError

from taskboard.core.config import Settings


def _settings(**values: object) -> Settings:
    return Settings(_env_file=None, **values)


class TestDatabaseUrl(unittest.TestCase):
    def test_sqlite_and_postgres_accepted(self) -> None:
        self.assertEqual(_settings(DATABASE_URL="sqlite://").DATABASE_URL, "sqlite://")
        url = "postgresql+psycopg2://u:p@db:5432/taskboard"
        self.assertEqual(_settings(DATABASE_URL=f"  {url} ").DATABASE_URL, url)

    def test_other_schemes_rejected(self) -> None:
        with self.assertRaises(ValidationError):
            _settings(DATABASE_URL="mysql://u:p@db/taskboard")
        with self.assertRaises(ValidationError):
            _settings(DATABASE_URL="   ")


class TestAuthSettings(unittest.TestCase):
    def test_blank_activation_code_disables_admin_signup(self) -> None:
        self.assertIsNone(_settings(ADMIN_ACTIVATION_CODE=SecretStr("  ")).ADMIN_ACTIVATION_CODE)

    def test_activation_code_kept_secret(self) -> None:
        s = _settings(ADMIN_ACTIVATION_CODE=SecretStr("code-123"))
        self.assertEqual(s.ADMIN_ACTIVATION_CODE.get_secret_value(), "code-123")
        self.assertNotIn("code-123", repr(s))

    def test_expire_minutes_bounds(self) -> None:
        self.assertEqual(_settings(JWT_EXPIRE_MINUTES=0).JWT_EXPIRE_MINUTES, 0)
        with self.assertRaises(ValidationError):
            _settings(JWT_EXPIRE_MINUTES=-1)
        with self.assertRaises(ValidationError):
            _settings(JWT_EXPIRE_MINUTES=10081)

    def test_bcrypt_rounds_bounds(self) -> None:
        with self.assertRaises(ValidationError):
            _settings(BCRYPT_ROUNDS=3)
        with self.assertRaises(ValidationError):
            _settings(BCRYPT_ROUNDS=17)

    def test_empty_jwt_secret_rejected(self) -> None:
        with self.assertRaises(ValidationError):
            _settings(JWT_SECRET=SecretStr(" "))

    def test_log_level_normalized(self) -> None:
        self.assertEqual(_settings(LOG_LEVEL="debug").LOG_LEVEL, "DEBUG")
        with self.assertRaises(ValidationError):
            _settings(LOG_LEVEL="chatty")


if __name__ == "__main__":
    unittest.main()
