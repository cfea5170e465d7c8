"""Password hashing and JWT creation/verification for authentication."""

from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING, Any

import bcrypt
import jwt

if TYPE_CHECKING:
    from taskboard.core.config import Settings

# bcrypt only looks at the first 72 bytes of its input.
BCRYPT_MAX_BYTES = 72

# Min/max lengths for password validation.
PASSWORD_MIN_LEN = 8
PASSWORD_MAX_LEN = 128


def hash_password(plain_password: str, rounds: int) -> str:
    """Hash a plain-text password for storage. Do not store plain passwords."""
    pw_bytes = plain_password.encode("utf-8")[:BCRYPT_MAX_BYTES]
    return bcrypt.hashpw(pw_bytes, bcrypt.gensalt(rounds=rounds)).decode("utf-8")


def verify_password(plain_password: str, hashed: str) -> bool:
    """Verify a plain password against a stored hash (constant-time inside bcrypt)."""
    pw_bytes = plain_password.encode("utf-8")[:BCRYPT_MAX_BYTES]
    try:
        return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
    except (ValueError, TypeError):
        return False


def create_access_token(
    sub: str | int,
    email: str,
    role: str,
    settings: "Settings",
) -> str:
    """Create a JWT access token with sub (user id), email, role, iat and optional exp."""
    now = datetime.now(UTC)
    payload: dict[str, Any] = {
        "sub": str(sub),
        "email": email,
        "role": role,
        "iat": now,
    }
    if settings.JWT_EXPIRE_MINUTES:
        payload["exp"] = now + timedelta(minutes=settings.JWT_EXPIRE_MINUTES)
    return jwt.encode(
        payload,
        settings.JWT_SECRET.get_secret_value(),
        algorithm=settings.JWT_ALGORITHM,
    )


def decode_access_token(token: str, settings: "Settings") -> dict[str, Any]:
    """
    Decode and validate JWT; return payload (sub, email, role, iat, exp).
    Raises jwt.PyJWTError on invalid or expired token, or when a required claim is missing.
    """
    return jwt.decode(
        token,
        settings.JWT_SECRET.get_secret_value(),
        algorithms=[settings.JWT_ALGORITHM],
        options={"require": ["sub", "email", "role"]},
    )
