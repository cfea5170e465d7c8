"""Request/response schemas for auth endpoints and the authenticated identity."""

import re
from typing import Literal

from pydantic import BaseModel, EmailStr, Field, field_validator

from taskboard.core.security import PASSWORD_MAX_LEN, PASSWORD_MIN_LEN

Role = Literal["user", "admin"]

# At least one lowercase, one uppercase, one digit and one non-alphanumeric character.
_PASSWORD_CLASSES = (
    re.compile(r"[a-z]"),
    re.compile(r"[A-Z]"),
    re.compile(r"\d"),
    re.compile(r"[\W_]"),
)


def validate_password_strength(value: str) -> str:
    """Reject passwords missing any of the required character classes."""
    if not all(pattern.search(value) for pattern in _PASSWORD_CLASSES):
        raise ValueError(
            "Password must contain at least one uppercase, one lowercase, "
            "one number and one special character"
        )
    return value


class LoginRequest(BaseModel):
    """Credentials for login."""

    email: str = Field(..., min_length=1, max_length=320, description="Account email")
    password: str = Field(..., min_length=1, max_length=PASSWORD_MAX_LEN, description="Password")


class RegisterRequest(BaseModel):
    """Self-service sign-up. role is coerced to 'user' unless it is exactly 'admin'."""

    model_config = {"populate_by_name": True}

    email: EmailStr
    password: str = Field(..., min_length=PASSWORD_MIN_LEN, max_length=PASSWORD_MAX_LEN)
    confirm_password: str = Field(
        ...,
        alias="confirmPassword",
        min_length=1,
        max_length=PASSWORD_MAX_LEN,
    )
    role: str = Field(default="user", max_length=32)
    admin_code: str | None = Field(
        default=None,
        alias="adminCode",
        max_length=255,
        description="Activation code; required when role is 'admin'.",
    )

    @field_validator("password")
    @classmethod
    def validate_password(cls, v: str) -> str:
        return validate_password_strength(v)


class Identity(BaseModel):
    """Authenticated subject (id, email, role) taken from a token or a credential check."""

    model_config = {"from_attributes": True}

    id: int
    email: str
    role: Role


class UserSummary(BaseModel):
    """Public user fields embedded in auth responses and related resources."""

    model_config = {"from_attributes": True, "populate_by_name": True}

    id: int
    email: str
    role: str
    profile_photo: str | None = Field(default=None, alias="profilePhoto")


class AuthResponse(BaseModel):
    """JWT access token plus the user it was issued for."""

    access_token: str = Field(..., description="JWT access token")
    token_type: str = Field(default="bearer", description="Token type")
    user: UserSummary
