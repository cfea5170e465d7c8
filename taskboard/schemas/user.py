"""Schemas for user administration and self-service profile changes."""

from datetime import datetime

from pydantic import BaseModel, EmailStr, Field, field_validator

from taskboard.core.security import PASSWORD_MAX_LEN, PASSWORD_MIN_LEN
from taskboard.schemas.auth import Role, validate_password_strength


class ProjectRef(BaseModel):
    """Minimal project reference listed under its owner."""

    model_config = {"from_attributes": True}

    id: int
    title: str


class UserRead(BaseModel):
    """User as returned by the API (never includes the password hash)."""

    model_config = {"from_attributes": True, "populate_by_name": True}

    id: int
    email: str
    role: str
    profile_photo: str | None = Field(default=None, alias="profilePhoto")
    created_at: datetime | None = Field(default=None, alias="createdAt")
    projects: list[ProjectRef] = Field(default_factory=list)


class UserUpdate(BaseModel):
    """Patch for a user. Unknown fields are rejected; role may only be changed by an admin."""

    model_config = {"extra": "forbid", "populate_by_name": True}

    email: EmailStr | None = None
    profile_photo: str | None = Field(default=None, alias="profilePhoto", max_length=2048)
    role: Role | None = None

    @field_validator("email", "role")
    @classmethod
    def reject_null(cls, v: object) -> object:
        if v is None:
            raise ValueError("field cannot be null")
        return v


class PasswordChangeRequest(BaseModel):
    """Password change. current_password is required when users change their own password."""

    model_config = {"extra": "forbid", "populate_by_name": True}

    current_password: str | None = Field(
        default=None,
        alias="currentPassword",
        max_length=PASSWORD_MAX_LEN,
    )
    new_password: str = Field(
        ...,
        alias="newPassword",
        min_length=PASSWORD_MIN_LEN,
        max_length=PASSWORD_MAX_LEN,
    )

    @field_validator("new_password")
    @classmethod
    def validate_new_password(cls, v: str) -> str:
        return validate_password_strength(v)
