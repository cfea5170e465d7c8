"""Schemas for tags."""

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

TAG_NAME_MAX_LENGTH = 100


def _clean_name(value: str | None) -> str:
    if value is None or not value.strip():
        raise ValueError("name must be non-empty")
    return value.strip()


class TagCreate(BaseModel):
    model_config = {"extra": "forbid"}

    name: str = Field(..., min_length=1, max_length=TAG_NAME_MAX_LENGTH)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        return _clean_name(v)


class TagUpdate(BaseModel):
    model_config = {"extra": "forbid"}

    name: str | None = Field(default=None, min_length=1, max_length=TAG_NAME_MAX_LENGTH)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str | None) -> str:
        return _clean_name(v)


class TagRead(BaseModel):
    model_config = {"from_attributes": True, "populate_by_name": True}

    id: int
    name: str
    created_at: datetime | None = Field(default=None, alias="createdAt")
