"""Schemas for projects."""

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from taskboard.schemas.auth import UserSummary
from taskboard.schemas.task import TaskSummary

TITLE_MAX_LENGTH = 255
DESCRIPTION_MAX_LENGTH = 10_000


class ProjectCreate(BaseModel):
    """New project. owner_id defaults to the caller; only admins may set another owner."""

    model_config = {"extra": "forbid", "populate_by_name": True}

    title: str = Field(..., min_length=1, max_length=TITLE_MAX_LENGTH)
    description: str | None = Field(default=None, max_length=DESCRIPTION_MAX_LENGTH)
    owner_id: int | None = Field(default=None, alias="ownerId")


class ProjectUpdate(BaseModel):
    """Patch for a project. Ownership is not transferable through a patch."""

    model_config = {"extra": "forbid"}

    title: str | None = Field(default=None, min_length=1, max_length=TITLE_MAX_LENGTH)
    description: str | None = Field(default=None, max_length=DESCRIPTION_MAX_LENGTH)

    @field_validator("title")
    @classmethod
    def reject_null_title(cls, v: str | None) -> str:
        if v is None:
            raise ValueError("title cannot be null")
        return v


class ProjectRead(BaseModel):
    model_config = {"from_attributes": True, "populate_by_name": True}

    id: int
    title: str
    description: str | None = None
    owner_id: int = Field(..., alias="ownerId")
    owner: UserSummary | None = None
    tasks: list[TaskSummary] = Field(default_factory=list)
    created_at: datetime | None = Field(default=None, alias="createdAt")
