"""Schemas for tasks: create payload, explicit patch, and read models."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field, field_validator

from taskboard.schemas.auth import UserSummary
from taskboard.schemas.tag import TagRead

TaskStatus = Literal["pending", "in-progress", "completed"]

TITLE_MAX_LENGTH = 255
DESCRIPTION_MAX_LENGTH = 10_000
MAX_TAGS_PER_TASK = 50


class TaskCreate(BaseModel):
    """New task inside an existing project."""

    model_config = {"extra": "forbid", "populate_by_name": True}

    title: str = Field(..., min_length=1, max_length=TITLE_MAX_LENGTH)
    description: str | None = Field(default=None, max_length=DESCRIPTION_MAX_LENGTH)
    status: TaskStatus = "pending"
    project_id: int = Field(..., alias="projectId")
    assigned_user_id: int | None = Field(default=None, alias="assignedUserId")
    tag_ids: list[int] = Field(default_factory=list, alias="tagIds", max_length=MAX_TAGS_PER_TASK)


class TaskUpdate(BaseModel):
    """
    Patch for a task. Only fields present in the body are applied.

    Sending assignedUserId=null unassigns the task; tagIds replaces the whole tag set.
    A task cannot be moved to another project.
    """

    model_config = {"extra": "forbid", "populate_by_name": True}

    title: str | None = Field(default=None, min_length=1, max_length=TITLE_MAX_LENGTH)
    description: str | None = Field(default=None, max_length=DESCRIPTION_MAX_LENGTH)
    status: TaskStatus | None = None
    assigned_user_id: int | None = Field(default=None, alias="assignedUserId")
    tag_ids: list[int] | None = Field(default=None, alias="tagIds", max_length=MAX_TAGS_PER_TASK)

    @field_validator("title", "status", "tag_ids")
    @classmethod
    def reject_null(cls, v: object) -> object:
        if v is None:
            raise ValueError("field cannot be null")
        return v


class TaskSummary(BaseModel):
    """Task fields embedded in a project."""

    model_config = {"from_attributes": True, "populate_by_name": True}

    id: int
    title: str
    status: str
    assigned_user_id: int | None = Field(default=None, alias="assignedUserId")


class TaskRead(BaseModel):
    model_config = {"from_attributes": True, "populate_by_name": True}

    id: int
    title: str
    description: str | None = None
    status: str
    project_id: int = Field(..., alias="projectId")
    assigned_user_id: int | None = Field(default=None, alias="assignedUserId")
    assigned_user: UserSummary | None = Field(default=None, alias="assignedUser")
    tags: list[TagRead] = Field(default_factory=list)
    created_at: datetime | None = Field(default=None, alias="createdAt")
