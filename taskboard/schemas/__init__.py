"""Pydantic request/response schemas."""

from taskboard.schemas.auth import (
    AuthResponse,
    Identity,
    LoginRequest,
    RegisterRequest,
    UserSummary,
)
from taskboard.schemas.health import HealthResponse
from taskboard.schemas.project import ProjectCreate, ProjectRead, ProjectUpdate
from taskboard.schemas.tag import TagCreate, TagRead, TagUpdate
from taskboard.schemas.task import TaskCreate, TaskRead, TaskStatus, TaskUpdate
from taskboard.schemas.user import PasswordChangeRequest, UserRead, UserUpdate

__all__ = [
    "AuthResponse",
    "HealthResponse",
    "Identity",
    "LoginRequest",
    "PasswordChangeRequest",
    "ProjectCreate",
    "ProjectRead",
    "ProjectUpdate",
    "RegisterRequest",
    "TagCreate",
    "TagRead",
    "TagUpdate",
    "TaskCreate",
    "TaskRead",
    "TaskStatus",
    "TaskUpdate",
    "UserRead",
    "UserSummary",
    "UserUpdate",
]
