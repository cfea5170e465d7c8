"""SQLAlchemy ORM models."""

from taskboard.models.base import Base
from taskboard.models.project import Project
from taskboard.models.tag import Tag, task_tags
from taskboard.models.task import Task
from taskboard.models.user import User

__all__ = ["Base", "Project", "Tag", "Task", "User", "task_tags"]
