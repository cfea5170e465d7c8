"""ORM model for application users (credentials and RBAC)."""

from sqlalchemy import Column, DateTime, Integer, String, func
from sqlalchemy.orm import relationship

from taskboard.models.base import Base

ROLE_USER = "user"
ROLE_ADMIN = "admin"
ROLES = (ROLE_USER, ROLE_ADMIN)


class User(Base):
    """
    User account for JWT authentication and role-based access control.

    role: 'admin' or 'user'. Deleting a user removes the projects they own
    (and those projects' tasks); tasks merely assigned to them become unassigned.
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    email = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    role = Column(String(32), nullable=False, default=ROLE_USER, server_default=ROLE_USER)
    profile_photo = Column(String(2048), nullable=True)
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )

    projects = relationship(
        "Project",
        back_populates="owner",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    assigned_tasks = relationship(
        "Task",
        back_populates="assigned_user",
        passive_deletes=True,
    )
