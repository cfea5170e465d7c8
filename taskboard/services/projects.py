"""Project CRUD with owner-or-admin mutation rules."""

import logging

from sqlalchemy.orm import Session, selectinload

from taskboard.models import Project, User
from taskboard.schemas.auth import Identity
from taskboard.schemas.project import ProjectCreate, ProjectUpdate
from taskboard.services.errors import AuthorizationError, NotFoundError
from taskboard.services.permissions import ensure_project_owner_or_admin, is_admin

logger = logging.getLogger(__name__)


def list_projects(db: Session, owner_id: int | None = None) -> list[Project]:
    query = db.query(Project).options(
        selectinload(Project.owner),
        selectinload(Project.tasks),
    )
    if owner_id is not None:
        query = query.filter(Project.owner_id == owner_id)
    return query.order_by(Project.id).all()


def get_project(db: Session, project_id: int) -> Project:
    project = db.get(Project, project_id)
    if project is None:
        raise NotFoundError(f"Project with ID {project_id} not found")
    return project


def create_project(db: Session, body: ProjectCreate, actor: Identity) -> Project:
    """Create a project owned by the caller, or by owner_id when an admin asks."""
    owner_id = body.owner_id if body.owner_id is not None else actor.id
    if owner_id != actor.id and not is_admin(actor):
        raise AuthorizationError("Only an admin can create projects for another user")
    if db.get(User, owner_id) is None:
        raise NotFoundError(f"User with ID {owner_id} not found")

    project = Project(title=body.title, description=body.description, owner_id=owner_id)
    db.add(project)
    db.commit()
    db.refresh(project)
    logger.info("Project created", extra={"project_id": project.id, "owner_id": owner_id})
    return project


def update_project(db: Session, project_id: int, patch: ProjectUpdate, actor: Identity) -> Project:
    project = get_project(db, project_id)
    ensure_project_owner_or_admin(actor, project)
    for field, value in patch.model_dump(exclude_unset=True).items():
        setattr(project, field, value)
    db.commit()
    db.refresh(project)
    return project


def delete_project(db: Session, project_id: int, actor: Identity) -> None:
    """Delete a project and all of its tasks."""
    project = get_project(db, project_id)
    ensure_project_owner_or_admin(actor, project)
    db.delete(project)
    db.commit()
    logger.info("Project deleted", extra={"project_id": project_id, "actor_id": actor.id})
