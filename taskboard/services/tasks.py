"""Task CRUD: project membership, assignment and tagging."""

import logging

from sqlalchemy.orm import Session, selectinload

from taskboard.models import Tag, Task, User
from taskboard.schemas.auth import Identity
from taskboard.schemas.task import TaskCreate, TaskUpdate
from taskboard.services.errors import NotFoundError
from taskboard.services.permissions import ensure_can_edit_task, ensure_project_owner_or_admin
from taskboard.services.projects import get_project

logger = logging.getLogger(__name__)


def list_tasks(
    db: Session,
    *,
    project_id: int | None = None,
    assigned_user_id: int | None = None,
    status: str | None = None,
    tag_id: int | None = None,
) -> list[Task]:
    """Return tasks, optionally narrowed by project, assignee, status and tag."""
    query = db.query(Task).options(
        selectinload(Task.tags),
        selectinload(Task.assigned_user),
    )
    if project_id is not None:
        query = query.filter(Task.project_id == project_id)
    if assigned_user_id is not None:
        query = query.filter(Task.assigned_user_id == assigned_user_id)
    if status is not None:
        query = query.filter(Task.status == status)
    if tag_id is not None:
        query = query.filter(Task.tags.any(Tag.id == tag_id))
    return query.order_by(Task.id).all()


def get_task(db: Session, task_id: int) -> Task:
    task = db.get(Task, task_id)
    if task is None:
        raise NotFoundError(f"Task with ID {task_id} not found")
    return task


def _resolve_assignee(db: Session, user_id: int | None) -> int | None:
    if user_id is not None and db.get(User, user_id) is None:
        raise NotFoundError(f"User with ID {user_id} not found")
    return user_id


def _resolve_tags(db: Session, tag_ids: list[int]) -> list[Tag]:
    """Load tags by id; every id must exist."""
    wanted = set(tag_ids)
    if not wanted:
        return []
    tags = db.query(Tag).filter(Tag.id.in_(wanted)).order_by(Tag.id).all()
    missing = wanted - {t.id for t in tags}
    if missing:
        raise NotFoundError(f"Tags not found: {', '.join(str(i) for i in sorted(missing))}")
    return tags


def create_task(db: Session, body: TaskCreate, actor: Identity) -> Task:
    project = get_project(db, body.project_id)
    ensure_project_owner_or_admin(actor, project)

    task = Task(
        title=body.title,
        description=body.description,
        status=body.status,
        project_id=project.id,
        assigned_user_id=_resolve_assignee(db, body.assigned_user_id),
        tags=_resolve_tags(db, body.tag_ids),
    )
    db.add(task)
    db.commit()
    db.refresh(task)
    logger.info("Task created", extra={"task_id": task.id, "project_id": project.id})
    return task


def update_task(db: Session, task_id: int, patch: TaskUpdate, actor: Identity) -> Task:
    task = get_task(db, task_id)
    ensure_can_edit_task(actor, task)

    changes = patch.model_dump(exclude_unset=True)
    if "assigned_user_id" in changes:
        task.assigned_user_id = _resolve_assignee(db, changes.pop("assigned_user_id"))
    if "tag_ids" in changes:
        task.tags = _resolve_tags(db, changes.pop("tag_ids"))
    for field, value in changes.items():
        setattr(task, field, value)
    db.commit()
    db.refresh(task)
    return task


def delete_task(db: Session, task_id: int, actor: Identity) -> None:
    task = get_task(db, task_id)
    ensure_project_owner_or_admin(actor, task.project)
    db.delete(task)
    db.commit()
