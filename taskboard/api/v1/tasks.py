"""Task endpoints, with server-side filters for the task lists."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from taskboard.api.v1.auth import get_current_user
from taskboard.core.database import get_db
from taskboard.schemas.auth import Identity
from taskboard.schemas.task import TaskCreate, TaskRead, TaskStatus, TaskUpdate
from taskboard.services import tasks as tasks_service

router = APIRouter()


@router.get("", response_model=list[TaskRead])
def list_tasks(
    _user: Annotated[Identity, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
    project_id: Annotated[int | None, Query()] = None,
    assigned_user_id: Annotated[int | None, Query()] = None,
    status_filter: Annotated[TaskStatus | None, Query(alias="status")] = None,
    tag_id: Annotated[int | None, Query()] = None,
) -> list[TaskRead]:
    """List tasks; every query parameter narrows the result further."""
    tasks = tasks_service.list_tasks(
        db,
        project_id=project_id,
        assigned_user_id=assigned_user_id,
        status=status_filter,
        tag_id=tag_id,
    )
    return [TaskRead.model_validate(t) for t in tasks]


@router.get("/{task_id}", response_model=TaskRead)
def get_task(
    task_id: int,
    _user: Annotated[Identity, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
) -> TaskRead:
    return TaskRead.model_validate(tasks_service.get_task(db, task_id))


@router.post("", response_model=TaskRead, status_code=status.HTTP_201_CREATED)
def create_task(
    body: TaskCreate,
    current_user: Annotated[Identity, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
) -> TaskRead:
    """Create a task in a project the caller owns (admins: any project)."""
    return TaskRead.model_validate(tasks_service.create_task(db, body, current_user))


@router.patch("/{task_id}", response_model=TaskRead)
def update_task(
    task_id: int,
    body: TaskUpdate,
    current_user: Annotated[Identity, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
) -> TaskRead:
    return TaskRead.model_validate(tasks_service.update_task(db, task_id, body, current_user))


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_task(
    task_id: int,
    current_user: Annotated[Identity, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
) -> Response:
    tasks_service.delete_task(db, task_id, current_user)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
