"""Project endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from taskboard.api.v1.auth import get_current_user
from taskboard.core.database import get_db
from taskboard.schemas.auth import Identity
from taskboard.schemas.project import ProjectCreate, ProjectRead, ProjectUpdate
from taskboard.services import projects as projects_service

router = APIRouter()


@router.get("", response_model=list[ProjectRead])
def list_projects(
    _user: Annotated[Identity, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
    owner_id: Annotated[int | None, Query(description="Only projects owned by this user")] = None,
) -> list[ProjectRead]:
    """List projects with their owner and tasks."""
    projects = projects_service.list_projects(db, owner_id=owner_id)
    return [ProjectRead.model_validate(p) for p in projects]


@router.get("/{project_id}", response_model=ProjectRead)
def get_project(
    project_id: int,
    _user: Annotated[Identity, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
) -> ProjectRead:
    return ProjectRead.model_validate(projects_service.get_project(db, project_id))


@router.post("", response_model=ProjectRead, status_code=status.HTTP_201_CREATED)
def create_project(
    body: ProjectCreate,
    current_user: Annotated[Identity, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
) -> ProjectRead:
    """Create a project. ownerId defaults to the caller; admins may create for anyone."""
    project = projects_service.create_project(db, body, current_user)
    return ProjectRead.model_validate(project)


@router.patch("/{project_id}", response_model=ProjectRead)
def update_project(
    project_id: int,
    body: ProjectUpdate,
    current_user: Annotated[Identity, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
) -> ProjectRead:
    project = projects_service.update_project(db, project_id, body, current_user)
    return ProjectRead.model_validate(project)


@router.delete("/{project_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_project(
    project_id: int,
    current_user: Annotated[Identity, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
) -> Response:
    projects_service.delete_project(db, project_id, current_user)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
