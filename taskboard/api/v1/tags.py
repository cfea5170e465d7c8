"""Tag endpoints. Any authenticated user may create or rename tags; deletion is admin only."""

from typing import Annotated

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from taskboard.api.v1.auth import get_current_user, require_admin
from taskboard.core.database import get_db
from taskboard.schemas.auth import Identity
from taskboard.schemas.tag import TagCreate, TagRead, TagUpdate
from taskboard.services import tags as tags_service

router = APIRouter()


@router.get("", response_model=list[TagRead])
def list_tags(
    _user: Annotated[Identity, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
) -> list[TagRead]:
    return [TagRead.model_validate(t) for t in tags_service.list_tags(db)]


@router.post("", response_model=TagRead, status_code=status.HTTP_201_CREATED)
def create_tag(
    body: TagCreate,
    _user: Annotated[Identity, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
) -> TagRead:
    return TagRead.model_validate(tags_service.create_tag(db, body))


@router.patch("/{tag_id}", response_model=TagRead)
def update_tag(
    tag_id: int,
    body: TagUpdate,
    _user: Annotated[Identity, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
) -> TagRead:
    return TagRead.model_validate(tags_service.update_tag(db, tag_id, body))


@router.delete("/{tag_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_tag(
    tag_id: int,
    _admin: Annotated[Identity, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> Response:
    tags_service.delete_tag(db, tag_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
