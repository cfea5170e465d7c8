"""User endpoints: admin listing/deletion plus self-service profile and password changes."""

from typing import Annotated

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from taskboard.api.v1.auth import get_current_user, require_admin
from taskboard.core.config import Settings, get_settings
from taskboard.core.database import get_db
from taskboard.schemas.auth import Identity
from taskboard.schemas.user import PasswordChangeRequest, UserRead, UserUpdate
from taskboard.services import users as users_service

router = APIRouter()


@router.get("", response_model=list[UserRead])
def list_users(
    _admin: Annotated[Identity, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> list[UserRead]:
    """List all users (admin only)."""
    return [UserRead.model_validate(u) for u in users_service.list_users(db)]


@router.get("/{user_id}", response_model=UserRead)
def get_user(
    user_id: int,
    _user: Annotated[Identity, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
) -> UserRead:
    return UserRead.model_validate(users_service.get_user(db, user_id))


@router.patch("/{user_id}", response_model=UserRead)
def update_user(
    user_id: int,
    body: UserUpdate,
    current_user: Annotated[Identity, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
) -> UserRead:
    """
    Update email or profile photo (self or admin) or role (admin only).

    A role change takes effect in tokens issued after it; existing tokens keep
    the role they were signed with until they expire.
    """
    user = users_service.update_user(db, user_id, body, current_user)
    return UserRead.model_validate(user)


@router.patch("/{user_id}/password", status_code=status.HTTP_204_NO_CONTENT)
def change_password(
    user_id: int,
    body: PasswordChangeRequest,
    current_user: Annotated[Identity, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> Response:
    users_service.change_password(db, user_id, body, current_user, settings)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user(
    user_id: int,
    admin: Annotated[Identity, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> Response:
    """Delete a user and everything they own (admin only)."""
    users_service.delete_user(db, user_id, admin)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
