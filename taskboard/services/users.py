"""User administration and self-service account changes."""

import logging
from typing import TYPE_CHECKING

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, selectinload

from taskboard.core.security import hash_password, verify_password
from taskboard.models import User
from taskboard.schemas.auth import Identity
from taskboard.schemas.user import PasswordChangeRequest, UserUpdate
from taskboard.services.errors import ConflictError, NotFoundError, ValidationError
from taskboard.services.permissions import ensure_admin, ensure_self_or_admin

if TYPE_CHECKING:
    from taskboard.core.config import Settings

logger = logging.getLogger(__name__)


def list_users(db: Session) -> list[User]:
    return db.query(User).options(selectinload(User.projects)).order_by(User.id).all()


def get_user(db: Session, user_id: int) -> User:
    user = db.get(User, user_id)
    if user is None:
        raise NotFoundError(f"User with ID {user_id} not found")
    return user


def update_user(db: Session, user_id: int, patch: UserUpdate, actor: Identity) -> User:
    """Apply a profile patch. Users edit themselves; only admins change roles."""
    ensure_self_or_admin(actor, user_id)
    user = get_user(db, user_id)
    changes = patch.model_dump(exclude_unset=True)

    if "role" in changes and changes["role"] != user.role:
        ensure_admin(actor)
        logger.info(
            "User role changed",
            extra={"user_id": user.id, "old_role": user.role, "new_role": changes["role"], "actor_id": actor.id},
        )

    if "email" in changes:
        email = changes["email"].strip().lower()
        clash = db.query(User).filter(User.email == email, User.id != user.id).first()
        if clash is not None:
            raise ConflictError("Email is already in use")
        changes["email"] = email

    for field, value in changes.items():
        setattr(user, field, value)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise ConflictError("Email is already in use") from e
    db.refresh(user)
    return user


def change_password(
    db: Session,
    user_id: int,
    body: PasswordChangeRequest,
    actor: Identity,
    settings: "Settings",
) -> None:
    """
    Replace a user's password hash.

    Users changing their own password must confirm the current one; admins may
    reset another user's password without it.
    """
    ensure_self_or_admin(actor, user_id)
    user = get_user(db, user_id)
    if actor.id == user_id:
        if not body.current_password or not verify_password(body.current_password, user.password_hash):
            raise ValidationError("Current password is incorrect")
    user.password_hash = hash_password(body.new_password, settings.BCRYPT_ROUNDS)
    db.commit()
    logger.info("Password changed", extra={"user_id": user.id, "actor_id": actor.id})


def delete_user(db: Session, user_id: int, actor: Identity) -> None:
    """Remove an account together with the projects (and tasks) it owns."""
    ensure_admin(actor)
    user = get_user(db, user_id)
    db.delete(user)
    db.commit()
    logger.info("User deleted", extra={"user_id": user_id, "actor_id": actor.id})
