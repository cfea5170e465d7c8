"""Object-level access checks shared by the resource services."""

from taskboard.models import Project, Task
from taskboard.models.user import ROLE_ADMIN
from taskboard.schemas.auth import Identity
from taskboard.services.errors import AuthorizationError


def is_admin(identity: Identity) -> bool:
    return identity.role == ROLE_ADMIN


def ensure_admin(identity: Identity) -> None:
    if not is_admin(identity):
        raise AuthorizationError("Admin access required")


def ensure_self_or_admin(identity: Identity, user_id: int) -> None:
    if identity.id != user_id and not is_admin(identity):
        raise AuthorizationError("You can only modify your own account")


def ensure_project_owner_or_admin(identity: Identity, project: Project) -> None:
    if project.owner_id != identity.id and not is_admin(identity):
        raise AuthorizationError("Only the project owner or an admin can do this")


def ensure_can_edit_task(identity: Identity, task: Task) -> None:
    """Project owner, the assigned user, or an admin may edit a task."""
    if is_admin(identity):
        return
    if task.project.owner_id == identity.id or task.assigned_user_id == identity.id:
        return
    raise AuthorizationError("Only the project owner, the assignee or an admin can edit this task")
