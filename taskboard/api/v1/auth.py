"""JWT login/registration and the access guard dependencies (get_current_user, require_admin)."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from taskboard.core.config import Settings, get_settings
from taskboard.core.database import get_db
from taskboard.models.user import ROLE_ADMIN
from taskboard.schemas.auth import AuthResponse, Identity, LoginRequest, RegisterRequest
from taskboard.services import auth as auth_service
from taskboard.services.errors import AuthenticationError

router = APIRouter()
security = HTTPBearer(auto_error=False)


@router.post("/login", response_model=AuthResponse)
def login(
    body: LoginRequest,
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> AuthResponse:
    """
    Authenticate with email and password; returns a JWT access token and the user.
    Include the token in the Authorization header as: Bearer <access_token>
    """
    return auth_service.login(db, body.email, body.password, settings)


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(
    body: RegisterRequest,
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> AuthResponse:
    """
    Create an account and log it in.

    role 'admin' requires adminCode to match the configured activation code;
    any other role value registers a regular user.
    """
    return auth_service.register(db, body, settings)


def get_current_user(
    request: Request,
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> Identity:
    """
    Dependency: require a valid Bearer JWT and return the identity in its claims.

    The role is taken from the token as issued; the users table is not consulted.
    Raises 401 if the token is missing or invalid.
    """
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    try:
        identity = auth_service.identity_from_token(credentials.credentials, settings)
    except AuthenticationError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=e.message,
            headers={"WWW-Authenticate": "Bearer"},
        ) from e
    request.state.identity = identity
    return identity


def require_admin(
    current_user: Annotated[Identity, Depends(get_current_user)],
) -> Identity:
    """Dependency: require authenticated user with role 'admin'. Raises 403 for non-admin."""
    if current_user.role != ROLE_ADMIN:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin access required",
        )
    return current_user


@router.get("/me", response_model=Identity)
def read_me(
    current_user: Annotated[Identity, Depends(get_current_user)],
) -> Identity:
    """Return the identity carried by the caller's token."""
    return current_user
