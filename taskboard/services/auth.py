"""Authenticator: credential checks, token issuance, and self-service registration."""

import hmac
import logging
from functools import lru_cache
from typing import TYPE_CHECKING

import jwt
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from taskboard.core.security import (
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)
from taskboard.models.user import ROLE_ADMIN, ROLE_USER, User
from taskboard.schemas.auth import AuthResponse, Identity, RegisterRequest, UserSummary
from taskboard.services.errors import (
    AuthenticationError,
    ConflictError,
    InvalidActivationCodeError,
    ValidationError,
)

if TYPE_CHECKING:
    from taskboard.core.config import Settings

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS_MESSAGE = "Invalid email or password."


def _normalize_email(email: str) -> str:
    return email.strip().lower()


def get_user_by_email(db: Session, email: str) -> User | None:
    """Credential Store lookup by unique email."""
    return db.query(User).filter(User.email == _normalize_email(email)).first()


@lru_cache
def _dummy_hash(rounds: int) -> str:
    return hash_password("taskboard-no-such-user", rounds)


def validate_credentials(
    db: Session, email: str, password: str, settings: "Settings"
) -> Identity | None:
    """
    Return the identity for a matching email/password pair, else None.

    Unknown email and wrong password are indistinguishable to the caller,
    including in timing: an unknown email is still checked against a dummy hash
    of the configured bcrypt cost.
    """
    user = get_user_by_email(db, email)
    if user is None:
        verify_password(password, _dummy_hash(settings.BCRYPT_ROUNDS))
        return None
    if not verify_password(password, user.password_hash):
        return None
    return Identity.model_validate(user)


def issue_token(identity: Identity, settings: "Settings") -> str:
    """Sign a bearer token carrying {sub, email, role} for the identity."""
    return create_access_token(
        sub=identity.id,
        email=identity.email,
        role=identity.role,
        settings=settings,
    )


def identity_from_token(token: str, settings: "Settings") -> Identity:
    """
    Verify a bearer token and return the identity its claims describe.

    Raises AuthenticationError if the token is malformed, expired, badly signed,
    or carries claims that do not form a valid identity.
    """
    try:
        payload = decode_access_token(token, settings)
    except jwt.PyJWTError as e:
        raise AuthenticationError("Invalid or expired token") from e
    try:
        return Identity(id=payload["sub"], email=payload["email"], role=payload["role"])
    except PydanticValidationError as e:
        raise AuthenticationError("Invalid token payload") from e


def _auth_response(user: User, settings: "Settings") -> AuthResponse:
    identity = Identity.model_validate(user)
    return AuthResponse(
        access_token=issue_token(identity, settings),
        token_type="bearer",
        user=UserSummary.model_validate(user),
    )


def login(db: Session, email: str, password: str, settings: "Settings") -> AuthResponse:
    """Check credentials and return a token for the matching user."""
    identity = validate_credentials(db, email, password, settings)
    if identity is None:
        logger.info("Login rejected")
        raise AuthenticationError(INVALID_CREDENTIALS_MESSAGE)
    user = db.get(User, identity.id)
    return _auth_response(user, settings)


def _activation_code_matches(supplied: str | None, settings: "Settings") -> bool:
    expected = settings.ADMIN_ACTIVATION_CODE
    if expected is None or not supplied:
        return False
    return hmac.compare_digest(
        supplied.encode("utf-8"),
        expected.get_secret_value().encode("utf-8"),
    )


def register(db: Session, request: RegisterRequest, settings: "Settings") -> AuthResponse:
    """
    Create a user and log them in.

    Checks run in a fixed order: passwords match, email is free, admin code is
    valid (only when role 'admin' is requested). Any role other than 'admin'
    is stored as 'user'.
    """
    if request.password != request.confirm_password:
        raise ValidationError("Passwords do not match")

    email = _normalize_email(request.email)
    if get_user_by_email(db, email) is not None:
        raise ConflictError("User already exists")

    role = ROLE_USER
    if request.role == ROLE_ADMIN:
        if not _activation_code_matches(request.admin_code, settings):
            logger.warning("Admin registration rejected: invalid activation code")
            raise InvalidActivationCodeError("Invalid admin activation code")
        role = ROLE_ADMIN

    user = User(
        email=email,
        password_hash=hash_password(request.password, settings.BCRYPT_ROUNDS),
        role=role,
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise ConflictError("User already exists") from e
    db.refresh(user)

    logger.info("User registered", extra={"user_id": user.id, "role": role})
    return _auth_response(user, settings)
