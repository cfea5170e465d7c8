"""
Create a user directly in the database (e.g. the first admin, without an activation code).
Run from project root:
  python -m taskboard.scripts.create_user EMAIL PASSWORD [role]
Example:
  python -m taskboard.scripts.create_user admin@example.org 'S3cure!pass' admin
"""
import argparse
import logging
import sys

from pydantic import EmailStr, TypeAdapter, ValidationError as PydanticValidationError

from taskboard.core.config import get_settings
from taskboard.core.database import SessionLocal
from taskboard.core.security import PASSWORD_MAX_LEN, PASSWORD_MIN_LEN, hash_password
from taskboard.models.user import ROLES, ROLE_USER, User
from taskboard.schemas.auth import validate_password_strength

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)

_email_adapter = TypeAdapter(EmailStr)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a Taskboard user.")
    parser.add_argument("email", help="Email address (must be unique)")
    parser.add_argument("password", help=f"Password ({PASSWORD_MIN_LEN}-{PASSWORD_MAX_LEN} chars)")
    parser.add_argument("role", nargs="?", default=ROLE_USER, choices=list(ROLES))
    args = parser.parse_args(argv)

    try:
        email = _email_adapter.validate_python(args.email.strip()).lower()
    except PydanticValidationError:
        print("Invalid email address.", file=sys.stderr)
        return 1
    if not (PASSWORD_MIN_LEN <= len(args.password) <= PASSWORD_MAX_LEN):
        print(f"Password must be {PASSWORD_MIN_LEN}-{PASSWORD_MAX_LEN} characters.", file=sys.stderr)
        return 1
    try:
        validate_password_strength(args.password)
    except ValueError as e:
        print(str(e), file=sys.stderr)
        return 1

    settings = get_settings()
    db = SessionLocal()
    try:
        existing = db.query(User).filter(User.email == email).first()
        if existing:
            print(f"User '{email}' already exists.", file=sys.stderr)
            return 1
        user = User(
            email=email,
            password_hash=hash_password(args.password, settings.BCRYPT_ROUNDS),
            role=args.role,
        )
        db.add(user)
        db.commit()
        logger.info("Created user", extra={"user_id": user.id, "role": args.role})
        print(f"Created user '{email}' with role '{args.role}'.")
        return 0
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
