"""Tag CRUD; tag names are globally unique."""

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from taskboard.models import Tag
from taskboard.schemas.tag import TagCreate, TagUpdate
from taskboard.services.errors import ConflictError, NotFoundError


def list_tags(db: Session) -> list[Tag]:
    return db.query(Tag).order_by(Tag.name).all()


def get_tag(db: Session, tag_id: int) -> Tag:
    tag = db.get(Tag, tag_id)
    if tag is None:
        raise NotFoundError(f"Tag with ID {tag_id} not found")
    return tag


def _commit_unique(db: Session, message: str) -> None:
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise ConflictError(message) from e


def create_tag(db: Session, body: TagCreate) -> Tag:
    if db.query(Tag).filter(Tag.name == body.name).first() is not None:
        raise ConflictError("Tag with this name already exists")
    tag = Tag(name=body.name)
    db.add(tag)
    _commit_unique(db, "Tag with this name already exists")
    db.refresh(tag)
    return tag


def update_tag(db: Session, tag_id: int, patch: TagUpdate) -> Tag:
    tag = get_tag(db, tag_id)
    changes = patch.model_dump(exclude_unset=True)
    if "name" in changes:
        existing = db.query(Tag).filter(Tag.name == changes["name"]).first()
        if existing is not None and existing.id != tag_id:
            raise ConflictError("Another tag with this name already exists")
        tag.name = changes["name"]
        _commit_unique(db, "Another tag with this name already exists")
        db.refresh(tag)
    return tag


def delete_tag(db: Session, tag_id: int) -> None:
    tag = get_tag(db, tag_id)
    db.delete(tag)
    db.commit()
