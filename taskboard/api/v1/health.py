"""Health check endpoint with database connectivity check."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from taskboard import __version__
from taskboard.core.config import Settings, get_settings
from taskboard.core.database import check_db_connected, get_db
from taskboard.schemas.health import HealthResponse

router = APIRouter()


@router.get("/", response_model=HealthResponse)
def get_health(
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> HealthResponse:
    """Return service health, version and database connectivity. Does not require a token."""
    db_status = "connected" if check_db_connected(db) else "disconnected"

    return HealthResponse(
        status="ok",
        version=__version__,
        environment=settings.APP_ENV,
        database=db_status,
    )
