"""
Health check endpoints
"""
import logging

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from adgen.core.config import settings
from adgen.core.deps import get_db
from adgen.schemas.common import HealthResponse, DatabaseHealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])


@router.get("/health", response_model=HealthResponse)
def health_check():
    return HealthResponse(
        status="healthy",
        app=settings.APP_NAME,
        version=settings.APP_VERSION,
        environment=settings.ENVIRONMENT,
    )


@router.get("/health/db", response_model=DatabaseHealthResponse, response_model_exclude_none=True)
def database_health(db: Session = Depends(get_db)):
    """Round-trips ``SELECT 1``; a failed query reports unhealthy instead of raising"""
    try:
        db.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.error(f"Database health check failed: {e}")
        return DatabaseHealthResponse(status="unhealthy", database="disconnected", error=str(e))

    return DatabaseHealthResponse(
        status="healthy",
        database="connected",
        dialect=db.get_bind().dialect.name,
    )
