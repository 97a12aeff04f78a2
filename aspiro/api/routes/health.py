"""
Health check routes.
"""
from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from aspiro.core.config import settings
from aspiro.core.database import get_db
from aspiro.core.llm import TextCompletionProvider, get_completion_provider
from aspiro.core.logging import get_logger
from aspiro.schemas.base import BaseSchema

logger = get_logger(__name__)

router = APIRouter(tags=["health"])


class HealthResponse(BaseSchema):
    """Health check response."""

    status: str
    version: str
    timestamp: str
    checks: dict


@router.get("/health", response_model=HealthResponse)
async def health_check(
    db: AsyncSession = Depends(get_db),
    provider: TextCompletionProvider = Depends(get_completion_provider),
):
    """
    Health check endpoint for monitoring.

    The status is degraded when the database is unreachable. A missing
    completion provider is reported but does not degrade the service,
    since every generative feature has a fallback.
    """
    checks = {}

    try:
        await db.execute(text("SELECT 1"))
        checks["database"] = "healthy"
    except SQLAlchemyError as e:
        logger.error("health_database_unreachable", error=str(e))
        checks["database"] = "unhealthy"

    checks["completion_provider"] = provider.name if provider.enabled else "disabled"

    return HealthResponse(
        status="healthy" if checks["database"] == "healthy" else "degraded",
        version=settings.app_version,
        timestamp=datetime.now(timezone.utc).isoformat(),
        checks=checks,
    )
