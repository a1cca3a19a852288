"""
Probe endpoints for the process, the database and the newsletter transport.
"""

from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from newsroom import __version__
from newsroom.api.deps import get_db

router = APIRouter()


class HealthResponse(BaseModel):
    """Service version and the transport it broadcasts through."""

    status: str
    version: str
    transport: str | None


class ReadinessResponse(BaseModel):
    """Dependency checks."""

    ready: bool
    checks: dict[str, bool]


@router.get("/health", response_model=HealthResponse)
async def health_check(request: Request) -> HealthResponse:
    """Report the version and the configured newsletter platform, if any."""
    transport = request.app.state.transport
    return HealthResponse(
        status="healthy",
        version=__version__,
        transport=transport.platform_name if transport is not None else None,
    )


@router.get("/ready", response_model=ReadinessResponse)
async def readiness_check(
    request: Request,
    db: AsyncSession = Depends(get_db),
) -> ReadinessResponse:
    """Ready when the database answers; the transport is reported alongside."""
    try:
        await db.execute(text("SELECT 1"))
        database_ok = True
    except Exception:
        database_ok = False

    checks = {
        "database": database_ok,
        "transport": request.app.state.transport is not None,
    }
    return ReadinessResponse(ready=database_ok, checks=checks)


@router.get("/live")
async def liveness_check() -> dict[str, str]:
    return {"status": "alive"}
