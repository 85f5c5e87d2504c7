"""Health check endpoints."""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel

from api.dependencies import get_database
from infrastructure.database.session import Database

VERSION = "1.0.0"

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str
    timestamp: str
    environment: str
    database: str | None = None


@router.get("/health", response_model=HealthResponse, summary="Basic health check")
async def health_check(request: Request) -> HealthResponse:
    """
    Basic health check for load balancers.

    Returns service status without checking dependencies. Fast and lightweight.
    """
    return HealthResponse(
        status="healthy",
        version=VERSION,
        timestamp=datetime.now(timezone.utc).isoformat(),
        environment=request.app.state.settings.app_env,
    )


@router.get(
    "/health/detailed",
    response_model=HealthResponse,
    summary="Detailed health check",
)
async def detailed_health_check(
    request: Request,
    database: Database = Depends(get_database),
) -> HealthResponse:
    """
    Detailed health check including database connectivity.

    Use for monitoring dashboards that need to verify all dependencies.
    """
    db_status = "unknown"

    try:
        await database.ping()
        db_status = "healthy"
    except Exception as e:
        db_status = f"unhealthy: {str(e)}"

    overall_status = "healthy" if db_status == "healthy" else "degraded"

    return HealthResponse(
        status=overall_status,
        version=VERSION,
        timestamp=datetime.now(timezone.utc).isoformat(),
        environment=request.app.state.settings.app_env,
        database=db_status,
    )
