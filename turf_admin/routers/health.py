"""
Health check endpoint.
"""

from datetime import datetime, timezone

from fastapi import APIRouter

from turf_admin.config import APP_VERSION
from turf_admin.models import HealthResponse

router = APIRouter(prefix="/api", tags=["health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    operation_id="getHealth",
    summary="Health check",
)
async def get_health() -> HealthResponse:
    return HealthResponse(
        status="ok",
        version=APP_VERSION,
        timestamp=datetime.now(timezone.utc),
    )
