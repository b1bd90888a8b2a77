from typing import Annotated

from fastapi import APIRouter, Depends, Query

from turf_admin.dependencies import AdminSessionDep, DateRangeParams, TurfServiceDep
from turf_admin.models import BookingSummary

router = APIRouter(prefix="/api/dashboard", tags=["dashboard"])


@router.get(
    "",
    response_model=BookingSummary,
    operation_id="getDashboard",
    summary="Booking counts, upcoming bookings and revenue for a turf",
)
async def get_dashboard(
    session: AdminSessionDep,
    service: TurfServiceDep,
    date_range: Annotated[DateRangeParams, Depends()],
    turf_id: str = Query(..., description="Turf to summarize"),
) -> BookingSummary:
    return await service.dashboard(session, turf_id, date_range.date_from, date_range.date_to)
