from typing import Annotated

from fastapi import APIRouter, Depends, Query

from turf_admin.dependencies import AdminSessionDep, DateRangeParams, TurfServiceDep
from turf_admin.models import Booking, ReportType

router = APIRouter(prefix="/api/reports", tags=["reports"])


@router.get(
    "/{report_type}",
    response_model=list[Booking],
    operation_id="getReport",
    summary="Active or cancelled booking report for a turf",
)
async def get_report(
    report_type: ReportType,
    session: AdminSessionDep,
    service: TurfServiceDep,
    date_range: Annotated[DateRangeParams, Depends()],
    turf_id: str = Query(..., description="Turf to report on"),
) -> list[Booking]:
    return await service.booking_report(
        session, turf_id, date_range.date_from, date_range.date_to, report_type
    )
