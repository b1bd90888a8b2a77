from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from turf_admin.dependencies import (
    AdminSessionDep,
    DateRangeParams,
    PaginationParams,
    TurfServiceDep,
    paginate,
)
from turf_admin.models import (
    BookingDetail,
    BookingListResponse,
    BookingStatus,
    CreateBookingRequest,
    CreateBookingResponse,
    PaymentUpdateRequest,
)

router = APIRouter(prefix="/api/bookings", tags=["bookings"])


@router.post(
    "",
    response_model=CreateBookingResponse,
    status_code=status.HTTP_201_CREATED,
    operation_id="createBooking",
    summary="Book one or more available slots",
)
async def create_booking(
    body: CreateBookingRequest,
    session: AdminSessionDep,
    service: TurfServiceDep,
) -> CreateBookingResponse:
    return await service.create_booking(session, body)


@router.get(
    "",
    response_model=BookingListResponse,
    operation_id="listBookings",
    summary="Active and cancelled bookings for a turf",
)
async def list_bookings(
    session: AdminSessionDep,
    service: TurfServiceDep,
    date_range: Annotated[DateRangeParams, Depends()],
    pagination: Annotated[PaginationParams, Depends()],
    turf_id: str = Query(..., description="Turf to report on"),
    booking_status: list[BookingStatus] | None = Query(
        None, alias="status", description="Only these statuses (repeatable)"
    ),
) -> BookingListResponse:
    bookings = await service.list_bookings(
        session,
        turf_id,
        date_range.date_from,
        date_range.date_to,
        statuses=booking_status,
    )
    return paginate(bookings, pagination, BookingListResponse)


@router.get(
    "/{booking_id}",
    response_model=BookingDetail,
    operation_id="getBooking",
    summary="Booking details with payment history",
)
async def get_booking(booking_id: str, session: AdminSessionDep, service: TurfServiceDep) -> BookingDetail:
    return await service.booking_detail(session, booking_id)


@router.post(
    "/{booking_id}/payments",
    response_model=BookingDetail,
    operation_id="recordPayment",
    summary="Record a further payment on a booking",
)
async def record_payment(
    booking_id: str,
    body: PaymentUpdateRequest,
    session: AdminSessionDep,
    service: TurfServiceDep,
) -> BookingDetail:
    return await service.record_payment(session, booking_id, body)
