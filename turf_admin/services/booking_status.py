"""
Booking status derivation and report item mapping.

The status shown for a booking depends only on which report it came from,
the payment status string, and whether the slot has already ended.  Keeping
that a pure function of those three inputs means the status can be
recomputed at any time without going back to the API.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime

from pydantic import ValidationError

from turf_admin.errors import MalformedResponseError
from turf_admin.models import (
    Booking,
    BookingDetail,
    BookingStatus,
    PaymentRecord,
    ReportType,
)
from turf_admin.services.timeparse import parse_booking_window, parse_report_date
from turf_admin.services.turf_api.api_models import (
    ApiBookingDetailItem,
    ApiBookingReportItem,
    ApiPaymentDetail,
)

logger = logging.getLogger(__name__)

_PAID_STATUSES = frozenset({"done", "paid"})
_PENDING_STATUSES = frozenset({"pending"})


def derive_booking_status(
    report_type: ReportType | str,
    payment_status: str | None,
    end_time: datetime,
    now: datetime,
) -> BookingStatus:
    """Derive the display status of a booking.

    Cancelled reports always yield ``cancelled``.  For active reports a
    paid booking is ``completed`` once *now* is past *end_time* and
    ``confirmed`` before that; a pending payment gives ``pending_payment``;
    anything else falls back to ``confirmed``.
    """
    try:
        report_type = ReportType(report_type)
    except ValueError:
        return BookingStatus.UNKNOWN

    if report_type is ReportType.CANCELLED:
        return BookingStatus.CANCELLED

    payment = (payment_status or "").strip().lower()
    if payment in _PAID_STATUSES:
        return BookingStatus.COMPLETED if now > end_time else BookingStatus.CONFIRMED
    if payment in _PENDING_STATUSES:
        return BookingStatus.PENDING_PAYMENT
    return BookingStatus.CONFIRMED


def _parse_amount(raw: str | None) -> float:
    if raw is None or not raw.strip():
        return 0.0
    try:
        return float(raw)
    except ValueError:
        raise MalformedResponseError(f"Unreadable amount {raw!r} in booking data.") from None


def booking_from_report_item(
    item: ApiBookingReportItem,
    report_type: ReportType,
    turf_id: str,
    now: datetime,
) -> Booking:
    """Map one report row to a ``Booking``.

    The API does not echo the turf id, so the id used for the report query
    is recorded.  Raises ``TimeFormatError`` for unparseable dates.
    """
    window = parse_booking_window(item.bookingDate, item.bookingSlots)
    return Booking(
        id=item.bookingID,
        turf_id=turf_id,
        turf_name=item.turfBooked,
        customer_name=item.bookingPersonName,
        start_time=window.start,
        end_time=window.end,
        status=derive_booking_status(report_type, item.paymentStatus, window.end, now),
        total_price=_parse_amount(item.amount),
        booked_at=window.booked_at,
        payment_status=item.paymentStatus,
    )


def bookings_from_report(
    items: list[ApiBookingReportItem],
    report_type: ReportType,
    turf_id: str,
    now: datetime,
) -> list[Booking]:
    return [booking_from_report_item(item, report_type, turf_id, now) for item in items]


# ── Booking details ───────────────────────────────────────────────────────


def _parse_payments(raw: str | None, booking_id: str) -> list[PaymentRecord]:
    if not raw or not raw.strip():
        return []
    try:
        entries = json.loads(raw)
    except json.JSONDecodeError:
        logger.error("Payment history of booking %s is not valid JSON", booking_id)
        raise MalformedResponseError(
            f"Payment history of booking {booking_id} could not be read."
        ) from None
    if isinstance(entries, dict):
        entries = [entries]

    payments: list[PaymentRecord] = []
    for entry in entries:
        try:
            detail = ApiPaymentDetail.model_validate(entry)
        except ValidationError as exc:
            raise MalformedResponseError(
                f"Payment history of booking {booking_id} has an unexpected entry."
            ) from exc
        payments.append(
            PaymentRecord(
                payment_id=detail.PaymentID,
                payment_mode=detail.PaymentMode,
                transaction_id=detail.TransactionID,
                paid_amount=detail.PaidAmount,
                discount_amount=detail.DiscountAmount,
                payment_date=parse_report_date(detail.PaymentDate) if detail.PaymentDate else None,
            )
        )
    return payments


def booking_detail_from_api(item: ApiBookingDetailItem) -> BookingDetail:
    return BookingDetail(
        booking_id=item.bookingID,
        customer_name=item.username,
        email=item.email,
        mobile_no=item.mobileNo,
        turf_name=item.turfBooked,
        turf_address=item.turfAddress,
        day_booked=item.dayBooked,
        booking_slots=item.bookingSlots,
        total_amount=_parse_amount(item.amount),
        balance_amount=_parse_amount(item.balanceAmount),
        payments=_parse_payments(item.paymentDetails, item.bookingID),
    )
