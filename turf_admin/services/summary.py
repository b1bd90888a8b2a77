"""Dashboard stats computed from a list of bookings."""

from __future__ import annotations

from collections import Counter
from datetime import datetime, timedelta

from turf_admin.models import Booking, BookingStatus, BookingSummary

UPCOMING_WINDOW = timedelta(days=7)

_UPCOMING_STATUSES = frozenset({BookingStatus.CONFIRMED, BookingStatus.PENDING_PAYMENT})


def summarize_bookings(bookings: list[Booking], now: datetime) -> BookingSummary:
    counts = Counter(b.status for b in bookings)
    upcoming = sum(
        1
        for b in bookings
        if b.status in _UPCOMING_STATUSES and now <= b.start_time < now + UPCOMING_WINDOW
    )
    revenue = sum(b.total_price for b in bookings if b.status is not BookingStatus.CANCELLED)
    return BookingSummary(
        total=len(bookings),
        by_status={status: counts.get(status, 0) for status in BookingStatus},
        upcoming_7_days=upcoming,
        revenue=round(revenue, 2),
    )
