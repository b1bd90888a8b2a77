"""
Date and time parsing for slot and booking records.

The turf API is not consistent about formats: slot times come either as
12-hour ``hh:mm AM`` or 24-hour ``HH:mm:ss`` depending on the endpoint,
and report dates come either as ``M/d/yyyy hh:mm:ss AM`` or ISO.  All
parsing here is naive local time – nothing is converted between zones.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta

from turf_admin.errors import TimeFormatError

# Display format used for every slot time we hand out.
DISPLAY_TIME_FORMAT = "%I:%M %p"

TIME_FORMAT_12H = "12h"
TIME_FORMAT_24H = "24h"

_TIME_FORMATS: dict[str, tuple[str, ...]] = {
    TIME_FORMAT_12H: ("%I:%M %p", "%I:%M:%S %p", "%I:%M%p"),
    TIME_FORMAT_24H: ("%H:%M:%S", "%H:%M"),
}

# "5/1/2025 12:00:00 AM" – what the report endpoints send.  strptime accepts
# non-padded month/day for %m/%d.
_REPORT_DATE_FORMATS = ("%m/%d/%Y %I:%M:%S %p", "%m/%d/%Y %I:%M %p", "%m/%d/%Y")

_SLOT_RANGE_TIME_FORMAT = "%H:%M"


@dataclass(frozen=True)
class BookingWindow:
    start: datetime
    end: datetime
    booked_at: datetime


def parse_slot_time(raw: str, time_format: str | None = None) -> time:
    """Parse a slot time string.

    *time_format* is ``"12h"`` or ``"24h"`` when the endpoint's format is
    known; with ``None`` the format is detected from the presence of an
    AM/PM marker.
    """
    if raw is None:
        raise TimeFormatError("Missing slot time")
    text = " ".join(raw.strip().upper().split())
    if time_format is None:
        time_format = TIME_FORMAT_12H if text.endswith(("AM", "PM")) else TIME_FORMAT_24H
    try:
        formats = _TIME_FORMATS[time_format]
    except KeyError:
        raise ValueError(f"Unknown time format {time_format!r}") from None

    for fmt in formats:
        try:
            return datetime.strptime(text, fmt).time()
        except ValueError:
            continue
    raise TimeFormatError(f"Unrecognized slot time {raw!r}", value=raw, expected=time_format)


def format_display_time(value: time | datetime) -> str:
    return value.strftime(DISPLAY_TIME_FORMAT)


def parse_display_time(raw: str) -> time:
    return parse_slot_time(raw, TIME_FORMAT_12H)


def normalize_slot_time(raw: str, time_format: str | None = None) -> str:
    """Parse any accepted slot time and re-emit it as ``hh:mm AM/PM``."""
    return format_display_time(parse_slot_time(raw, time_format))


def parse_report_date(raw: str) -> datetime:
    """Parse the ``bookingDate`` field of a report item."""
    if not raw or not raw.strip():
        raise TimeFormatError("Missing booking date")
    text = raw.strip()

    for fmt in _REPORT_DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue

    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        raise TimeFormatError(f"Unrecognized booking date {raw!r}", value=raw) from None
    # Aware ISO strings keep their wall-clock value; the offset is dropped
    # rather than converted.
    return parsed.replace(tzinfo=None)


def parse_slot_range(raw: str) -> tuple[time, time]:
    """Split ``"HH:mm-HH:mm"`` into start and end times."""
    if not raw or raw.count("-") != 1:
        raise TimeFormatError(f"Unrecognized slot range {raw!r}", value=raw)
    start_raw, end_raw = (part.strip() for part in raw.split("-"))
    try:
        start = datetime.strptime(start_raw, _SLOT_RANGE_TIME_FORMAT).time()
        end = datetime.strptime(end_raw, _SLOT_RANGE_TIME_FORMAT).time()
    except ValueError:
        raise TimeFormatError(f"Unrecognized slot range {raw!r}", value=raw) from None
    return start, end


def combine_window(day: date, start: time, end: time) -> tuple[datetime, datetime]:
    start_dt = datetime.combine(day, start)
    end_dt = datetime.combine(day, end)
    if end_dt <= start_dt:
        # e.g. "23:00-00:30" ends on the following day
        end_dt += timedelta(days=1)
    return start_dt, end_dt


def parse_booking_window(booking_date: str, booking_slots: str) -> BookingWindow:
    """Combine a report's date and slot range into start/end timestamps."""
    booked_at = parse_report_date(booking_date)
    start, end = parse_slot_range(booking_slots)
    start_dt, end_dt = combine_window(booked_at.date(), start, end)
    return BookingWindow(start=start_dt, end=end_dt, booked_at=booked_at)
