"""
Slot status normalizer.

Turns a raw ``GetAvailableSlots`` record into a display-ready ``TimeSlot``.
Only an explicit "available" status makes a slot bookable; any other
string – including empty or unknown ones – maps to booked so that an
unexpected state never shows up as free.
"""

from __future__ import annotations

from datetime import date

from turf_admin.models import SlotStatus, TimeSlot
from turf_admin.services.timeparse import normalize_slot_time
from turf_admin.services.turf_api.api_models import ApiSlotItem

_AVAILABLE = "available"


def map_slot_status(raw_status: str | None) -> SlotStatus:
    if raw_status is not None and raw_status.strip().lower() == _AVAILABLE:
        return SlotStatus.AVAILABLE
    return SlotStatus.BOOKED


def normalize_slot(
    raw: ApiSlotItem,
    slot_date: date,
    time_format: str | None = None,
) -> TimeSlot:
    """Build a ``TimeSlot`` from an API slot record.

    Raises ``TimeFormatError`` when a start/end time cannot be parsed.
    """
    return TimeSlot(
        id=raw.slotID,
        turf_id=raw.turfID,
        slot_date=slot_date,
        start_time=normalize_slot_time(raw.startTime, time_format),
        end_time=normalize_slot_time(raw.endTime, time_format),
        status=map_slot_status(raw.slotStatus),
        price=raw.price or None,
        day_of_week=raw.dayOfWeek or None,
    )


def normalize_slots(
    raw_slots: list[ApiSlotItem],
    slot_date: date,
    time_format: str | None = None,
) -> list[TimeSlot]:
    return [normalize_slot(raw, slot_date, time_format) for raw in raw_slots]
