"""
Turf API integration configuration.

Endpoint paths and the request/response conventions of the external
turf booking API.  The base URL itself comes from turf_admin.config.
"""

from __future__ import annotations

# ── API endpoints (relative to TURF_API_BASE_URL) ─────────────────────────

TOKEN_PATH = "/Auth/GetToken"
VERIFY_USER_PATH = "/Auth/VerifyUser"

TURF_LIST_PATH = "/Turf/GetTurfList"
AVAILABLE_SLOTS_PATH = "/Turf/GetAvailableSlots"
CREATE_BOOKING_PATH = "/Turf/CreateBooking"
UPDATE_BOOKING_PATH = "/Turf/UpdateBooking"
UPDATE_SLOT_STATUS_PATH = "/Turf/UpdateSlotStatus"

ACTIVE_REPORTS_PATH = "/Reports/GetActiveReports"
CANCELLED_REPORTS_PATH = "/Reports/GetCancelledReports"
BOOKING_DETAILS_PATH = "/Reports/GetBookingDetails"

# ── Wire formats ──────────────────────────────────────────────────────────

# Dates in request bodies
REQUEST_DATE_FORMAT = "%Y-%m-%d"

# Slot times as sent by GetAvailableSlots ("07:00 AM").
SLOTS_TIME_FORMAT = "12h"

# GetAvailableSlots answers success=false with this message for empty days.
NO_SLOTS_MESSAGE = "no slots available"

# Status strings accepted by UpdateSlotStatus
SLOT_STATUS_BLOCKED = "Blocked"
SLOT_STATUS_AVAILABLE = "Available"

# ── HTTP defaults ─────────────────────────────────────────────────────────

DEFAULT_HEADERS: dict[str, str] = {
    "User-Agent": "TurfAdmin/0.1",
    "Accept": "*/*",
}
