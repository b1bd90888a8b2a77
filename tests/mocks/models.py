"""
Canned turf API payloads and sessions for tests.
"""

from __future__ import annotations

import json
from datetime import date, datetime

from turf_admin.session import AdminSession

FIXED_NOW = datetime(2025, 5, 1, 6, 0)
SLOT_DATE = date(2025, 5, 1)
TURF_ID = "101"

MOCK_SESSION = AdminSession(email="admin@example.com", token="user-token")
TOKENLESS_SESSION = AdminSession(email="admin@example.com", token=None)

# ── Auth ───────────────────────────────────────────────────────────────────

SERVICE_TOKEN_PAYLOAD = {"success": True, "message": "ok", "data": {"token": "service-token"}}
VERIFY_USER_PAYLOAD = {"success": True, "message": "ok", "data": {"token": "user-token"}}
VERIFY_USER_REJECTED_PAYLOAD = {"success": False, "message": "Invalid email or password", "data": None}

# ── Turfs ──────────────────────────────────────────────────────────────────

TURF_LIST_PAYLOAD = {
    "success": True,
    "message": "Turfs fetched",
    "data": [
        {
            "turfID": 101,
            "turfName": "Classic 7 Arena",
            "turfAddress": "12 Lake Road",
            "turfCity": "Pune",
            "turfState": "MH",
            "turfPinCode": "411001",
            "turfType": "Football",
            "turfContactNo": "9876543210",
            "turfImage": "https://img.example.com/arena.png",
        },
        {
            "turfID": 102,
            "turfName": "Rooftop Five",
            "turfAddress": "",
            "turfCity": "",
            "turfImage": "",
        },
    ],
    "currentpage": 1,
    "pagesize": 100,
    "totalpages": 1,
    "totalitems": 2,
}

# ── Slots ──────────────────────────────────────────────────────────────────

SLOTS_PAYLOAD = {
    "success": True,
    "message": "Slots fetched",
    "data": [
        {
            "turfID": 101,
            "slotID": "s1",
            "dayOfWeek": "Thursday",
            "startTime": "07:00 AM",
            "endTime": "07:30 AM",
            "price": "500",
            "slotStatus": "Available",
        },
        {
            "turfID": 101,
            "slotID": "s2",
            "dayOfWeek": "Thursday",
            "startTime": "07:30 AM",
            "endTime": "08:00 AM",
            "price": "500",
            "slotStatus": "Booked",
        },
        {
            "turfID": 101,
            "slotID": "s3",
            "dayOfWeek": "Thursday",
            "startTime": "08:00 AM",
            "endTime": "08:30 AM",
            "price": 650,
            "slotStatus": "available",
        },
    ],
}

NO_SLOTS_PAYLOAD = {"success": False, "message": "No slots available for this date", "data": None}

# ── Writes ─────────────────────────────────────────────────────────────────

WRITE_OK_PAYLOAD = {"success": True, "message": "Saved successfully", "data": None}
WRITE_REJECTED_PAYLOAD = {"success": False, "message": "Slot already booked", "data": None}

# ── Reports ────────────────────────────────────────────────────────────────

ACTIVE_REPORT_PAYLOAD = {
    "success": True,
    "message": "Report fetched",
    "data": [
        {
            "bookingID": "B1",
            "turfBooked": "Classic 7 Arena",
            "bookingPersonName": "Asha",
            "bookingDate": "5/1/2025 12:00:00 AM",
            "bookingSlots": "07:00-08:30",
            "amount": "1500",
            "paymentStatus": "Pending",
        },
        {
            "bookingID": "B2",
            "turfBooked": "Classic 7 Arena",
            "bookingPersonName": "Ravi",
            "bookingDate": "4/30/2025 12:00:00 AM",
            "bookingSlots": "18:00-19:00",
            "amount": 1000,
            "paymentStatus": "Done",
        },
        {
            "bookingID": "B3",
            "turfBooked": "Classic 7 Arena",
            "bookingPersonName": "Meera",
            "bookingDate": "2025-05-03",
            "bookingSlots": "23:00-00:30",
            "amount": "800",
            "paymentStatus": "Paid",
        },
    ],
}

CANCELLED_REPORT_PAYLOAD = {
    "success": True,
    "message": "Report fetched",
    "data": [
        {
            "bookingID": "C1",
            "turfBooked": "Classic 7 Arena",
            "bookingPersonName": "Kiran",
            "bookingDate": "5/2/2025 12:00:00 AM",
            "bookingSlots": "06:00-07:00",
            "amount": "700",
            "paymentStatus": "Done",
        },
    ],
}

# ── Booking details ────────────────────────────────────────────────────────

PAYMENT_HISTORY = [
    {
        "PaymentID": 1,
        "PaymentMode": "Cash",
        "TransactionID": "N/A",
        "PaidAmount": 500,
        "DiscountAmount": 0,
        "PaymentDate": "5/1/2025 09:15:00 AM",
    },
    {
        "PaymentID": 2,
        "PaymentMode": "UPI",
        "TransactionID": "UPI-778",
        "PaidAmount": "300.50",
        "DiscountAmount": "50",
        "PaymentDate": "2025-05-01T10:00:00",
    },
]

BOOKING_DETAIL_PAYLOAD = {
    "success": True,
    "message": "Details fetched",
    "data": [
        {
            "bookingID": "B1",
            "username": "Asha",
            "email": "asha@example.com",
            "mobileNo": "9876543210",
            "turfBooked": "Classic 7 Arena",
            "turfAddress": "12 Lake Road, Pune",
            "dayBooked": "Thursday",
            "bookingSlots": "07:00-08:30",
            "amount": "1500",
            "balanceAmount": "700",
            "paymentDetails": json.dumps(PAYMENT_HISTORY),
        }
    ],
}
