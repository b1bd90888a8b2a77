"""
Pydantic models that mirror the turf API response shapes.

These are *internal* – the rest of the app never imports them directly.
The mappers in turf_admin.services translate them into turf_admin.models.
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict

T = TypeVar("T")


class _ApiModel(BaseModel):
    # IDs and amounts arrive as strings from some endpoints and numbers from
    # others.
    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)


class Envelope(BaseModel, Generic[T]):
    """``{success, message, data}`` wrapper shared by every endpoint.

    List endpoints add paging fields; they are optional because the auth and
    write endpoints leave them out.
    """
    model_config = ConfigDict(extra="ignore")

    success: bool
    message: str | None = None
    data: T | None = None
    requestid: str | None = None
    statuscode: int | None = None
    errors: Any = None
    currentpage: int | None = None
    pagesize: int | None = None
    totalpages: int | None = None
    totalitems: int | None = None


# ── Turf/GetTurfList ──────────────────────────────────────────────────────

class ApiTurfItem(_ApiModel):
    turfID: str
    turfName: str
    turfAddress: str | None = None
    turfCity: str | None = None
    turfState: str | None = None
    turfPinCode: str | None = None
    turfType: str | None = None
    turfContactNo: str | None = None
    turfAltContactNo: str | None = None
    turfEmail: str | None = None
    turfImage: str | None = None


# ── Turf/GetAvailableSlots ────────────────────────────────────────────────

class ApiSlotItem(_ApiModel):
    turfID: str
    slotID: str
    dayOfWeek: str | None = None
    startTime: str
    endTime: str
    price: str | None = None
    slotStatus: str | None = None


# ── Reports/GetActiveReports, Reports/GetCancelledReports ─────────────────

class ApiBookingReportItem(_ApiModel):
    bookingID: str
    turfBooked: str | None = None
    bookingPersonName: str | None = None
    bookingDate: str  # "M/d/yyyy hh:mm:ss AM" or ISO
    bookingSlots: str  # "HH:mm-HH:mm"
    amount: str | None = None
    paymentStatus: str | None = None


# ── Reports/GetBookingDetails ─────────────────────────────────────────────

class ApiPaymentDetail(_ApiModel):
    """One entry of the JSON-encoded ``paymentDetails`` string."""
    PaymentID: str
    PaymentMode: str | None = None
    TransactionID: str | None = None
    PaidAmount: float = 0.0
    DiscountAmount: float = 0.0
    PaymentDate: str | None = None


class ApiBookingDetailItem(_ApiModel):
    bookingID: str
    username: str | None = None
    email: str | None = None
    mobileNo: str | None = None
    turfBooked: str | None = None
    turfAddress: str | None = None
    dayBooked: str | None = None
    bookingSlots: str | None = None
    amount: str | None = None
    balanceAmount: str | None = None
    paymentDetails: str | None = None  # JSON array encoded as a string


# ── Auth/GetToken, Auth/VerifyUser ────────────────────────────────────────

class ApiTokenData(_ApiModel):
    token: str


# ── Request bodies ────────────────────────────────────────────────────────

class CreateBookingPayload(BaseModel):
    turfID: str
    slotID: list[str]
    bookingDate: str  # "yyyy-MM-dd"
    fullName: str
    email: str
    mobileNumber: str
    altMobileNumber: str
    advanceAmount: str
    discountAmount: str
    finalAmount: str
    paymentMode: str
    transactionID: str
    paymentStatus: str


class UpdateBookingPayload(BaseModel):
    bookingID: str
    paymentMode: str
    transactionID: str
    advanceAmount: str
    discountAmount: str
    finalAmount: str


class UpdateSlotStatusPayload(BaseModel):
    turfID: str
    bookingDate: str
    slotIDs: list[str]
    slotStatus: str  # "Blocked" or "Available"
