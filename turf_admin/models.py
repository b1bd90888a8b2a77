"""Pydantic models for the Turf Admin API."""

from __future__ import annotations

from datetime import date, datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, EmailStr, Field, computed_field, field_validator

PLACEHOLDER_IMAGE_URL = "https://placehold.co/100x80.png"


class SlotStatus(str, Enum):
    AVAILABLE = "available"
    BOOKED = "booked"
    BLOCKED_BY_ADMIN = "blocked_by_admin"
    UNAVAILABLE = "unavailable"


class BookingStatus(str, Enum):
    CONFIRMED = "confirmed"
    PENDING_PAYMENT = "pending_payment"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    UNKNOWN = "unknown"


class ReportType(str, Enum):
    ACTIVE = "active"
    CANCELLED = "cancelled"


# ── Turfs ─────────────────────────────────────────────────────────────────


class TurfSummary(BaseModel):
    """A turf as listed by the API."""
    id: str = Field(..., description="Turf identifier")
    name: str = Field(..., description="Display name")
    address: str | None = Field(None, description="Street address")
    city: str | None = None
    state: str | None = None
    pin_code: str | None = None
    turf_type: str | None = None
    contact_no: str | None = None
    alt_contact_no: str | None = None
    email: str | None = None
    raw_image: str | None = Field(None, description="Image reference exactly as sent by the API")

    @computed_field  # type: ignore[prop-decorator]
    @property
    def location(self) -> str:
        parts = [p for p in (self.address, self.city) if p]
        return ", ".join(parts) or "N/A"

    @computed_field  # type: ignore[prop-decorator]
    @property
    def image_url(self) -> str:
        return self.raw_image or PLACEHOLDER_IMAGE_URL


# ── Slots ─────────────────────────────────────────────────────────────────


class TimeSlot(BaseModel):
    """A slot on one turf and date, normalized for display."""
    id: str = Field(..., description="Slot identifier")
    turf_id: str = Field(..., description="Owning turf identifier")
    slot_date: date = Field(..., description="Calendar date of the slot")
    start_time: str = Field(..., description="Start time, hh:mm AM/PM")
    end_time: str = Field(..., description="End time, hh:mm AM/PM")
    status: SlotStatus
    price: str | None = Field(None, description="Price as sent by the API")
    day_of_week: str | None = None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def price_value(self) -> float:
        try:
            return float(self.price) if self.price else 0.0
        except ValueError:
            return 0.0


class SlotChange(BaseModel):
    """A queued local status change that has not been saved yet."""
    slot_id: str
    from_status: SlotStatus
    to_status: SlotStatus


class SlotBoard(BaseModel):
    """Slots for a (turf, date) with pending changes applied."""
    turf_id: str
    slot_date: date
    slots: list[TimeSlot]
    pending: list[SlotChange] = Field(default_factory=list)


# ── Bookings ──────────────────────────────────────────────────────────────


class Booking(BaseModel):
    """A booking from an active or cancelled report."""
    id: str
    turf_id: str
    turf_name: str | None = None
    customer_name: str | None = None
    start_time: datetime = Field(..., description="Naive local start timestamp")
    end_time: datetime = Field(..., description="Naive local end timestamp")
    status: BookingStatus
    total_price: float = 0.0
    booked_at: datetime
    payment_status: str | None = Field(None, description="Payment status string from the API")


class PaymentRecord(BaseModel):
    payment_id: str
    payment_mode: str | None = None
    transaction_id: str | None = None
    paid_amount: float = 0.0
    discount_amount: float = 0.0
    payment_date: datetime | None = None


class BookingDetail(BaseModel):
    booking_id: str
    customer_name: str | None = None
    email: str | None = None
    mobile_no: str | None = None
    turf_name: str | None = None
    turf_address: str | None = None
    day_booked: str | None = None
    booking_slots: str | None = None
    total_amount: float = 0.0
    balance_amount: float = 0.0
    payments: list[PaymentRecord] = Field(default_factory=list)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def advance_amount(self) -> float:
        return round(self.total_amount - self.balance_amount, 2)


_AMOUNT_PATTERN = r"^(\d+\.?\d*|\.\d+)?$"


class CreateBookingRequest(BaseModel):
    """Customer and payment details for booking the selected slots."""
    turf_id: str
    booking_date: date
    slot_ids: list[str] = Field(..., min_length=1, description="Selected slot identifiers")
    full_name: str = Field(..., min_length=1)
    email: EmailStr | None = Field(None, description="Optional customer email")
    mobile_number: str = Field(..., min_length=10, pattern=r"^\d+$")
    alt_mobile_number: str | None = Field(None, pattern=r"^\d*$")
    advance_amount: str = Field(..., min_length=1, pattern=_AMOUNT_PATTERN)
    discount_amount: str = Field("0", pattern=_AMOUNT_PATTERN)
    payment_mode: str = Field("Cash", min_length=1)
    transaction_id: str = Field("N/A", min_length=1)
    payment_status: str = Field("Pending", min_length=1)

    @field_validator("email", "alt_mobile_number", mode="before")
    @classmethod
    def _blank_to_none(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("slot_ids")
    @classmethod
    def _unique_slots(cls, value: list[str]) -> list[str]:
        seen: set[str] = set()
        for sid in value:
            if sid in seen:
                raise ValueError(f"Slot {sid} is selected more than once")
            seen.add(sid)
        return value


class CreateBookingResponse(BaseModel):
    message: str
    total_price: float
    final_amount: float
    slot_ids: list[str]


class PaymentUpdateRequest(BaseModel):
    """A further payment against an existing booking."""
    new_payment_amount: str = Field(..., min_length=1, pattern=_AMOUNT_PATTERN)
    discount_amount: str = Field("0", pattern=_AMOUNT_PATTERN)
    payment_mode: str = Field("Cash", min_length=1)
    transaction_id: str = Field("N/A", min_length=1)


# ── Reports / dashboard ───────────────────────────────────────────────────


class BookingSummary(BaseModel):
    total: int
    by_status: dict[BookingStatus, int]
    upcoming_7_days: int
    revenue: float


# ── Auth ──────────────────────────────────────────────────────────────────


class LoginRequest(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=6)


class AdminInfo(BaseModel):
    email: str
    logged_in_at: datetime


class AuthResponse(BaseModel):
    message: str
    user: AdminInfo


# ── Generic responses ─────────────────────────────────────────────────────


class PaginationMeta(BaseModel):
    page: int
    page_size: int
    total_items: int
    total_pages: int


class TurfListResponse(BaseModel):
    items: list[TurfSummary]
    meta: PaginationMeta


class BookingListResponse(BaseModel):
    items: list[Booking]
    meta: PaginationMeta


class MessageResponse(BaseModel):
    message: str


class Error(BaseModel):
    """Error response model."""
    error: str = Field(..., description="Error title")
    message: str = Field(..., description="Error message")
    details: dict[str, Any] | None = Field(None, description="Additional error details")


class HealthResponse(BaseModel):
    """Health check response."""
    status: str = Field(..., description="Health status")
    version: str
    timestamp: datetime = Field(..., description="Current timestamp")
