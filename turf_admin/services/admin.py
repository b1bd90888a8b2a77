"""
Turf admin service – what the dashboard screens call.

Combines the turf API client with the slot/booking mappers.  This is the
only layer that knows about both the external API shape and our view
models.

Usage::

    client = TurfApiClient()
    service = TurfAdminService(client)
    session = await service.login("admin@example.com", "secret")
    turfs, meta = await service.list_turfs(session)
    board = await service.load_slots(session, turfs[0].id, date.today())
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Iterable
from datetime import date, datetime

from turf_admin.errors import ApiRejectedError, SlotNotFoundError, SlotNotMutableError
from turf_admin.models import (
    Booking,
    BookingDetail,
    BookingStatus,
    BookingSummary,
    CreateBookingRequest,
    CreateBookingResponse,
    PaginationMeta,
    PaymentUpdateRequest,
    ReportType,
    SlotBoard,
    SlotChange,
    SlotStatus,
    TurfSummary,
)
from turf_admin.services.booking_status import booking_detail_from_api, bookings_from_report
from turf_admin.services.slot_changes import SlotBoardStore, SlotChangeQueue
from turf_admin.services.slot_status import normalize_slots
from turf_admin.services.summary import summarize_bookings
from turf_admin.services.turf_api.api_models import (
    ApiBookingReportItem,
    ApiTurfItem,
    CreateBookingPayload,
    UpdateBookingPayload,
)
from turf_admin.services.turf_api.client import TurfApiClient
from turf_admin.services.turf_api.config import REQUEST_DATE_FORMAT, SLOTS_TIME_FORMAT
from turf_admin.session import AdminSession

logger = logging.getLogger(__name__)


def _money(value: float) -> str:
    return f"{value:.2f}"


def _amount(raw: str | None) -> float:
    return float(raw) if raw else 0.0


def turf_from_api(item: ApiTurfItem) -> TurfSummary:
    return TurfSummary(
        id=item.turfID,
        name=item.turfName,
        address=item.turfAddress or None,
        city=item.turfCity or None,
        state=item.turfState or None,
        pin_code=item.turfPinCode or None,
        turf_type=item.turfType or None,
        contact_no=item.turfContactNo or None,
        alt_contact_no=item.turfAltContactNo or None,
        email=item.turfEmail or None,
        raw_image=item.turfImage or None,
    )


class TurfAdminService:
    def __init__(
        self,
        client: TurfApiClient,
        boards: SlotBoardStore | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._client = client
        self._boards = boards or SlotBoardStore()
        # Naive local "now" – booking timestamps are naive local too.
        self._clock = clock

    @property
    def client(self) -> TurfApiClient:
        return self._client

    # ── Auth ──────────────────────────────────────────────────────────

    async def login(self, email: str, password: str) -> AdminSession:
        service_token = await self._client.get_service_token()
        user_token = await self._client.verify_user(service_token, email, password)
        logger.info("Admin %s logged in", email)
        return AdminSession(email=email, token=user_token)

    def logout(self, session: AdminSession) -> None:
        self._boards.drop(session.email)
        logger.info("Admin %s logged out", session.email)

    # ── Turfs ─────────────────────────────────────────────────────────

    async def list_turfs(
        self,
        session: AdminSession,
        page: int = 1,
        page_size: int | None = None,
    ) -> tuple[list[TurfSummary], PaginationMeta]:
        envelope = await self._client.get_turf_list(session, page=page, page_size=page_size)
        turfs = [turf_from_api(item) for item in envelope.data or []]
        size = envelope.pagesize or page_size or max(len(turfs), 1)
        total = envelope.totalitems if envelope.totalitems is not None else len(turfs)
        meta = PaginationMeta(
            page=envelope.currentpage or page,
            page_size=size,
            total_items=total,
            total_pages=envelope.totalpages or max(1, -(-total // size)),
        )
        return turfs, meta

    # ── Slots ─────────────────────────────────────────────────────────

    async def load_slots(self, session: AdminSession, turf_id: str, slot_date: date) -> SlotBoard:
        """Fetch slots for (turf, date) and start a fresh change board."""
        raw_slots = await self._client.get_available_slots(session, turf_id, slot_date)
        slots = normalize_slots(raw_slots, slot_date, SLOTS_TIME_FORMAT)
        queue = self._boards.replace(session.email, SlotChangeQueue(turf_id, slot_date, slots))
        logger.debug("Loaded %d slots for turf %s on %s", len(slots), turf_id, slot_date)
        return queue.board()

    def _board(self, session: AdminSession, turf_id: str) -> SlotChangeQueue:
        queue = self._boards.get(session.email, turf_id)
        if queue is None:
            raise SlotNotFoundError(
                f"No slots loaded for turf {turf_id}. Load the turf's slots first.",
                turf_id=turf_id,
            )
        return queue

    def block_slot(self, session: AdminSession, turf_id: str, slot_id: str) -> SlotBoard:
        queue = self._board(session, turf_id)
        queue.block(slot_id)
        return queue.board()

    def unblock_slot(self, session: AdminSession, turf_id: str, slot_id: str) -> SlotBoard:
        queue = self._board(session, turf_id)
        queue.unblock(slot_id)
        return queue.board()

    def pending_changes(self, session: AdminSession, turf_id: str) -> list[SlotChange]:
        return self._board(session, turf_id).pending()

    def discard_changes(self, session: AdminSession, turf_id: str) -> SlotBoard:
        queue = self._board(session, turf_id)
        queue.discard()
        return queue.board()

    async def save_changes(self, session: AdminSession, turf_id: str) -> SlotBoard:
        queue = self._board(session, turf_id)
        await queue.save(self._client, session)
        return queue.board()

    # ── Bookings ──────────────────────────────────────────────────────

    async def create_booking(
        self, session: AdminSession, request: CreateBookingRequest
    ) -> CreateBookingResponse:
        """Book the selected slots after checking they are still available.

        The availability check reads the slots directly and leaves the admin's
        board alone; once the booking is written the board (if it shows this
        turf and date) marks the slots booked without another round trip.
        """
        raw_slots = await self._client.get_available_slots(
            session, request.turf_id, request.booking_date
        )
        slots = {
            s.id: s for s in normalize_slots(raw_slots, request.booking_date, SLOTS_TIME_FORMAT)
        }

        selected = []
        for slot_id in request.slot_ids:
            slot = slots.get(slot_id)
            if slot is None:
                raise SlotNotFoundError(
                    f"Slot {slot_id} does not exist for this turf on {request.booking_date}.",
                    slot_id=slot_id,
                )
            if slot.status is not SlotStatus.AVAILABLE:
                raise SlotNotMutableError(
                    f"Slot {slot.start_time} - {slot.end_time} is no longer available.",
                    slot_id=slot_id,
                    status=slot.status.value,
                )
            selected.append(slot)

        total = sum(s.price_value for s in selected)
        discount = _amount(request.discount_amount)
        final = max(total - discount, 0.0)

        payload = CreateBookingPayload(
            turfID=request.turf_id,
            # The API expects every selected id in one comma-separated entry.
            slotID=[",".join(s.id for s in selected)],
            bookingDate=request.booking_date.strftime(REQUEST_DATE_FORMAT),
            fullName=request.full_name,
            email=str(request.email) if request.email else "",
            mobileNumber=request.mobile_number,
            altMobileNumber=request.alt_mobile_number or "",
            advanceAmount=_money(_amount(request.advance_amount)),
            discountAmount=_money(discount),
            finalAmount=_money(final),
            paymentMode=request.payment_mode,
            transactionID=request.transaction_id,
            paymentStatus=request.payment_status,
        )
        message = await self._client.create_booking(session, payload)
        logger.info(
            "Booked %d slot(s) on turf %s for %s (final %.2f)",
            len(selected),
            request.turf_id,
            request.booking_date,
            final,
        )
        queue = self._boards.get(session.email, request.turf_id, request.booking_date)
        if queue is not None:
            queue.mark_booked([s.id for s in selected])
        return CreateBookingResponse(
            message=message,
            total_price=round(total, 2),
            final_amount=round(final, 2),
            slot_ids=[s.id for s in selected],
        )

    async def booking_report(
        self,
        session: AdminSession,
        turf_id: str,
        date_from: date,
        date_to: date,
        report_type: ReportType,
    ) -> list[Booking]:
        items = await self._client.get_report(session, report_type, turf_id, date_from, date_to)
        return bookings_from_report(items, report_type, turf_id, self._clock())

    async def list_bookings(
        self,
        session: AdminSession,
        turf_id: str,
        date_from: date,
        date_to: date,
        statuses: Iterable[BookingStatus] | None = None,
    ) -> list[Booking]:
        """Active and cancelled bookings together.

        Both reports are requested concurrently.  A report the API answers
        with ``success: false`` (e.g. "No records found") counts as empty.  If
        one request fails the other is still returned; only when both fail is
        an error raised.
        """
        session.require_token()
        report_types = (ReportType.ACTIVE, ReportType.CANCELLED)
        results = await asyncio.gather(
            *(
                self._report_or_empty(session, rt, turf_id, date_from, date_to)
                for rt in report_types
            ),
            return_exceptions=True,
        )

        errors = [r for r in results if isinstance(r, BaseException)]
        if len(errors) == len(results):
            raise errors[0]
        for err in errors:
            if not isinstance(err, Exception):
                raise err

        now = self._clock()
        bookings: list[Booking] = []
        for report_type, result in zip(report_types, results):
            if isinstance(result, BaseException):
                logger.warning("%s report failed, showing the rest: %s", report_type.value, result)
                continue
            bookings.extend(bookings_from_report(result, report_type, turf_id, now))

        if statuses is not None:
            wanted = set(statuses)
            bookings = [b for b in bookings if b.status in wanted]
        bookings.sort(key=lambda b: b.start_time)
        return bookings

    async def _report_or_empty(
        self,
        session: AdminSession,
        report_type: ReportType,
        turf_id: str,
        date_from: date,
        date_to: date,
    ) -> list[ApiBookingReportItem]:
        try:
            return await self._client.get_report(session, report_type, turf_id, date_from, date_to)
        except ApiRejectedError as exc:
            logger.info("No %s bookings for turf %s: %s", report_type.value, turf_id, exc.message)
            return []

    async def booking_detail(self, session: AdminSession, booking_id: str) -> BookingDetail:
        item = await self._client.get_booking_details(session, booking_id)
        return booking_detail_from_api(item)

    async def record_payment(
        self,
        session: AdminSession,
        booking_id: str,
        request: PaymentUpdateRequest,
    ) -> BookingDetail:
        """Record a further payment against the booking's total amount."""
        detail = await self.booking_detail(session, booking_id)
        payload = UpdateBookingPayload(
            bookingID=booking_id,
            paymentMode=request.payment_mode,
            transactionID=request.transaction_id,
            advanceAmount=_money(_amount(request.new_payment_amount)),
            discountAmount=_money(_amount(request.discount_amount)),
            finalAmount=_money(detail.total_amount),
        )
        await self._client.update_booking(session, payload)
        logger.info("Recorded payment of %s on booking %s", payload.advanceAmount, booking_id)
        return await self.booking_detail(session, booking_id)

    # ── Dashboard ─────────────────────────────────────────────────────

    async def dashboard(
        self,
        session: AdminSession,
        turf_id: str,
        date_from: date,
        date_to: date,
    ) -> BookingSummary:
        bookings = await self.list_bookings(session, turf_id, date_from, date_to)
        return summarize_bookings(bookings, self._clock())
