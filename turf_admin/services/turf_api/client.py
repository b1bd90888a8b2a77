"""
Low-level HTTP client for the turf booking API.

Handles request construction, bearer auth, and JSON ↔ Pydantic parsing.
Every authenticated call checks the session token *before* touching the
network, so a missing token never produces a request.

A single instance is shared across the app lifetime.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Any

import httpx
from pydantic import ValidationError

from turf_admin.config import (
    TURF_API_BASE_URL,
    TURF_API_CLIENT_ID,
    TURF_API_CLIENT_SECRET,
    TURF_API_PAGE_SIZE,
    TURF_API_TIMEOUT,
)
from turf_admin.errors import (
    ApiRejectedError,
    ApiStatusError,
    AuthenticationError,
    MalformedResponseError,
    classify_transport_error,
)
from turf_admin.models import ReportType
from turf_admin.services.turf_api.api_models import (
    ApiBookingDetailItem,
    ApiBookingReportItem,
    ApiSlotItem,
    ApiTokenData,
    ApiTurfItem,
    CreateBookingPayload,
    Envelope,
    UpdateBookingPayload,
    UpdateSlotStatusPayload,
)
from turf_admin.services.turf_api.config import (
    ACTIVE_REPORTS_PATH,
    AVAILABLE_SLOTS_PATH,
    BOOKING_DETAILS_PATH,
    CANCELLED_REPORTS_PATH,
    CREATE_BOOKING_PATH,
    DEFAULT_HEADERS,
    NO_SLOTS_MESSAGE,
    REQUEST_DATE_FORMAT,
    TOKEN_PATH,
    TURF_LIST_PATH,
    UPDATE_BOOKING_PATH,
    UPDATE_SLOT_STATUS_PATH,
    VERIFY_USER_PATH,
)
from turf_admin.session import AdminSession

logger = logging.getLogger(__name__)

_REPORT_PATHS: dict[ReportType, str] = {
    ReportType.ACTIVE: ACTIVE_REPORTS_PATH,
    ReportType.CANCELLED: CANCELLED_REPORTS_PATH,
}


class TurfApiClient:
    """Async HTTP client for the turf booking API."""

    def __init__(
        self,
        base_url: str = TURF_API_BASE_URL,
        timeout: float = TURF_API_TIMEOUT,
        page_size: int = TURF_API_PAGE_SIZE,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._page_size = page_size
        self._client = httpx.AsyncClient(
            base_url=base_url,
            headers=DEFAULT_HEADERS,
            timeout=timeout,
            transport=transport,
        )

    async def close(self) -> None:
        await self._client.aclose()

    # ── Plumbing ──────────────────────────────────────────────────────

    async def _request(
        self,
        method: str,
        path: str,
        *,
        operation: str,
        headers: dict[str, str] | None = None,
        params: dict[str, Any] | None = None,
        json: Any = None,
    ) -> Any:
        logger.debug("%s %s params=%s", method, path, params)
        try:
            resp = await self._client.request(
                method, path, params=params, json=json, headers=headers
            )
        except httpx.TransportError as exc:
            error = classify_transport_error(exc, operation)
            logger.warning("%s failed (%s): %s", operation, error.kind, exc)
            raise error from exc

        if resp.is_error:
            logger.warning("%s failed: HTTP %d", operation, resp.status_code)
            raise ApiStatusError(resp.status_code, resp.text or resp.reason_phrase, operation)

        try:
            return resp.json()
        except ValueError:
            logger.error("%s returned a non-JSON body: %.200s", operation, resp.text)
            raise MalformedResponseError(
                f"{operation}: the API returned an unreadable response."
            ) from None

    @staticmethod
    def _envelope(payload: Any, data_type: Any, operation: str) -> Envelope:
        try:
            return Envelope[data_type].model_validate(payload)
        except ValidationError as exc:
            logger.error("%s returned an unexpected envelope: %s", operation, exc)
            raise MalformedResponseError(
                f"{operation}: the API response did not have the expected shape."
            ) from exc

    @staticmethod
    def _ensure_success(envelope: Envelope, operation: str) -> None:
        if not envelope.success:
            message = envelope.message or f"{operation} was not successful."
            logger.warning("%s rejected: %s", operation, message)
            raise ApiRejectedError(message)

    def _paging(self, page: int = 1, page_size: int | None = None) -> dict[str, int]:
        return {"page": page, "pageSize": page_size or self._page_size}

    async def _post_all_pages(
        self,
        path: str,
        data_type: Any,
        *,
        operation: str,
        headers: dict[str, str],
        body: dict[str, Any],
        empty_message: str | None = None,
    ) -> list[Any]:
        """POST a paged list endpoint and follow ``totalpages`` to the end.

        An envelope rejected with ``empty_message`` ends the listing with
        whatever was collected so far.
        """
        items: list[Any] = []
        page = 1
        while True:
            payload = await self._request(
                "POST",
                path,
                operation=operation,
                headers=headers,
                params=self._paging(page),
                json=body,
            )
            envelope = self._envelope(payload, data_type, operation)
            if (
                not envelope.success
                and empty_message
                and empty_message in (envelope.message or "").lower()
            ):
                logger.info("%s: %s", operation, envelope.message)
                return items
            self._ensure_success(envelope, operation)
            items.extend(envelope.data or [])

            total_pages = envelope.totalpages or 1
            # A page without rows ends the listing even if totalpages says otherwise.
            if page >= total_pages or not envelope.data:
                return items
            page += 1
            logger.debug("%s: fetching page %d of %d", operation, page, total_pages)

    # ── Auth/GetToken + Auth/VerifyUser ───────────────────────────────

    async def get_service_token(self) -> str:
        """First half of the login handshake: obtain a service token."""
        payload = await self._request(
            "POST",
            TOKEN_PATH,
            operation="Get service token",
            json={"clientID": TURF_API_CLIENT_ID, "clientSecret": TURF_API_CLIENT_SECRET},
        )
        return self._token_from(payload, "Get service token")

    async def verify_user(self, service_token: str, email: str, password: str) -> str:
        """Second half: verify admin credentials and receive the user token."""
        if not service_token:
            raise AuthenticationError("Service token missing; cannot verify credentials.")
        payload = await self._request(
            "POST",
            VERIFY_USER_PATH,
            operation="Verify user",
            headers={"Authorization": f"Bearer {service_token}"},
            json={"email": email, "password": password},
        )
        return self._token_from(payload, "Verify user")

    def _token_from(self, payload: Any, operation: str) -> str:
        envelope = self._envelope(payload, Any, operation)
        if not envelope.success:
            raise AuthenticationError(envelope.message or "Invalid email or password.")
        data = envelope.data
        if isinstance(data, list):
            data = data[0] if data else None
        if isinstance(data, str) and data:
            return data
        try:
            return ApiTokenData.model_validate(data).token
        except ValidationError:
            raise MalformedResponseError(f"{operation}: no token in the API response.") from None

    # ── Turf/GetTurfList ──────────────────────────────────────────────

    async def get_turf_list(
        self,
        session: AdminSession,
        page: int = 1,
        page_size: int | None = None,
    ) -> Envelope[list[ApiTurfItem]]:
        headers = session.auth_headers()
        payload = await self._request(
            "GET",
            TURF_LIST_PATH,
            operation="Load turfs",
            headers=headers,
            params=self._paging(page, page_size),
        )
        envelope = self._envelope(payload, list[ApiTurfItem], "Load turfs")
        self._ensure_success(envelope, "Load turfs")
        return envelope

    # ── Turf/GetAvailableSlots ────────────────────────────────────────

    async def get_available_slots(
        self,
        session: AdminSession,
        turf_id: str,
        booking_date: date,
    ) -> list[ApiSlotItem]:
        headers = session.auth_headers()
        return await self._post_all_pages(
            AVAILABLE_SLOTS_PATH,
            list[ApiSlotItem],
            operation="Load slots",
            headers=headers,
            body={"turfID": turf_id, "bookingDate": booking_date.strftime(REQUEST_DATE_FORMAT)},
            empty_message=NO_SLOTS_MESSAGE,
        )

    # ── Turf/CreateBooking, Turf/UpdateBooking, Turf/UpdateSlotStatus ─

    async def create_booking(self, session: AdminSession, payload: CreateBookingPayload) -> str:
        return await self._post_write(session, CREATE_BOOKING_PATH, payload, "Create booking")

    async def update_booking(self, session: AdminSession, payload: UpdateBookingPayload) -> str:
        return await self._post_write(session, UPDATE_BOOKING_PATH, payload, "Update booking")

    async def update_slot_status(
        self, session: AdminSession, payload: UpdateSlotStatusPayload
    ) -> str:
        return await self._post_write(session, UPDATE_SLOT_STATUS_PATH, payload, "Save slot changes")

    async def _post_write(self, session: AdminSession, path: str, body: Any, operation: str) -> str:
        headers = session.auth_headers()
        payload = await self._request(
            "POST", path, operation=operation, headers=headers, json=body.model_dump()
        )
        envelope = self._envelope(payload, Any, operation)
        self._ensure_success(envelope, operation)
        data = envelope.data
        if isinstance(data, str) and data:
            return data
        return envelope.message or f"{operation} succeeded."

    # ── Reports/GetActiveReports, Reports/GetCancelledReports ─────────

    async def get_report(
        self,
        session: AdminSession,
        report_type: ReportType,
        turf_id: str,
        date_from: date,
        date_to: date,
    ) -> list[ApiBookingReportItem]:
        headers = session.auth_headers()
        return await self._post_all_pages(
            _REPORT_PATHS[report_type],
            list[ApiBookingReportItem],
            operation=f"Load {report_type.value} report",
            headers=headers,
            body={
                "turfID": turf_id,
                "fromDate": date_from.strftime(REQUEST_DATE_FORMAT),
                "toDate": date_to.strftime(REQUEST_DATE_FORMAT),
            },
        )

    # ── Reports/GetBookingDetails ─────────────────────────────────────

    async def get_booking_details(
        self, session: AdminSession, booking_id: str
    ) -> ApiBookingDetailItem:
        headers = session.auth_headers()
        payload = await self._request(
            "GET",
            BOOKING_DETAILS_PATH,
            operation="Load booking details",
            headers=headers,
            params={"bookingID": booking_id},
        )
        envelope = self._envelope(payload, Any, "Load booking details")
        self._ensure_success(envelope, "Load booking details")
        data = envelope.data
        if isinstance(data, list):
            data = data[0] if data else None
        if not data:
            raise ApiRejectedError(f"No details available for booking {booking_id}.")
        try:
            return ApiBookingDetailItem.model_validate(data)
        except ValidationError as exc:
            logger.error("Booking details for %s had an unexpected shape: %s", booking_id, exc)
            raise MalformedResponseError(
                "Load booking details: the API response did not have the expected shape."
            ) from exc
