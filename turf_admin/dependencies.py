import logging
from datetime import UTC, date, datetime, timedelta
from typing import Annotated

import jwt
from fastapi import Cookie, Depends, HTTPException, Query, Response, status

from turf_admin.config import (
    ENVIRONMENT,
    JWT_ALGORITHM,
    JWT_SECRET,
    SESSION_COOKIE_NAME,
    SESSION_EXPIRY_HOURS,
)
from turf_admin.errors import AuthenticationError
from turf_admin.models import PaginationMeta
from turf_admin.services.admin import TurfAdminService
from turf_admin.session import AdminSession, require_session

logger = logging.getLogger(__name__)


# ── Pagination ─────────────────────────────────────────────────────────────


class PaginationParams:
    def __init__(
        self,
        page: Annotated[int, Query(ge=1, description="Page number (1-indexed)")] = 1,
        page_size: Annotated[int, Query(ge=1, le=100, description="Items per page")] = 20,
    ):
        self.page = page
        self.page_size = page_size

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size


def paginate(items: list, pagination: PaginationParams, response_cls: type):
    total = len(items)
    start = pagination.offset
    end = start + pagination.page_size
    return response_cls(
        items=items[start:end],
        meta=PaginationMeta(
            page=pagination.page,
            page_size=pagination.page_size,
            total_items=total,
            total_pages=max(1, -(-total // pagination.page_size)),
        ),
    )


# ── Report date range ──────────────────────────────────────────────────────


class DateRangeParams:
    """``from``/``to`` query dates, defaulting to the current month so far."""

    def __init__(
        self,
        date_from: Annotated[date | None, Query(alias="from", description="First day (yyyy-mm-dd)")] = None,
        date_to: Annotated[date | None, Query(alias="to", description="Last day (yyyy-mm-dd)")] = None,
    ):
        today = date.today()
        self.date_to = date_to or today
        self.date_from = date_from or self.date_to.replace(day=1)
        if self.date_from > self.date_to:
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                detail="'from' must not be after 'to'",
            )


# ── JWT / Session ──────────────────────────────────────────────────────────


def create_session_token(session: AdminSession) -> str:
    """Sign the admin session, upstream token included, into a JWT."""
    now = datetime.now(UTC)
    payload = {
        "sub": session.email,
        "tok": session.token,
        "iat": now,
        "exp": now + timedelta(hours=SESSION_EXPIRY_HOURS),
    }
    return jwt.encode(payload, JWT_SECRET, algorithm=JWT_ALGORITHM)


def set_session_cookie(response: Response, session: AdminSession) -> None:
    response.set_cookie(
        key=SESSION_COOKIE_NAME,
        value=create_session_token(session),
        httponly=True,
        samesite="lax",
        secure=ENVIRONMENT == "production",
        max_age=SESSION_EXPIRY_HOURS * 3600,
    )


def clear_session_cookie(response: Response) -> None:
    response.delete_cookie(SESSION_COOKIE_NAME)


def decode_session_token(value: str) -> AdminSession:
    try:
        payload = jwt.decode(value, JWT_SECRET, algorithms=[JWT_ALGORITHM])
    except jwt.ExpiredSignatureError:
        raise AuthenticationError("Session expired. Please login again.") from None
    except jwt.PyJWTError:
        raise AuthenticationError("Invalid session. Please login again.") from None

    email: str | None = payload.get("sub")
    if not email:
        raise AuthenticationError("Invalid session payload. Please login again.")

    return AdminSession(
        email=email,
        token=payload.get("tok"),
        created_at=datetime.fromtimestamp(payload.get("iat", 0), tz=UTC),
    )


async def get_admin_session(
    session: Annotated[str | None, Cookie()] = None,
) -> AdminSession:
    admin = decode_session_token(session) if session is not None else None
    # A session without an upstream token is useless for every call.
    return require_session(admin)


AdminSessionDep = Annotated[AdminSession, Depends(get_admin_session)]


# ── Service ────────────────────────────────────────────────────────────────

_service: TurfAdminService | None = None


def set_turf_service(service: TurfAdminService | None) -> None:
    global _service
    _service = service


def get_turf_service() -> TurfAdminService:
    if _service is None:
        raise RuntimeError("TurfAdminService is not initialised; is the app lifespan running?")
    return _service


TurfServiceDep = Annotated[TurfAdminService, Depends(get_turf_service)]
