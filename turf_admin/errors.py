"""
Error taxonomy for the turf admin service.

Every failure the dashboard can show carries a short ``title`` (the toast
heading) and a ``message`` (the toast body).  The FastAPI exception handlers
in ``turf_admin.main`` render these as ``Error`` payloads.
"""

from __future__ import annotations

from typing import Any

import httpx

# Upstream bodies are echoed back to the admin, but only this much of them.
_BODY_PREVIEW_CHARS = 100

# Fragments of transport error messages that point at connectivity trouble
# (DNS, refused connections, TLS, proxies) rather than a bug on our side.
_NETWORK_HINTS = (
    "failed to fetch",
    "connect",
    "connection",
    "name or service not known",
    "name resolution",
    "nodename nor servname",
    "refused",
    "unreachable",
    "timed out",
    "ssl",
    "proxy",
    "cors",
)


class TurfAdminError(Exception):
    """Base class for errors surfaced to the admin."""

    title = "Error"
    status_code = 500

    def __init__(self, message: str, **details: Any) -> None:
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        return self.message


class AuthenticationError(TurfAdminError):
    """No usable session/token – the operation is aborted before any I/O."""

    title = "Authentication Error"
    status_code = 401


class ApiStatusError(TurfAdminError):
    """The upstream API answered with a non-success HTTP status."""

    title = "API Error"
    status_code = 502

    def __init__(self, status: int, body: str, operation: str = "") -> None:
        self.upstream_status = status
        self.body_preview = (body or "")[:_BODY_PREVIEW_CHARS]
        prefix = f"{operation}: " if operation else ""
        super().__init__(
            f"{prefix}API Error: {status} - {self.body_preview}",
            upstream_status=status,
        )


class NetworkError(TurfAdminError):
    """The request never got a response (DNS, refused connection, timeout...)."""

    title = "Network Error"
    status_code = 503

    def __init__(self, message: str, kind: str, hint: str) -> None:
        self.kind = kind
        self.hint = hint
        super().__init__(message, kind=kind, hint=hint)


class MalformedResponseError(TurfAdminError):
    """The upstream body could not be decoded into the expected envelope."""

    title = "Unexpected Response"
    status_code = 502


class ApiRejectedError(TurfAdminError):
    """The upstream envelope came back with ``success: false``."""

    title = "Request Rejected"
    status_code = 422


class TimeFormatError(TurfAdminError, ValueError):
    """A date or time string from the API does not match any known format."""

    title = "Invalid Date/Time"
    status_code = 502


class SlotNotFoundError(TurfAdminError):
    title = "Slot Not Found"
    status_code = 404


class SlotNotMutableError(TurfAdminError):
    """Only available and admin-blocked slots may be toggled locally."""

    title = "Slot Not Editable"
    status_code = 409


def classify_transport_error(exc: httpx.TransportError, operation: str = "") -> NetworkError:
    """Turn an httpx transport failure into a ``NetworkError`` with a hint.

    Connect/timeout errors are always treated as network problems; anything
    else is classified by looking at the error message.
    """
    text = str(exc) or exc.__class__.__name__
    prefix = f"{operation}: " if operation else ""

    is_network = isinstance(exc, (httpx.ConnectError, httpx.TimeoutException, httpx.ProxyError))
    if not is_network:
        lowered = text.lower()
        is_network = any(fragment in lowered for fragment in _NETWORK_HINTS)

    if is_network:
        return NetworkError(
            f"{prefix}Network error reaching the turf API. The API server may be "
            "down or unreachable from here.",
            kind="network",
            hint="Check connectivity and TURF_API_BASE_URL, then try again.",
        )
    return NetworkError(
        f"{prefix}{text}",
        kind="generic",
        hint="Try again; if the problem persists check the service logs.",
    )
