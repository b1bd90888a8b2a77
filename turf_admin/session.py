"""
Admin session – the explicit holder of the upstream bearer token.

Created by the login flow, carried between requests inside the signed
session cookie, and cleared at logout.  Everything else only reads it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime

from turf_admin.errors import AuthenticationError


@dataclass(frozen=True)
class AdminSession:
    email: str
    token: str | None
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def require_token(self) -> str:
        """Return the bearer token or abort with an authentication error."""
        if not self.token:
            raise AuthenticationError(
                "Authentication token not found. Please login again."
            )
        return self.token

    def auth_headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self.require_token()}"}


def require_session(session: AdminSession | None) -> AdminSession:
    """Guard for callers that may not have a session at all."""
    if session is None:
        raise AuthenticationError("Authentication token not found. Please login again.")
    session.require_token()
    return session
