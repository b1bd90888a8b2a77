"""Tests for the error taxonomy and the session guard."""

import httpx
import pytest

from turf_admin.errors import ApiStatusError, AuthenticationError, classify_transport_error
from turf_admin.session import AdminSession, require_session


class TestClassifyTransportError:
    def test_connect_error(self):
        err = classify_transport_error(httpx.ConnectError("boom"), "Load turfs")
        assert err.kind == "network"
        assert err.message.startswith("Load turfs: Network error")

    def test_timeout(self):
        assert classify_transport_error(httpx.ReadTimeout("slow")).kind == "network"

    def test_failed_to_fetch_message(self):
        assert classify_transport_error(httpx.TransportError("TypeError: Failed to fetch")).kind == "network"

    def test_other_transport_error(self):
        err = classify_transport_error(httpx.UnsupportedProtocol("bad scheme"))
        assert err.kind == "generic"
        assert err.message == "bad scheme"
        assert err.hint


class TestApiStatusError:
    def test_message(self):
        err = ApiStatusError(404, "Not Found", "Load slots")
        assert err.message == "Load slots: API Error: 404 - Not Found"
        assert err.status_code == 502
        assert err.details == {"upstream_status": 404}

    def test_body_truncated(self):
        err = ApiStatusError(500, "y" * 500)
        assert len(err.body_preview) == 100


class TestSession:
    def test_missing_session(self):
        with pytest.raises(AuthenticationError):
            require_session(None)

    def test_missing_token(self):
        with pytest.raises(AuthenticationError, match="Authentication token not found"):
            require_session(AdminSession(email="a@example.com", token=""))

    def test_headers(self):
        session = require_session(AdminSession(email="a@example.com", token="t"))
        assert session.auth_headers() == {"Authorization": "Bearer t"}
