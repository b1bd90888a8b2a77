"""Tests for the /api/auth endpoints and the session cookie."""

from datetime import UTC, datetime, timedelta

import jwt

from tests.mocks.models import VERIFY_USER_REJECTED_PAYLOAD
from turf_admin.config import JWT_ALGORITHM, JWT_SECRET
from turf_admin.dependencies import create_session_token, decode_session_token
from turf_admin.services.turf_api.config import TOKEN_PATH, TURF_LIST_PATH, VERIFY_USER_PATH
from turf_admin.session import AdminSession


def _login(client, email="admin@example.com", password="secret1"):
    return client.post("/api/auth/login", json={"email": email, "password": password})


class TestLogin:
    def test_login_success_sets_cookie(self, unauthed_client, fake_api):
        resp = _login(unauthed_client)
        assert resp.status_code == 200
        data = resp.json()
        assert data["message"] == "Login successful"
        assert data["user"]["email"] == "admin@example.com"
        assert "session" in resp.cookies

        assert len(fake_api.calls_to(TOKEN_PATH)) == 1
        assert len(fake_api.calls_to(VERIFY_USER_PATH)) == 1

    def test_cookie_carries_upstream_token(self, unauthed_client, fake_api):
        _login(unauthed_client)
        resp = unauthed_client.get("/api/turfs")
        assert resp.status_code == 200
        [call] = fake_api.calls_to(TURF_LIST_PATH)
        assert call.headers["Authorization"] == "Bearer user-token"

    def test_login_rejected(self, unauthed_client, fake_api):
        fake_api.set(VERIFY_USER_PATH, VERIFY_USER_REJECTED_PAYLOAD)
        resp = _login(unauthed_client)
        assert resp.status_code == 401
        body = resp.json()
        assert body["error"] == "Authentication Error"
        assert body["message"] == "Invalid email or password"
        assert "session" not in resp.cookies

    def test_login_invalid_email(self, unauthed_client, fake_api):
        resp = _login(unauthed_client, email="not-an-email")
        assert resp.status_code == 422
        assert fake_api.requests == []

    def test_login_short_password(self, unauthed_client):
        resp = _login(unauthed_client, password="123")
        assert resp.status_code == 422

    def test_upstream_down(self, unauthed_client, fake_api):
        fake_api.set_status(TOKEN_PATH, 503, "Service Unavailable")
        resp = _login(unauthed_client)
        assert resp.status_code == 502
        assert resp.json()["error"] == "API Error"
        assert "503" in resp.json()["message"]


class TestSessionCookie:
    def test_round_trip(self):
        session = AdminSession(email="admin@example.com", token="user-token")
        decoded = decode_session_token(create_session_token(session))
        assert decoded.email == "admin@example.com"
        assert decoded.token == "user-token"

    def test_no_cookie_is_rejected_without_upstream_call(self, unauthed_client, fake_api):
        resp = unauthed_client.get("/api/turfs")
        assert resp.status_code == 401
        assert resp.json()["error"] == "Authentication Error"
        assert fake_api.requests == []

    def test_expired_cookie(self, unauthed_client):
        now = datetime.now(UTC)
        token = jwt.encode(
            {"sub": "admin@example.com", "tok": "user-token", "iat": now - timedelta(days=2), "exp": now - timedelta(days=1)},
            JWT_SECRET,
            algorithm=JWT_ALGORITHM,
        )
        unauthed_client.cookies.set("session", token)
        resp = unauthed_client.get("/api/auth/me")
        assert resp.status_code == 401
        assert "expired" in resp.json()["message"]

    def test_tampered_cookie(self, unauthed_client):
        unauthed_client.cookies.set("session", "not-a-jwt")
        resp = unauthed_client.get("/api/auth/me")
        assert resp.status_code == 401
        assert "Invalid session" in resp.json()["message"]

    def test_cookie_without_upstream_token(self, unauthed_client, fake_api):
        token = create_session_token(AdminSession(email="admin@example.com", token=None))
        unauthed_client.cookies.set("session", token)
        resp = unauthed_client.get("/api/turfs")
        assert resp.status_code == 401
        assert resp.json()["message"] == "Authentication token not found. Please login again."
        assert fake_api.requests == []


class TestLogout:
    def test_logout(self, client):
        resp = client.post("/api/auth/logout")
        assert resp.status_code == 200
        assert resp.json()["message"] == "Logged out successfully"

    def test_logout_requires_session(self, unauthed_client):
        resp = unauthed_client.post("/api/auth/logout")
        assert resp.status_code == 401

    def test_login_me_logout_flow(self, unauthed_client):
        _login(unauthed_client)
        assert unauthed_client.get("/api/auth/me").status_code == 200
        assert unauthed_client.post("/api/auth/logout").status_code == 200
        assert unauthed_client.get("/api/auth/me").status_code == 401


class TestMe:
    def test_get_me_authenticated(self, client):
        resp = client.get("/api/auth/me")
        assert resp.status_code == 200
        assert resp.json()["email"] == "admin@example.com"

    def test_get_me_unauthenticated(self, unauthed_client):
        resp = unauthed_client.get("/api/auth/me")
        assert resp.status_code == 401
