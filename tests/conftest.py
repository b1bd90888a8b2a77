"""
Shared test fixtures.

Provides:
  • a fake turf API (httpx.MockTransport, records every request)
  • a TurfApiClient / TurfAdminService wired to it with a fixed clock
  • FastAPI TestClients whose lifespan builds the service against the fake

The `client` fixture bypasses the session cookie; `unauthed_client`
requires one.
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from tests.mocks.models import FIXED_NOW, MOCK_SESSION
from tests.mocks.services import BASE_URL, FakeTurfApi
from turf_admin.dependencies import get_admin_session
from turf_admin.main import app
from turf_admin.services.admin import TurfAdminService
from turf_admin.services.turf_api.client import TurfApiClient


def _build_service(fake: FakeTurfApi) -> TurfAdminService:
    client = TurfApiClient(base_url=BASE_URL, transport=fake.transport())
    return TurfAdminService(client, clock=lambda: FIXED_NOW)


# ── Fixtures ───────────────────────────────────────────────────────────────


@pytest.fixture()
def fake_api() -> FakeTurfApi:
    return FakeTurfApi()


@pytest.fixture()
async def api_client(fake_api: FakeTurfApi):
    client = TurfApiClient(base_url=BASE_URL, transport=fake_api.transport())
    yield client
    await client.close()


@pytest.fixture()
def service(api_client: TurfApiClient) -> TurfAdminService:
    return TurfAdminService(api_client, clock=lambda: FIXED_NOW)


@pytest.fixture()
def _test_env(monkeypatch, fake_api: FakeTurfApi) -> FakeTurfApi:
    """
    Make the app lifespan build its service against the fake turf API and
    switch rate limiting off.
    """
    monkeypatch.setattr("turf_admin.main.build_service", lambda: _build_service(fake_api))

    # ── Disable rate limiting in tests ────────────────────────────────
    from turf_admin.rate_limit import limiter as _limiter
    monkeypatch.setattr(_limiter, "enabled", False)

    return fake_api


@pytest.fixture()
def client(_test_env: FakeTurfApi) -> TestClient:
    """
    FastAPI TestClient against the fake turf API with the session bypassed.

    Uses a context manager so the lifespan runs.
    """
    async def _mock_admin_session():
        return MOCK_SESSION

    app.dependency_overrides[get_admin_session] = _mock_admin_session

    with TestClient(app, raise_server_exceptions=False) as tc:
        yield tc

    app.dependency_overrides.clear()


@pytest.fixture()
def unauthed_client(_test_env: FakeTurfApi) -> TestClient:
    """
    TestClient without auth overrides; requests are rejected unless
    a session cookie is provided.
    """
    app.dependency_overrides.clear()

    with TestClient(app, raise_server_exceptions=False) as tc:
        yield tc

    app.dependency_overrides.clear()
