"""
Turf Admin API – backend for the turf booking admin dashboard.

Holds the admin session, talks to the external turf API, and serves
normalized turfs, slots, bookings and report data as JSON.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded

from turf_admin.config import APP_VERSION, LOG_LEVEL
from turf_admin.dependencies import set_turf_service
from turf_admin.errors import TurfAdminError
from turf_admin.models import Error
from turf_admin.rate_limit import limiter
from turf_admin.routers import auth, availability, bookings, dashboard, health, reports, turfs
from turf_admin.services.admin import TurfAdminService
from turf_admin.services.turf_api.client import TurfApiClient

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


def build_service() -> TurfAdminService:
    return TurfAdminService(TurfApiClient())


@asynccontextmanager
async def lifespan(app: FastAPI):
    service = build_service()
    set_turf_service(service)
    app.state.turf_service = service
    logger.info("Turf Admin API started")
    try:
        yield
    finally:
        set_turf_service(None)
        await service.client.close()
        logger.info("Turf Admin API stopped")


app = FastAPI(
    title="Turf Admin API",
    description="Admin dashboard backend for turf listings, slot availability and bookings",
    version=APP_VERSION,
    lifespan=lifespan,
)

app.state.limiter = limiter


# ── Error handlers ─────────────────────────────────────────────────────────


@app.exception_handler(TurfAdminError)
async def turf_admin_error_handler(request: Request, exc: TurfAdminError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.warning("%s %s failed: %s", request.method, request.url.path, exc.message)
    body = Error(error=exc.title, message=exc.message, details=exc.details or None)
    return JSONResponse(status_code=exc.status_code, content=body.model_dump(mode="json"))


@app.exception_handler(RateLimitExceeded)
async def rate_limit_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    body = Error(error="Too Many Requests", message=f"Rate limit exceeded: {exc.detail}")
    return JSONResponse(status_code=429, content=body.model_dump(mode="json"))


# ── Routers ────────────────────────────────────────────────────────────────

app.include_router(health.router)
app.include_router(auth.router)
app.include_router(turfs.router)
app.include_router(availability.router)
app.include_router(bookings.router)
app.include_router(reports.router)
app.include_router(dashboard.router)
