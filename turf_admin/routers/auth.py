"""
Authentication endpoints – two-step login against the turf API.

The upstream user token is kept inside the signed session cookie, so the
browser never sees it directly.
"""

from fastapi import APIRouter, Request, Response

from turf_admin.dependencies import (
    AdminSessionDep,
    TurfServiceDep,
    clear_session_cookie,
    set_session_cookie,
)
from turf_admin.models import AdminInfo, AuthResponse, LoginRequest, MessageResponse
from turf_admin.rate_limit import AUTH, limiter

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post(
    "/login",
    response_model=AuthResponse,
    operation_id="login",
    summary="Log in with admin credentials and receive a session cookie",
)
@limiter.limit(AUTH)
async def login(
    request: Request,
    body: LoginRequest,
    response: Response,
    service: TurfServiceDep,
) -> AuthResponse:
    """
    Obtain a service token, verify the credentials with it, and store the
    resulting user token in an HTTP-only session cookie.
    """
    session = await service.login(body.email, body.password)
    set_session_cookie(response, session)
    return AuthResponse(
        message="Login successful",
        user=AdminInfo(email=session.email, logged_in_at=session.created_at),
    )


@router.post(
    "/logout",
    response_model=MessageResponse,
    operation_id="logout",
    summary="Clear the session cookie",
)
async def logout(
    session: AdminSessionDep,
    service: TurfServiceDep,
    response: Response,
) -> MessageResponse:
    service.logout(session)
    clear_session_cookie(response)
    return MessageResponse(message="Logged out successfully")


@router.get(
    "/me",
    response_model=AdminInfo,
    operation_id="getMe",
    summary="Get the logged-in admin",
)
async def get_me(session: AdminSessionDep) -> AdminInfo:
    return AdminInfo(email=session.email, logged_in_at=session.created_at)
