"""
Auth endpoints — login, logout and the current session identity.

Sessions live server-side; the client only holds a signed, HttpOnly,
SameSite=strict cookie carrying the opaque session token.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Request, Response
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.v1.deps import get_db, get_optional_identity, get_session_token
from app.core.config import settings
from app.core.credentials import Identity, authenticate
from app.core.exceptions import AuthError
from app.core.i18n import get_language, translate
from app.core.rate_limit import limiter
from app.core.security import sign_session_token
from app.core.sessions import session_manager
from app.schemas.auth import IdentityRead, LoginRequest
from app.schemas.common import MessageResponse

router = APIRouter(prefix="/auth", tags=["auth"])
logger = logging.getLogger(__name__)


def _identity_response(identity: Identity) -> IdentityRead:
    return IdentityRead(id=identity.id, username=identity.username, is_admin=identity.is_admin)


def _set_session_cookie(response: Response, token: str) -> None:
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=sign_session_token(token),
        httponly=True,
        secure=settings.session_cookie_secure,
        samesite="strict",
        max_age=settings.session_ttl_seconds,
        path="/",
    )


def _clear_session_cookie(response: Response) -> None:
    response.delete_cookie(
        key=settings.SESSION_COOKIE_NAME,
        path="/",
        httponly=True,
        secure=settings.session_cookie_secure,
        samesite="strict",
    )


@router.post("/login", response_model=IdentityRead)
@limiter.limit(settings.LOGIN_RATE_LIMIT)
async def login(
    request: Request,
    response: Response,
    body: LoginRequest,
    current_token: Optional[str] = Depends(get_session_token),
    db: AsyncSession = Depends(get_db),
) -> IdentityRead:
    """Verify credentials and open a new session. Returns the identity."""
    try:
        identity = await authenticate(db, body.username, body.password)
    except AuthError:
        logger.warning("Failed login for username %r", body.username)
        raise

    # A fresh session per login; never reuse a token the client arrived with
    if current_token:
        session_manager.destroy(current_token)
    token = session_manager.create(identity)
    _set_session_cookie(response, token)
    logger.info("User %s logged in (admin=%s)", identity.username, identity.is_admin)
    return _identity_response(identity)


@router.post("/logout", response_model=MessageResponse)
async def logout(
    response: Response,
    token: Optional[str] = Depends(get_session_token),
    lang: str = Depends(get_language),
) -> MessageResponse:
    """Destroy the server-side session and clear the cookie."""
    if session_manager.destroy(token):
        logger.info("Session closed by logout")
    _clear_session_cookie(response)
    return MessageResponse(message=translate("auth.logged_out", lang))


@router.get("/user", response_model=IdentityRead)
async def read_current_user(
    identity: Optional[Identity] = Depends(get_optional_identity),
) -> IdentityRead:
    """Return the identity bound to the current session."""
    if identity is None:
        raise AuthError("auth.not_logged_in")
    return _identity_response(identity)
