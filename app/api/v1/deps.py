"""
FastAPI dependencies — database session and the access guard.

``get_current_identity`` and ``require_admin`` are pure gates: they only
read the session store and short-circuit with 401 / 403.
"""

from __future__ import annotations

from collections.abc import AsyncGenerator
from typing import Annotated, Optional

from fastapi import Cookie, Depends, Path
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import settings
from app.core.credentials import Identity
from app.core.exceptions import AuthError, AuthorizationError
from app.core.security import unsign_session_token
from app.core.sessions import session_manager
from app.db.session import async_session_factory
from app.schemas.common import MAX_INT32

# Path ids outside the INTEGER column range are rejected before any query
RecordId = Annotated[int, Path(ge=1, le=MAX_INT32)]


# ── Database session ────────────────────────────────────────────────
async def get_db() -> AsyncGenerator[AsyncSession, None]:
    async with async_session_factory() as session:
        try:
            yield session
        finally:
            await session.close()


# ── Session / auth dependencies ─────────────────────────────────────
async def get_session_token(
    session_cookie: Optional[str] = Cookie(default=None, alias=settings.SESSION_COOKIE_NAME),
) -> str | None:
    """Unsigned session token from the cookie; ``None`` if absent or tampered."""
    if not session_cookie:
        return None
    return unsign_session_token(session_cookie)


async def get_optional_identity(
    token: Optional[str] = Depends(get_session_token),
) -> Identity | None:
    return session_manager.resolve(token)


async def get_current_identity(
    identity: Optional[Identity] = Depends(get_optional_identity),
) -> Identity:
    """Reject requests without a live session (401)."""
    if identity is None:
        raise AuthError("auth.login_required")
    return identity


async def require_admin(
    identity: Identity = Depends(get_current_identity),
) -> Identity:
    """Only allow admin identities to proceed (403)."""
    if not identity.is_admin:
        raise AuthorizationError()
    return identity
