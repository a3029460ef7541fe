"""
Password hashing (bcrypt) and session-cookie signing (JWS).
"""

from __future__ import annotations

import json
import logging

from jose import JWSError, jws
from passlib.context import CryptContext

from app.core.config import settings

logger = logging.getLogger(__name__)

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

_ALGORITHM = "HS256"


# ── Passwords ───────────────────────────────────────────────────────
def verify_password(plain: str, hashed: str) -> bool:
    try:
        return pwd_context.verify(plain, hashed)
    except ValueError:
        logger.error("Stored password hash is malformed")
        return False


def get_password_hash(plain: str) -> str:
    return pwd_context.hash(plain)


def is_password_hash(value: str) -> bool:
    """True when *value* is already a hash this context understands."""
    return pwd_context.identify(value, required=False) is not None


def dummy_verify() -> None:
    """Burn the same time as a real verify (used for unknown usernames)."""
    pwd_context.dummy_verify()


# ── Session cookie ──────────────────────────────────────────────────
def sign_session_token(token: str) -> str:
    return jws.sign({"sid": token}, settings.SESSION_SECRET, algorithm=_ALGORITHM)


def unsign_session_token(value: str) -> str | None:
    """Return the session token inside a signed cookie value, or ``None``."""
    try:
        payload = json.loads(jws.verify(value, settings.SESSION_SECRET, algorithms=[_ALGORITHM]))
    except (JWSError, ValueError):
        return None
    if not isinstance(payload, dict):
        return None
    sid = payload.get("sid")
    return sid if isinstance(sid, str) else None
