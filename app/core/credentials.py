"""
Credential verification.

Stored passwords are a tagged variant: either a bcrypt hash or a legacy
plain-text value kept for rows created before hashing was introduced.
The tag lives in ``users.password_scheme``; verification dispatches on
the variant type, never on the shape of the stored string.
"""

from __future__ import annotations

import hmac
import logging
from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import settings
from app.core.exceptions import AuthError
from app.core.security import dummy_verify, verify_password
from app.crud.user import get_user_by_username
from app.models.user import HashedCredential, PlainCredential

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Identity:
    """The authenticated principal carried by a session."""

    id: int
    username: str
    is_admin: bool


def verify_credential(credential: PlainCredential | HashedCredential, candidate: str) -> bool:
    if isinstance(credential, HashedCredential):
        return verify_password(candidate, credential.digest)
    if isinstance(credential, PlainCredential):
        if not settings.ALLOW_PLAINTEXT_PASSWORDS:
            return False
        logger.warning("Verifying a legacy plain-text credential; rehash this account")
        return hmac.compare_digest(candidate.encode("utf-8"), credential.secret.encode("utf-8"))
    raise TypeError(f"Unsupported credential type: {type(credential).__name__}")


async def authenticate(db: AsyncSession, username: str, password: str) -> Identity:
    """Return the identity for a valid username/password pair.

    Raises ``AuthError`` with the same message whether the user is unknown
    or the password is wrong.
    """
    user = await get_user_by_username(db, username)
    if user is None:
        dummy_verify()
        raise AuthError()

    if not verify_credential(user.credential, password):
        raise AuthError()

    return Identity(id=user.id, username=user.username, is_admin=user.is_admin)
