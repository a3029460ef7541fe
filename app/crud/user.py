"""
User persistence — lookup and creation.  Users are never updated or
deleted through the API.
"""

from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.security import get_password_hash, is_password_hash
from app.models.user import CredentialScheme, User

logger = logging.getLogger(__name__)


class UsernameTakenError(ValueError):
    pass


async def get_user_by_username(db: AsyncSession, username: str) -> User | None:
    result = await db.execute(select(User).where(User.username == username))
    return result.scalar_one_or_none()


async def create_user(
    db: AsyncSession,
    username: str,
    password: str,
    *,
    is_admin: bool = False,
    legacy_plaintext: bool = False,
) -> User:
    """Create a user, hashing *password* unless it already is a bcrypt hash.

    ``legacy_plaintext=True`` stores the password untouched and tags it as a
    plain credential; only meant for importing rows from the old store.
    """
    if await get_user_by_username(db, username) is not None:
        raise UsernameTakenError(f"Username {username!r} already exists")

    if legacy_plaintext:
        stored, scheme = password, CredentialScheme.PLAIN
    elif is_password_hash(password):
        stored, scheme = password, CredentialScheme.BCRYPT
    else:
        stored, scheme = get_password_hash(password), CredentialScheme.BCRYPT

    user = User(
        username=username,
        password=stored,
        password_scheme=scheme.value,
        is_admin=is_admin,
    )
    db.add(user)
    await db.commit()
    await db.refresh(user)
    logger.info("Created user %s (admin=%s, scheme=%s)", username, is_admin, scheme.value)
    return user
