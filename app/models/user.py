"""
User model — authentication & admin role.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

from sqlalchemy import Boolean, Column, Integer, String, Text

from app.db.base import Base


class CredentialScheme(str, enum.Enum):
    PLAIN = "plain"  # legacy rows, pending rehash
    BCRYPT = "bcrypt"


@dataclass(frozen=True)
class PlainCredential:
    secret: str


@dataclass(frozen=True)
class HashedCredential:
    digest: str


class User(Base):
    __tablename__ = "users"

    id: int = Column(Integer, primary_key=True, index=True)  # type: ignore[assignment]
    username: str = Column(String(150), unique=True, nullable=False, index=True)  # type: ignore[assignment]
    password: str = Column(Text, nullable=False)  # type: ignore[assignment]
    password_scheme: str = Column(  # type: ignore[assignment]
        String(16),
        nullable=False,
        default=CredentialScheme.BCRYPT.value,
        server_default=CredentialScheme.BCRYPT.value,
    )
    is_admin: bool = Column(Boolean, nullable=False, default=False, server_default="false")  # type: ignore[assignment]

    @property
    def credential(self) -> PlainCredential | HashedCredential:
        if self.password_scheme == CredentialScheme.BCRYPT.value:
            return HashedCredential(self.password)
        if self.password_scheme == CredentialScheme.PLAIN.value:
            return PlainCredential(self.password)
        raise ValueError(f"Unknown credential scheme: {self.password_scheme!r}")
