"""Pydantic schemas for login and the session identity."""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class LoginRequest(BaseModel):
    # Usernames are case-sensitive and compared verbatim
    username: str = Field(min_length=3, max_length=150)
    password: str = Field(min_length=6, max_length=128)


class IdentityRead(BaseModel):
    id: int
    username: str
    is_admin: bool

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "from_attributes": True,
    }
