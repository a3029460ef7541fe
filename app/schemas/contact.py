"""Pydantic schemas for the contact form."""

from __future__ import annotations

import re
from datetime import datetime

from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
_PHONE_RE = re.compile(r"^\+?[0-9۰-۹\s()-]+$")


class ContactCreate(BaseModel):
    name: str = Field(min_length=3, max_length=200)
    email: str = Field(max_length=320)
    phone: str = Field(min_length=10, max_length=30)
    subject: str = Field(min_length=3, max_length=300)
    message: str = Field(min_length=10, max_length=5000)

    model_config = {"str_strip_whitespace": True}

    @field_validator("email")
    @classmethod
    def _normalise_email(cls, v: str) -> str:
        v = v.lower()
        if not _EMAIL_RE.match(v):
            raise ValueError("Invalid email address")
        return v

    @field_validator("phone")
    @classmethod
    def _phone(cls, v: str) -> str:
        if not _PHONE_RE.match(v):
            raise ValueError("Phone number may only contain digits, spaces, +, - and ()")
        return v


class ContactRead(BaseModel):
    id: int
    name: str
    email: str
    phone: str
    subject: str
    message: str
    created_at: datetime | None

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "from_attributes": True,
    }
