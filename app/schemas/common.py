"""Generic response schemas shared by several routers."""

from __future__ import annotations

from pydantic import BaseModel

# Upper bound of the INTEGER columns (PostgreSQL int4)
MAX_INT32 = 2_147_483_647


class MessageResponse(BaseModel):
    message: str
    success: bool = True


class HealthResponse(BaseModel):
    db: bool
    version: str
