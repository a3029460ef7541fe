"""
Contact form submissions.
"""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.contact import ContactMessage

logger = logging.getLogger(__name__)


async def create_contact_message(db: AsyncSession, fields: dict[str, Any]) -> ContactMessage:
    message = ContactMessage(**fields)
    db.add(message)
    await db.commit()
    await db.refresh(message)
    logger.info("Stored contact message %d from %s", message.id, message.email)
    return message


async def list_contact_messages(db: AsyncSession) -> list[ContactMessage]:
    result = await db.execute(
        select(ContactMessage).order_by(ContactMessage.created_at.desc(), ContactMessage.id.desc())
    )
    return list(result.scalars().all())


async def delete_contact_message(db: AsyncSession, message_id: int) -> bool:
    result = await db.execute(delete(ContactMessage).where(ContactMessage.id == message_id))
    await db.commit()
    return result.rowcount > 0
