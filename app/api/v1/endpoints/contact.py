"""
Contact form endpoints.

- POST /contact is public and rate limited per client IP.
- Listing and deleting submissions is admin-only.
"""

import logging

from fastapi import APIRouter, Depends, Request, Response
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.v1.deps import RecordId, get_db, require_admin
from app.core.config import settings
from app.core.credentials import Identity
from app.core.exceptions import NotFoundError
from app.core.i18n import get_language, translate
from app.core.rate_limit import limiter
from app.crud import contact as contact_store
from app.models.contact import ContactMessage
from app.schemas.common import MessageResponse
from app.schemas.contact import ContactCreate, ContactRead

router = APIRouter(prefix="/contact", tags=["contact"])
logger = logging.getLogger(__name__)


@router.post("", response_model=MessageResponse, status_code=201)
@limiter.limit(settings.CONTACT_RATE_LIMIT)
async def submit_contact_message(
    request: Request,
    response: Response,
    body: ContactCreate,
    db: AsyncSession = Depends(get_db),
    lang: str = Depends(get_language),
) -> MessageResponse:
    await contact_store.create_contact_message(db, body.model_dump())
    return MessageResponse(message=translate("contact.sent", lang))


@router.get("", response_model=list[ContactRead])
async def list_contact_messages(
    db: AsyncSession = Depends(get_db),
    _admin: Identity = Depends(require_admin),
) -> list[ContactMessage]:
    return await contact_store.list_contact_messages(db)


@router.delete("/{message_id}", response_model=MessageResponse)
async def delete_contact_message(
    message_id: RecordId,
    db: AsyncSession = Depends(get_db),
    admin: Identity = Depends(require_admin),
    lang: str = Depends(get_language),
) -> MessageResponse:
    if not await contact_store.delete_contact_message(db, message_id):
        raise NotFoundError("contact.not_found")
    logger.info("Contact message %d deleted by %s", message_id, admin.username)
    return MessageResponse(message=translate("contact.deleted", lang))
