"""
Gallery endpoints — public listing, admin-only add / remove.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.v1.deps import RecordId, get_db, require_admin
from app.core.credentials import Identity
from app.core.exceptions import NotFoundError
from app.core.i18n import get_language, translate
from app.crud import gallery as gallery_store
from app.models.catalog import GalleryImage
from app.schemas.catalog import GalleryImageCreate, GalleryImageRead
from app.schemas.common import MessageResponse

router = APIRouter(prefix="/gallery", tags=["gallery"])


@router.get("", response_model=list[GalleryImageRead])
async def list_gallery_images(db: AsyncSession = Depends(get_db)) -> list[GalleryImage]:
    return await gallery_store.list_gallery_images(db)


@router.post("", response_model=GalleryImageRead, status_code=201)
async def create_gallery_image(
    body: GalleryImageCreate,
    db: AsyncSession = Depends(get_db),
    _admin: Identity = Depends(require_admin),
) -> GalleryImage:
    return await gallery_store.create_gallery_image(db, body.model_dump())


@router.delete("/{image_id}", response_model=MessageResponse)
async def delete_gallery_image(
    image_id: RecordId,
    db: AsyncSession = Depends(get_db),
    _admin: Identity = Depends(require_admin),
    lang: str = Depends(get_language),
) -> MessageResponse:
    if not await gallery_store.delete_gallery_image(db, image_id):
        raise NotFoundError("gallery.not_found")
    return MessageResponse(message=translate("gallery.deleted", lang))
