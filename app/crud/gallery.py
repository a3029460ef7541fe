"""
Gallery image persistence.  Images are listed in insertion order.
"""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.catalog import GalleryImage

logger = logging.getLogger(__name__)


async def get_gallery_image(db: AsyncSession, image_id: int) -> GalleryImage | None:
    return await db.get(GalleryImage, image_id)


async def list_gallery_images(db: AsyncSession) -> list[GalleryImage]:
    result = await db.execute(select(GalleryImage).order_by(GalleryImage.id))
    return list(result.scalars().all())


async def create_gallery_image(db: AsyncSession, fields: dict[str, Any]) -> GalleryImage:
    image = GalleryImage(**fields)
    db.add(image)
    await db.commit()
    await db.refresh(image)
    logger.info("Added gallery image %d", image.id)
    return image


async def delete_gallery_image(db: AsyncSession, image_id: int) -> bool:
    result = await db.execute(delete(GalleryImage).where(GalleryImage.id == image_id))
    await db.commit()
    removed = result.rowcount > 0
    if removed:
        logger.info("Deleted gallery image %d", image_id)
    return removed
