"""
Category persistence.

Deleting a category does not touch its products; they keep the old
``category_id``.
"""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.catalog import Category

logger = logging.getLogger(__name__)


async def get_category(db: AsyncSession, category_id: int) -> Category | None:
    return await db.get(Category, category_id)


async def list_categories(db: AsyncSession) -> list[Category]:
    result = await db.execute(select(Category).order_by(Category.name, Category.id))
    return list(result.scalars().all())


async def create_category(db: AsyncSession, fields: dict[str, Any]) -> Category:
    category = Category(**fields)
    db.add(category)
    await db.commit()
    await db.refresh(category)
    logger.info("Created category %d (%s)", category.id, category.name_en)
    return category


async def update_category(
    db: AsyncSession, category_id: int, fields: dict[str, Any]
) -> Category | None:
    category = await db.get(Category, category_id)
    if category is None:
        return None

    for field, value in fields.items():
        setattr(category, field, value)

    await db.commit()
    await db.refresh(category)
    logger.info("Updated category %d: %s", category_id, sorted(fields))
    return category


async def delete_category(db: AsyncSession, category_id: int) -> bool:
    result = await db.execute(delete(Category).where(Category.id == category_id))
    await db.commit()
    removed = result.rowcount > 0
    if removed:
        logger.info("Deleted category %d (products keep their category_id)", category_id)
    return removed
