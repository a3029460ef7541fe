"""
Product persistence.

Listing has two mutually exclusive modes: everything (optionally narrowed to
one ``category_id``) or featured products only.  Both are ordered by name.
"""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.catalog import Product

logger = logging.getLogger(__name__)


async def get_product(db: AsyncSession, product_id: int) -> Product | None:
    return await db.get(Product, product_id)


async def list_products(db: AsyncSession, category_id: int | None = None) -> list[Product]:
    query = select(Product).order_by(Product.name, Product.id)
    if category_id is not None:
        query = query.where(Product.category_id == category_id)
    result = await db.execute(query)
    return list(result.scalars().all())


async def list_featured_products(db: AsyncSession) -> list[Product]:
    result = await db.execute(
        select(Product).where(Product.featured.is_(True)).order_by(Product.name, Product.id)
    )
    return list(result.scalars().all())


async def create_product(db: AsyncSession, fields: dict[str, Any]) -> Product:
    product = Product(**fields)
    db.add(product)
    await db.commit()
    await db.refresh(product)
    logger.info("Created product %d (%s) in category %d", product.id, product.name, product.category_id)
    return product


async def update_product(
    db: AsyncSession, product_id: int, fields: dict[str, Any]
) -> Product | None:
    product = await db.get(Product, product_id)
    if product is None:
        return None

    for field, value in fields.items():
        setattr(product, field, value)

    await db.commit()
    await db.refresh(product)
    logger.info("Updated product %d: %s", product_id, sorted(fields))
    return product


async def delete_product(db: AsyncSession, product_id: int) -> bool:
    result = await db.execute(delete(Product).where(Product.id == product_id))
    await db.commit()
    removed = result.rowcount > 0
    if removed:
        logger.info("Deleted product %d", product_id)
    return removed
