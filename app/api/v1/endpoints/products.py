"""
Product endpoints.

- GET operations are public; ``?categoryId=`` narrows the list to one
  category, ``/products/featured`` lists featured products only.
- POST / PUT / DELETE require an admin session.
- ``categoryId`` is not checked against existing categories.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.v1.deps import RecordId, get_db, require_admin
from app.core.credentials import Identity
from app.core.exceptions import NotFoundError
from app.core.i18n import get_language, translate
from app.crud import product as product_store
from app.models.catalog import Product
from app.schemas.catalog import ProductCreate, ProductRead, ProductUpdate
from app.schemas.common import MAX_INT32, MessageResponse

router = APIRouter(prefix="/products", tags=["products"])
logger = logging.getLogger(__name__)


@router.get("", response_model=list[ProductRead])
async def list_products(
    category_id: int | None = Query(default=None, alias="categoryId", ge=1, le=MAX_INT32),
    db: AsyncSession = Depends(get_db),
) -> list[Product]:
    return await product_store.list_products(db, category_id=category_id)


# Must stay above /{product_id} so "featured" is not parsed as an id
@router.get("/featured", response_model=list[ProductRead])
async def list_featured_products(db: AsyncSession = Depends(get_db)) -> list[Product]:
    return await product_store.list_featured_products(db)


@router.get("/{product_id}", response_model=ProductRead)
async def get_product(product_id: RecordId, db: AsyncSession = Depends(get_db)) -> Product:
    product = await product_store.get_product(db, product_id)
    if product is None:
        raise NotFoundError("product.not_found")
    return product


@router.post("", response_model=ProductRead, status_code=201)
async def create_product(
    body: ProductCreate,
    db: AsyncSession = Depends(get_db),
    admin: Identity = Depends(require_admin),
) -> Product:
    product = await product_store.create_product(db, body.model_dump())
    logger.info("Product %d created by %s", product.id, admin.username)
    return product


@router.put("/{product_id}", response_model=ProductRead)
async def update_product(
    product_id: RecordId,
    body: ProductUpdate,
    db: AsyncSession = Depends(get_db),
    _admin: Identity = Depends(require_admin),
) -> Product:
    product = await product_store.update_product(
        db, product_id, body.model_dump(exclude_unset=True)
    )
    if product is None:
        raise NotFoundError("product.not_found")
    return product


@router.delete("/{product_id}", response_model=MessageResponse)
async def delete_product(
    product_id: RecordId,
    db: AsyncSession = Depends(get_db),
    admin: Identity = Depends(require_admin),
    lang: str = Depends(get_language),
) -> MessageResponse:
    if not await product_store.delete_product(db, product_id):
        raise NotFoundError("product.not_found")
    logger.info("Product %d deleted by %s", product_id, admin.username)
    return MessageResponse(message=translate("product.deleted", lang))
