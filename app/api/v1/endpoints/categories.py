"""
Category endpoints.

- GET operations are public.
- POST / PUT / DELETE require an admin session.
- Deleting a category leaves its products in place (dangling categoryId).
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.v1.deps import RecordId, get_db, require_admin
from app.core.credentials import Identity
from app.core.exceptions import NotFoundError
from app.core.i18n import get_language, translate
from app.crud import category as category_store
from app.models.catalog import Category
from app.schemas.catalog import CategoryCreate, CategoryRead, CategoryUpdate
from app.schemas.common import MessageResponse

router = APIRouter(prefix="/categories", tags=["categories"])
logger = logging.getLogger(__name__)


@router.get("", response_model=list[CategoryRead])
async def list_categories(db: AsyncSession = Depends(get_db)) -> list[Category]:
    return await category_store.list_categories(db)


@router.get("/{category_id}", response_model=CategoryRead)
async def get_category(category_id: RecordId, db: AsyncSession = Depends(get_db)) -> Category:
    category = await category_store.get_category(db, category_id)
    if category is None:
        raise NotFoundError("category.not_found")
    return category


@router.post("", response_model=CategoryRead, status_code=201)
async def create_category(
    body: CategoryCreate,
    db: AsyncSession = Depends(get_db),
    admin: Identity = Depends(require_admin),
) -> Category:
    category = await category_store.create_category(db, body.model_dump())
    logger.info("Category %d created by %s", category.id, admin.username)
    return category


@router.put("/{category_id}", response_model=CategoryRead)
async def update_category(
    category_id: RecordId,
    body: CategoryUpdate,
    db: AsyncSession = Depends(get_db),
    _admin: Identity = Depends(require_admin),
) -> Category:
    category = await category_store.update_category(
        db, category_id, body.model_dump(exclude_unset=True)
    )
    if category is None:
        raise NotFoundError("category.not_found")
    return category


@router.delete("/{category_id}", response_model=MessageResponse)
async def delete_category(
    category_id: RecordId,
    db: AsyncSession = Depends(get_db),
    admin: Identity = Depends(require_admin),
    lang: str = Depends(get_language),
) -> MessageResponse:
    if not await category_store.delete_category(db, category_id):
        raise NotFoundError("category.not_found")
    logger.info("Category %d deleted by %s", category_id, admin.username)
    return MessageResponse(message=translate("category.deleted", lang))
