"""
Create all tables and seed first-run data.

    python -m app.db.init_db
"""

from __future__ import annotations

import asyncio
import logging

from app.db.base import Base
from app.db.seed import seed_initial_data
from app.db.session import async_session_factory, engine

# Ensure all models are imported so metadata.create_all can see them
from app.models.catalog import Category, GalleryImage, Product  # noqa: F401
from app.models.contact import ContactMessage  # noqa: F401
from app.models.user import User  # noqa: F401

logger = logging.getLogger(__name__)


async def init_db() -> None:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables initialised")

    async with async_session_factory() as session:
        if not await seed_initial_data(session):
            logger.info("Users already present, skipping seed")


async def main() -> None:
    try:
        await init_db()
    finally:
        await engine.dispose()


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    )
    asyncio.run(main())
