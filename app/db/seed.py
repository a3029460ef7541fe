"""
First-run seed data: the admin account plus a sample bilingual catalog.

Seeding only happens while the users table is empty, so restarting the
app never duplicates rows.
"""

from __future__ import annotations

import logging

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import settings
from app.crud.category import create_category, list_categories
from app.crud.gallery import create_gallery_image
from app.crud.product import create_product
from app.crud.user import create_user
from app.models.user import User

logger = logging.getLogger(__name__)

_UNSPLASH = "https://images.unsplash.com/photo-{}?ixlib=rb-1.2.1&auto=format&fit=crop&w={}&h={}&q=80"

SAMPLE_CATEGORIES = [
    ("مبلمان نشیمن", "Living Room", "1493663284031-b7e3aefcae8e"),
    ("اتاق خواب", "Bedroom", "1556910585-09baa3a3c593"),
    ("غذاخوری", "Dining Room", "1565538810643-b5bdb714032a"),
    ("دفتر کار", "Office", "1524758631624-e2822e304c36"),
    ("مبلمان راحتی", "Comfortable Furniture", "1555041469-a586c61ea9bc"),
    ("مبلمان کلاسیک", "Classic Furniture", "1484101403633-562f891dc89a"),
    ("مبلمان سلطنتی", "Royal Furniture", "1616486338812-3dadae4b4ace"),
    ("مبلمان مدرن", "Modern Furniture", "1551298370-9d3d53740c72"),
    ("میز و صندلی", "Tables & Chairs", "1595428774223-ef52624120d2"),
    ("کابینت و قفسه", "Cabinets & Shelves", "1594286851359-8e5fb989eac6"),
]

# (name, name_en, description, photo, category (en), featured, specifications, price)
SAMPLE_PRODUCTS = [
    (
        "مبل راحتی مدرن", "Modern Sofa",
        "مبل راحتی سه نفره با طراحی مدرن و پارچه مخمل",
        "1555041469-a586c61ea9bc", "Living Room", True,
        "ابعاد: 220×90×85 سانتی‌متر، جنس: چوب راش و پارچه مخمل، رنگ: طوسی",
        12500000,
    ),
    (
        "میز نهارخوری چوبی", "Wooden Dining Table",
        "میز نهارخوری شش نفره از چوب گردو با پایه‌های فلزی",
        "1538688525198-9b88f6f53126", "Dining Room", True,
        "ابعاد: 180×90×76 سانتی‌متر، جنس: چوب گردو و پایه فلزی، رنگ: قهوه‌ای تیره",
        8700000,
    ),
    (
        "چراغ رومیزی مدرن", "Modern Table Lamp",
        "چراغ رومیزی با پایه برنجی و حباب کتان سفید",
        "1505693416388-ac5ce068fe85", "Office", True,
        "ارتفاع: 60 سانتی‌متر، قطر حباب: 30 سانتی‌متر، جنس: برنج و کتان، نوع لامپ: LED",
        2500000,
    ),
    (
        "تخت خواب دو نفره", "Double Bed",
        "تخت خواب دو نفره با طراحی شیک و سرتخت پارچه‌ای",
        "1505693314120-0d443867891c", "Bedroom", False,
        "ابعاد: 200×180×110 سانتی‌متر، جنس: چوب و MDF روکش دار، رنگ: کرم",
        18900000,
    ),
    (
        "مبلمان سلطنتی استیل", "Royal Sofa Set",
        "مبلمان سلطنتی با پارچه مخمل و پایه‌های طلایی",
        "1616486338812-3dadae4b4ace", "Royal Furniture", True,
        "ست کامل شامل کاناپه سه نفره، دو کاناپه تک نفره و میز جلو مبلی، جنس: چوب گردو، روکش مخمل، رنگ: قرمز و طلایی",
        32000000,
    ),
    (
        "میز کنسول کلاسیک", "Classic Console Table",
        "میز کنسول با طراحی کلاسیک و آینه بزرگ",
        "1616464916356-3a777b414d95", "Classic Furniture", False,
        "ابعاد: 120×40×85 سانتی‌متر، جنس: چوب و MDF با روکش ونگه، آینه: 120×80 سانتی‌متر",
        9800000,
    ),
    (
        "میز تلویزیون مدرن", "Modern TV Stand",
        "میز تلویزیون با طراحی مدرن و کشوهای متعدد",
        "1588854337221-4cf9fa96059c", "Modern Furniture", False,
        "ابعاد: 180×45×50 سانتی‌متر، جنس: MDF هایگلاس، رنگ: سفید با درب‌های شیشه‌ای دودی",
        7500000,
    ),
    (
        "صندلی ناهارخوری مخملی", "Velvet Dining Chair",
        "صندلی ناهارخوری با روکش مخمل و پایه‌های فلزی",
        "1579656381275-8a754f679e6e", "Tables & Chairs", False,
        "ارتفاع: 95 سانتی‌متر، عرض: 45 سانتی‌متر، جنس: پارچه مخمل و پایه فلزی، رنگ: سبز زمردی",
        2800000,
    ),
    (
        "کتابخانه چوبی", "Wooden Bookshelf",
        "کتابخانه چوبی با طراحی ساده و کاربردی",
        "1594286851359-8e5fb989eac6", "Cabinets & Shelves", False,
        "ابعاد: 120×35×180 سانتی‌متر، جنس: چوب کاج، 5 طبقه قابل تنظیم، رنگ: قهوه‌ای روشن",
        6500000,
    ),
    (
        "مبل ال راحتی", "L-Shaped Sofa",
        "مبل ال راحتی با روکش پارچه مقاوم و دوام بالا",
        "1567016376408-0226e4d0c1ea", "Comfortable Furniture", True,
        "ابعاد: 280×220×85 سانتی‌متر، جنس: چوب و پارچه مقاوم، رنگ: طوسی، قابلیت تبدیل به تختخواب",
        15800000,
    ),
    (
        "صندلی اداری ارگونومیک", "Ergonomic Office Chair",
        "صندلی اداری با طراحی ارگونومیک برای راحتی بیشتر",
        "1596079890744-c1a0462d0975", "Office", False,
        "تنظیم ارتفاع: 45-55 سانتی‌متر، پشتی قابل تنظیم، دسته‌های قابل تنظیم، چرخ 360 درجه، جنس: مش و فوم، رنگ: مشکی",
        4200000,
    ),
]

SAMPLE_GALLERY = [
    ("1586023492125-27b2c045efd7", "نمایشگاه مبلمان پاشا"),
    ("1567016432779-094069958ea5", "طراحی داخلی فروشگاه"),
    ("1618221118493-9cfa1a1c00da", "مبلمان لوکس"),
]


async def seed_sample_catalog(db: AsyncSession) -> None:
    for name, name_en, photo in SAMPLE_CATEGORIES:
        await create_category(
            db, {"name": name, "name_en": name_en, "image": _UNSPLASH.format(photo, 500, 300)}
        )

    category_ids = {c.name_en: c.id for c in await list_categories(db)}
    for name, name_en, description, photo, category, featured, specs, price in SAMPLE_PRODUCTS:
        await create_product(
            db,
            {
                "name": name,
                "name_en": name_en,
                "description": description,
                "image": _UNSPLASH.format(photo, 600, 400),
                "category_id": category_ids[category],
                "featured": featured,
                "specifications": specs,
                "price": price,
            },
        )

    for photo, alt in SAMPLE_GALLERY:
        await create_gallery_image(db, {"image": _UNSPLASH.format(photo, 1200, 600), "alt": alt})


async def seed_initial_data(db: AsyncSession) -> bool:
    """Create the admin user (and sample catalog) on an empty database.

    Returns ``True`` when anything was seeded.
    """
    user_count = (await db.execute(select(func.count(User.id)))).scalar() or 0
    if user_count:
        return False

    await create_user(
        db,
        settings.FIRST_ADMIN_USERNAME,
        settings.FIRST_ADMIN_PASSWORD,
        is_admin=True,
    )
    logger.info(
        "Default admin created: %s (password: <redacted>)", settings.FIRST_ADMIN_USERNAME
    )

    if settings.SEED_SAMPLE_DATA:
        await seed_sample_catalog(db)
        logger.info(
            "Seeded %d categories, %d products, %d gallery images",
            len(SAMPLE_CATEGORIES),
            len(SAMPLE_PRODUCTS),
            len(SAMPLE_GALLERY),
        )
    return True
