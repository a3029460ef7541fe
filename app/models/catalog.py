"""
Catalog models — categories, products and gallery images.

``Product.category_id`` is a plain integer column, deliberately without a
foreign key: deleting a category leaves its products pointing at an id
that no longer exists.
"""

from __future__ import annotations

from sqlalchemy import Boolean, Column, Integer, String, Text

from app.db.base import Base


class Category(Base):
    __tablename__ = "categories"

    id: int = Column(Integer, primary_key=True, index=True)  # type: ignore[assignment]
    name: str = Column(String(200), nullable=False)  # type: ignore[assignment]
    name_en: str = Column(String(200), nullable=False)  # type: ignore[assignment]
    image: str = Column(Text, nullable=False)  # type: ignore[assignment]


class Product(Base):
    __tablename__ = "products"

    id: int = Column(Integer, primary_key=True, index=True)  # type: ignore[assignment]
    name: str = Column(String(200), nullable=False)  # type: ignore[assignment]
    name_en: str | None = Column(String(200), nullable=True)  # type: ignore[assignment]
    description: str = Column(Text, nullable=False)  # type: ignore[assignment]
    image: str = Column(Text, nullable=False)  # type: ignore[assignment]
    category_id: int = Column(Integer, nullable=False, index=True)  # type: ignore[assignment]
    featured: bool = Column(Boolean, nullable=False, default=False, server_default="false")  # type: ignore[assignment]
    specifications: str | None = Column(Text, nullable=True)  # type: ignore[assignment]
    price: int = Column(Integer, nullable=False, default=0, server_default="0")  # type: ignore[assignment]


class GalleryImage(Base):
    __tablename__ = "gallery_images"

    id: int = Column(Integer, primary_key=True, index=True)  # type: ignore[assignment]
    image: str = Column(Text, nullable=False)  # type: ignore[assignment]
    alt: str = Column(String(300), nullable=False)  # type: ignore[assignment]
