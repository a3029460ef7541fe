"""Pydantic schemas for Categories / Products / Gallery images.

JSON uses camelCase (``nameEn``, ``categoryId``) to match the storefront
client; snake_case names are accepted on input as well.
"""

from __future__ import annotations

import re

from pydantic import BaseModel, Field, computed_field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from app.schemas.common import MAX_INT32

_SPEC_SPLIT_RE = re.compile(r"\s*[،,]\s*")

_INPUT_CONFIG = {
    "alias_generator": to_camel,
    "populate_by_name": True,
    "str_strip_whitespace": True,
}

_READ_CONFIG = {
    "alias_generator": to_camel,
    "populate_by_name": True,
    "from_attributes": True,
}


def _check_image(v: str | None) -> str | None:
    if v is None:
        return v
    if not v:
        raise ValueError("Image must not be empty")
    if len(v) > 2048:
        raise ValueError("Image URL must not exceed 2048 characters")
    if not (v.startswith(("http://", "https://")) or v.startswith("/")):
        raise ValueError("Image must be an http(s) URL or an absolute path")
    return v


def _reject_nulls(model: BaseModel, required: tuple[str, ...]) -> None:
    """Partial updates may omit a required column but never null it."""
    for name in required:
        if name in model.model_fields_set and getattr(model, name) is None:
            raise ValueError(f"{name} must not be null")


def split_specifications(text: str | None) -> list[str]:
    """Split the free-text specification field on Persian or Latin commas."""
    if not text:
        return []
    return [part for part in _SPEC_SPLIT_RE.split(text.strip()) if part]


# ── Category ────────────────────────────────────────────────────────
class CategoryCreate(BaseModel):
    name: str = Field(min_length=1, max_length=200)
    name_en: str = Field(min_length=1, max_length=200)
    image: str

    model_config = _INPUT_CONFIG

    @field_validator("image")
    @classmethod
    def _image(cls, v: str | None) -> str | None:
        return _check_image(v)


class CategoryUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=200)
    name_en: str | None = Field(default=None, min_length=1, max_length=200)
    image: str | None = None

    model_config = _INPUT_CONFIG

    @field_validator("image")
    @classmethod
    def _image(cls, v: str | None) -> str | None:
        return _check_image(v)

    @model_validator(mode="after")
    def _no_nulls(self) -> "CategoryUpdate":
        _reject_nulls(self, ("name", "name_en", "image"))
        return self


class CategoryRead(BaseModel):
    id: int
    name: str
    name_en: str
    image: str

    model_config = _READ_CONFIG


# ── Product ─────────────────────────────────────────────────────────
class ProductCreate(BaseModel):
    name: str = Field(min_length=1, max_length=200)
    name_en: str | None = Field(default=None, max_length=200)
    description: str = Field(min_length=1)
    image: str
    category_id: int = Field(ge=1, le=MAX_INT32)
    featured: bool = False
    specifications: str | None = None
    price: int = Field(default=0, ge=0, le=MAX_INT32)

    model_config = _INPUT_CONFIG

    @field_validator("image")
    @classmethod
    def _image(cls, v: str | None) -> str | None:
        return _check_image(v)


class ProductUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=200)
    name_en: str | None = Field(default=None, max_length=200)
    description: str | None = Field(default=None, min_length=1)
    image: str | None = None
    category_id: int | None = Field(default=None, ge=1, le=MAX_INT32)
    featured: bool | None = None
    specifications: str | None = None
    price: int | None = Field(default=None, ge=0, le=MAX_INT32)

    model_config = _INPUT_CONFIG

    @field_validator("image")
    @classmethod
    def _image(cls, v: str | None) -> str | None:
        return _check_image(v)

    @model_validator(mode="after")
    def _no_nulls(self) -> "ProductUpdate":
        _reject_nulls(
            self, ("name", "description", "image", "category_id", "featured", "price")
        )
        return self


class ProductRead(BaseModel):
    id: int
    name: str
    name_en: str | None
    description: str
    image: str
    category_id: int
    featured: bool
    specifications: str | None
    price: int

    model_config = _READ_CONFIG

    @computed_field(alias="specificationList")  # type: ignore[prop-decorator]
    @property
    def specification_list(self) -> list[str]:
        return split_specifications(self.specifications)


# ── Gallery ─────────────────────────────────────────────────────────
class GalleryImageCreate(BaseModel):
    image: str
    alt: str = Field(min_length=1, max_length=300)

    model_config = _INPUT_CONFIG

    @field_validator("image")
    @classmethod
    def _image(cls, v: str | None) -> str | None:
        return _check_image(v)


class GalleryImageRead(BaseModel):
    id: int
    image: str
    alt: str

    model_config = _READ_CONFIG
