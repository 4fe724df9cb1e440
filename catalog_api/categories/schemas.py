"""
Pydantic schema definitions for the categories module.

``Category`` is the record held by the in-memory store. Attribute
names are snake_case on the Python side while the JSON payloads keep
the camelCase names (``creationAt``/``updatedAt``) that clients of the
storefront already rely on. ``Product`` is read-only here: the module
only needs its embedded category id, every other field is passed
through untouched. The ``*Envelope`` models describe the uniform
``{success, message, data, total}`` wrapper returned by every route.
"""

from datetime import datetime, timezone
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Category(BaseModel):
    """A single category entry.

    ``creation_at`` is stamped once when the record is created.
    ``updated_at`` starts equal to it and is refreshed on every
    successful update.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: int
    name: str
    slug: str
    image: str
    creation_at: datetime = Field(alias="creationAt")
    updated_at: datetime = Field(alias="updatedAt")

    @field_validator("creation_at", "updated_at")
    @classmethod
    def assume_utc(cls, v: datetime) -> datetime:
        """Seed timestamps without an offset are read as UTC."""
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v


class CategoryRef(BaseModel):
    """The category embedded in a product; only its id is interpreted."""

    model_config = ConfigDict(extra="allow")

    id: int


class Product(BaseModel):
    """A product as found in the seed catalogue.

    Only ``id`` and ``category.id`` are interpreted. Every other field,
    including the rest of the embedded category, is kept as loaded and
    returned unchanged by the products query.
    """

    model_config = ConfigDict(extra="allow")

    id: int
    category: CategoryRef


class CategoryCreate(BaseModel):
    # All optional: presence is checked by the store so that a missing
    # field is reported with the category error message.
    name: Optional[str] = None
    slug: Optional[str] = None
    image: Optional[str] = None


class CategoryUpdate(BaseModel):
    name: Optional[str] = None
    slug: Optional[str] = None
    image: Optional[str] = None


class Envelope(BaseModel):
    """Base response wrapper shared by success and error payloads."""

    success: bool = True
    message: str
    data: Optional[Any] = None


class CategoryEnvelope(Envelope):
    data: Category


class CategoryListEnvelope(Envelope):
    data: List[Category]


class ProductListEnvelope(Envelope):
    data: List[Product]
    total: int
