"""
In-memory data store for the categories API.

``CategoryStore`` owns the ordered list of categories and is the only
place that mutates it. ``ProductCatalog`` is a read-only list of
products consulted for the "products by category" query. Both are
built from the bundled JSON seed files when the application is
created and live for the lifetime of the process; nothing is written
back to disk.

FastAPI runs plain ``def`` routes on a thread pool, so every store
operation runs under a lock to keep id allocation and slug uniqueness
consistent between concurrent writers.
"""

from __future__ import annotations

import json
import logging
import threading
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterable, List, Optional

from ..errors import ConflictError, NotFoundError, ValidationError
from .schemas import Category, Product

logger = logging.getLogger(__name__)


def _norm(s: Optional[str]) -> str:
    """Normalize a string for case-insensitive comparison."""
    return (s or "").lower()


def _now() -> datetime:
    return datetime.now(timezone.utc)


def next_id(existing_ids: Iterable[int]) -> int:
    """Return the identifier for a new record.

    Parameters
    ----------
    existing_ids : Iterable[int]
        Identifiers currently held by the store.

    Returns
    -------
    int
        One more than the largest existing identifier, or ``1`` when
        there are none. The value depends only on the live records, so
        deleting the current maximum lets its id be issued again.
    """
    return max(existing_ids, default=0) + 1


def _read_seed(path: Path) -> list:
    if not path.exists():
        logger.warning(f"Seed file {path} not found, starting empty")
        return []
    with path.open("r", encoding="utf-8") as f:
        raw = json.load(f)
    if not isinstance(raw, list):
        raise ValueError(f"Seed file {path} must contain a JSON array")
    return raw


def load_categories(path: Path) -> List[Category]:
    """Load seed categories from a JSON array file."""
    return [Category.model_validate(entry) for entry in _read_seed(path)]


def load_products(path: Path) -> List[Product]:
    """Load seed products from a JSON array file."""
    return [Product.model_validate(entry) for entry in _read_seed(path)]


class CategoryStore:
    """Ordered, mutable collection of categories.

    Lookups return the first match in store order. Removal deletes by
    position, so the surviving records keep their relative order.
    """

    def __init__(self, categories: Optional[Iterable[Category]] = None):
        self._items: List[Category] = list(categories or [])
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._items)

    def _index_of(self, category_id: int) -> int:
        for index, category in enumerate(self._items):
            if category.id == category_id:
                return index
        raise NotFoundError(str(category_id))

    def _find_slug(self, slug: str) -> Optional[Category]:
        return next((c for c in self._items if c.slug == slug), None)

    def list(self, name: Optional[str] = None) -> List[Category]:
        """Return all categories, or those whose name contains ``name``.

        The match is a case-insensitive substring test. An empty or
        missing filter returns the whole store.
        """
        with self._lock:
            items = list(self._items)
        needle = _norm(name)
        if not needle:
            return items
        return [c for c in items if needle in _norm(c.name)]

    def get(self, category_id: int) -> Category:
        with self._lock:
            return self._items[self._index_of(category_id)]

    def get_by_slug(self, slug: str) -> Category:
        with self._lock:
            category = self._find_slug(slug)
        if category is None:
            raise NotFoundError(slug)
        return category

    def create(self, name: Optional[str], slug: Optional[str],
               image: Optional[str]) -> Category:
        """Append a new category and return it.

        Raises
        ------
        ValidationError
            If any of ``name``, ``slug`` or ``image`` is missing or empty.
        ConflictError
            If another category already uses ``slug``.
        """
        missing = [
            field for field, value in (("name", name), ("slug", slug), ("image", image))
            if not value
        ]
        if missing:
            raise ValidationError(fields=missing)

        with self._lock:
            if self._find_slug(slug) is not None:
                raise ConflictError(slug)
            now = _now()
            category = Category(
                id=next_id(c.id for c in self._items),
                name=name,
                slug=slug,
                image=image,
                creation_at=now,
                updated_at=now,
            )
            self._items.append(category)

        logger.info(
            f"Created category {category.slug!r}",
            extra={"category_id": category.id},
        )
        return category

    def update(self, category_id: int, name: Optional[str] = None,
               slug: Optional[str] = None, image: Optional[str] = None) -> Category:
        """Overwrite the provided fields of a category in place.

        Fields that are ``None`` or empty keep their current value.
        Re-submitting the category's own slug is not a conflict.

        Raises
        ------
        NotFoundError
            If no category has ``category_id``.
        ConflictError
            If ``slug`` changes to one held by another category.
        """
        with self._lock:
            category = self._items[self._index_of(category_id)]
            if slug and slug != category.slug:
                holder = self._find_slug(slug)
                if holder is not None and holder.id != category_id:
                    raise ConflictError(slug)

            if name:
                category.name = name
            if slug:
                category.slug = slug
            if image:
                category.image = image
            # never let a clock step backwards move updatedAt behind its old value
            category.updated_at = max(_now(), category.updated_at)

        logger.info(f"Updated category {category_id}", extra={"category_id": category_id})
        return category

    def delete(self, category_id: int) -> Category:
        with self._lock:
            removed = self._items.pop(self._index_of(category_id))
        logger.info(f"Deleted category {category_id}", extra={"category_id": category_id})
        return removed


class ProductCatalog:
    """Read-only list of products referencing categories by id."""

    def __init__(self, products: Optional[Iterable[Product]] = None):
        self._items: List[Product] = list(products or [])

    def __len__(self) -> int:
        return len(self._items)

    def list_by_category(self, category_id: int) -> List[Product]:
        return [p for p in self._items if p.category.id == category_id]
