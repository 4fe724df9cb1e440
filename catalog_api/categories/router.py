"""
Route definitions for the categories API.

Endpoints (mounted under ``settings.categories_prefix``, ``/categories``
by default):
- GET    /                : list categories, optional ``?name=`` filter
- GET    /{id}            : get one category
- GET    /slug/{slug}     : get one category by slug
- GET    /{id}/products   : products referencing a category
- POST   /                : create a category
- PUT    /{id}            : update selected fields of a category
- DELETE /{id}            : delete a category

Handlers only translate between HTTP and the store. Failures are
raised as ``CatalogError`` subclasses and turned into envelopes by the
handlers registered in ``catalog_api.error_handlers``.
"""

from __future__ import annotations

import re
from typing import Optional

from fastapi import APIRouter, Body, Depends, Query, Request, status

from ..errors import NotFoundError
from .schemas import (
    CategoryCreate,
    CategoryEnvelope,
    CategoryListEnvelope,
    CategoryUpdate,
    ProductListEnvelope,
)
from .store import CategoryStore, ProductCatalog


def get_category_store(request: Request) -> CategoryStore:
    return request.app.state.category_store


def get_product_catalog(request: Request) -> ProductCatalog:
    return request.app.state.product_catalog


_ID_PATTERN = re.compile(r"\s*[+-]?[0-9]+\s*")


def _parse_id(raw: str) -> int:
    """Convert a path id to ``int``; anything else can never match a category.

    Only optionally signed ASCII digits are accepted, so forms ``int()``
    would also take (``1_0``, non-ASCII digits) are treated as unknown ids.
    """
    if not _ID_PATTERN.fullmatch(raw):
        raise NotFoundError(raw)
    return int(raw)


def build_router(prefix: str = "/categories") -> APIRouter:
    router = APIRouter(prefix=prefix, tags=["categories"])

    @router.get("", response_model=CategoryListEnvelope)
    @router.get("/", response_model=CategoryListEnvelope, include_in_schema=False)
    def list_categories(
        name: Optional[str] = Query(default=None, description="Case-insensitive name filter"),
        store: CategoryStore = Depends(get_category_store),
    ):
        return CategoryListEnvelope(
            message="Get all categories successfully",
            data=store.list(name),
        )

    # Declared before the /{id} routes so /slug/products is a slug lookup.
    @router.get("/slug/{slug}", response_model=CategoryEnvelope)
    def get_category_by_slug(slug: str, store: CategoryStore = Depends(get_category_store)):
        return CategoryEnvelope(
            message="Get category by slug successfully",
            data=store.get_by_slug(slug),
        )

    @router.get("/{category_id}", response_model=CategoryEnvelope)
    def get_category(category_id: str, store: CategoryStore = Depends(get_category_store)):
        return CategoryEnvelope(
            message="Get category by ID successfully",
            data=store.get(_parse_id(category_id)),
        )

    @router.get("/{category_id}/products", response_model=ProductListEnvelope)
    def list_category_products(
        category_id: str,
        store: CategoryStore = Depends(get_category_store),
        catalog: ProductCatalog = Depends(get_product_catalog),
    ):
        cid = _parse_id(category_id)
        # raises NotFoundError when the category is unknown
        store.get(cid)
        products = catalog.list_by_category(cid)
        return ProductListEnvelope(
            message="Get products by category ID successfully",
            data=products,
            total=len(products),
        )

    @router.post("", status_code=status.HTTP_201_CREATED, response_model=CategoryEnvelope)
    @router.post(
        "/", status_code=status.HTTP_201_CREATED, response_model=CategoryEnvelope,
        include_in_schema=False,
    )
    def create_category(
        payload: Optional[CategoryCreate] = Body(default=None),
        store: CategoryStore = Depends(get_category_store),
    ):
        payload = payload or CategoryCreate()
        category = store.create(payload.name, payload.slug, payload.image)
        return CategoryEnvelope(message="Create category successfully", data=category)

    @router.put("/{category_id}", response_model=CategoryEnvelope)
    def update_category(
        category_id: str,
        payload: Optional[CategoryUpdate] = Body(default=None),
        store: CategoryStore = Depends(get_category_store),
    ):
        payload = payload or CategoryUpdate()
        category = store.update(
            _parse_id(category_id),
            name=payload.name,
            slug=payload.slug,
            image=payload.image,
        )
        return CategoryEnvelope(message="Update category successfully", data=category)

    @router.delete("/{category_id}", response_model=CategoryEnvelope)
    def delete_category(category_id: str, store: CategoryStore = Depends(get_category_store)):
        return CategoryEnvelope(
            message="Delete category successfully",
            data=store.delete(_parse_id(category_id)),
        )

    return router
