"""
Categories package for the catalogue API.

Exposes the REST endpoints for browsing and editing storefront
categories, along with the read-only lookup of the products filed
under each one. Data lives in memory for the lifetime of the process
and is seeded from the JSON files under ``catalog_api/data``.
"""

from .router import build_router as build_categories_router  # noqa: F401
