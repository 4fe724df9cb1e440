"""Shared fixtures: a small seeded store and a fresh application per test."""

from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from catalog_api.categories.schemas import Category, Product
from catalog_api.categories.store import CategoryStore, ProductCatalog
from catalog_api.config import Settings
from catalog_api.main import create_app

SEEDED_AT = datetime(2025, 1, 1, tzinfo=timezone.utc)


def make_category(id, name, slug, image="https://img.test/c.png"):
    return Category(
        id=id, name=name, slug=slug, image=image,
        creation_at=SEEDED_AT, updated_at=SEEDED_AT,
    )


def make_product(id, title, category):
    return Product.model_validate({
        "id": id,
        "title": title,
        "slug": title.lower().replace(" ", "-"),
        "price": 10,
        "description": "",
        "category": category.model_dump(by_alias=True, mode="json"),
        "images": [],
    })


@pytest.fixture
def store():
    return CategoryStore([make_category(1, "Shirts", "shirts")])


@pytest.fixture
def catalog():
    shirts = make_category(1, "Shirts", "shirts")
    # no category 7 exists in the store: a dangling reference
    shoes = make_category(7, "Shoes", "shoes")
    return ProductCatalog([
        make_product(1, "Oxford Shirt", shirts),
        make_product(2, "Running Shoe", shoes),
        make_product(3, "Linen Shirt", shirts),
    ])


@pytest.fixture
def settings():
    return Settings(log_format="text", expose_error_details=True)


@pytest.fixture
def app(settings, store, catalog):
    return create_app(settings, category_store=store, product_catalog=catalog)


@pytest.fixture
def client(app):
    return TestClient(app)
