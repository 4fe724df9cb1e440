"""HTTP behaviour of the /categories routes."""

from fastapi.testclient import TestClient

from catalog_api.categories.schemas import Product
from catalog_api.categories.store import ProductCatalog
from catalog_api.main import create_app


def test_health_check_reports_category_count(client):
    res = client.get("/")
    assert res.status_code == 200
    assert res.json()["status"] == "ok"
    assert res.json()["categories"] == 1


def test_list_categories_envelope(client):
    res = client.get("/categories")

    body = res.json()
    assert res.status_code == 200
    assert body["success"] is True
    assert body["message"] == "Get all categories successfully"
    assert [c["slug"] for c in body["data"]] == ["shirts"]
    assert "total" not in body


def test_list_categories_name_filter(client):
    client.post("/categories", json={"name": "Hats", "slug": "hats", "image": "x"})

    res = client.get("/categories", params={"name": "hAt"})

    assert [c["name"] for c in res.json()["data"]] == ["Hats"]


def test_list_categories_empty_filter_returns_all(client):
    client.post("/categories", json={"name": "Hats", "slug": "hats", "image": "x"})
    assert len(client.get("/categories", params={"name": ""}).json()["data"]) == 2


def test_category_json_uses_camel_case_timestamps(client):
    data = client.get("/categories/1").json()["data"]
    assert set(data) == {"id", "name", "slug", "image", "creationAt", "updatedAt"}


def test_get_category_by_id(client):
    res = client.get("/categories/1")
    assert res.status_code == 200
    assert res.json()["message"] == "Get category by ID successfully"
    assert res.json()["data"]["name"] == "Shirts"


def test_get_unknown_category_is_404(client):
    res = client.get("/categories/99")
    assert res.status_code == 404
    assert res.json() == {"success": False, "message": "Category not found"}


def test_non_numeric_id_is_404(client):
    res = client.get("/categories/abc")
    assert res.status_code == 404
    assert res.json()["message"] == "Category not found"


def test_get_category_by_slug(client):
    res = client.get("/categories/slug/shirts")
    assert res.status_code == 200
    assert res.json()["message"] == "Get category by slug successfully"
    assert res.json()["data"]["id"] == 1


def test_get_unknown_slug_is_404(client):
    res = client.get("/categories/slug/nope")
    assert res.status_code == 404
    assert res.json()["message"] == "Category not found"


def test_products_by_category(client):
    res = client.get("/categories/1/products")

    body = res.json()
    assert res.status_code == 200
    assert body["message"] == "Get products by category ID successfully"
    assert [p["title"] for p in body["data"]] == ["Oxford Shirt", "Linen Shirt"]
    assert body["total"] == 2


def test_products_for_unknown_category_is_404(client):
    res = client.get("/categories/99/products")
    assert res.status_code == 404
    assert res.json() == {"success": False, "message": "Category not found"}


def test_products_for_category_without_products(client):
    created = client.post("/categories", json={"name": "Hats", "slug": "hats", "image": "x"})
    res = client.get(f"/categories/{created.json()['data']['id']}/products")
    assert res.json()["data"] == []
    assert res.json()["total"] == 0


def test_create_then_conflict_scenario(client, store):
    res = client.post("/categories", json={"name": "Hats", "slug": "hats", "image": "x"})

    assert res.status_code == 201
    data = res.json()["data"]
    assert res.json()["message"] == "Create category successfully"
    assert data["id"] == 2
    assert data["creationAt"] == data["updatedAt"]

    res = client.post("/categories", json={"name": "Caps", "slug": "hats", "image": "y"})

    assert res.status_code == 400
    assert res.json() == {"success": False, "message": "Slug already exists"}
    assert len(store) == 2


def test_create_with_trailing_slash(client):
    res = client.post("/categories/", json={"name": "Hats", "slug": "hats", "image": "x"})
    assert res.status_code == 201


def test_create_missing_field_is_400(client, store):
    res = client.post("/categories", json={"name": "Hats", "slug": "hats"})

    assert res.status_code == 400
    assert res.json() == {
        "success": False,
        "message": "Please provide name, slug, and image",
    }
    assert len(store) == 1


def test_create_without_body_is_400(client):
    res = client.post("/categories")
    assert res.status_code == 400
    assert res.json()["message"] == "Please provide name, slug, and image"


def test_create_with_wrong_field_type_is_400(client):
    res = client.post("/categories", json={"name": ["x"], "slug": "s", "image": "i"})
    body = res.json()
    assert res.status_code == 400
    assert body["success"] is False
    assert body["message"] == "Invalid request data"
    assert body["details"]


def test_update_with_unchanged_slug_scenario(client):
    res = client.put("/categories/1", json={"slug": "shirts"})
    assert res.status_code == 200
    assert res.json()["message"] == "Update category successfully"


def test_update_keeps_unspecified_fields(client):
    before = client.get("/categories/1").json()["data"]

    res = client.put("/categories/1", json={"image": "https://img.test/new.png"})

    after = res.json()["data"]
    assert after["image"] == "https://img.test/new.png"
    assert after["name"] == before["name"]
    assert after["slug"] == before["slug"]
    assert after["creationAt"] == before["creationAt"]


def test_update_to_taken_slug_is_400(client):
    client.post("/categories", json={"name": "Hats", "slug": "hats", "image": "x"})
    res = client.put("/categories/1", json={"slug": "hats"})
    assert res.status_code == 400
    assert res.json()["message"] == "Slug already exists"


def test_update_unknown_category_is_404(client):
    res = client.put("/categories/99", json={"name": "x"})
    assert res.status_code == 404


def test_delete_then_get_scenario(client):
    res = client.delete("/categories/1")
    assert res.status_code == 200
    assert res.json()["message"] == "Delete category successfully"
    assert res.json()["data"]["slug"] == "shirts"

    res = client.get("/categories/1")
    assert res.status_code == 404


def test_delete_unknown_category_is_404(client, store):
    res = client.delete("/categories/99")
    assert res.status_code == 404
    assert len(store) == 1


def test_delete_does_not_touch_products(client):
    client.delete("/categories/1")
    # products keep their reference, but the category lookup now fails
    assert client.get("/categories/1/products").status_code == 404


def test_id_accepts_sign_and_rejects_python_only_forms(client):
    for i in range(2, 11):
        client.post("/categories", json={"name": f"C{i}", "slug": f"c{i}", "image": "x"})

    assert client.get("/categories/1_0").status_code == 404
    assert client.get("/categories/1_0/products").status_code == 404
    assert client.delete("/categories/1_0").status_code == 404
    assert client.get("/categories/+10").json()["data"]["id"] == 10


def test_dangling_product_reference_surfaces_under_reused_id(client):
    assert client.get("/categories/7/products").status_code == 404

    for i in range(2, 8):
        client.post("/categories", json={"name": f"C{i}", "slug": f"c{i}", "image": "x"})

    res = client.get("/categories/7/products")
    assert [p["title"] for p in res.json()["data"]] == ["Running Shoe"]


def test_products_are_returned_as_loaded(store, settings):
    raw = {
        "id": 1,
        "title": "Classic Heather Gray Hoodie",
        "price": 69,
        "category": {"id": 1, "creationAt": "2025-01-05T08:12:31.000Z"},
        "images": ["https://i.imgur.com/cHddUCu.jpeg"],
    }
    app = create_app(
        settings, category_store=store,
        product_catalog=ProductCatalog([Product.model_validate(raw)]),
    )

    res = TestClient(app).get("/categories/1/products")

    assert res.json()["data"] == [raw]
