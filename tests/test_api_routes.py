"""
HTTP contract of /api/orders, /api/products and /api/schools.
"""
from __future__ import annotations

import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Garantiza que el paquete api sea importable durante los tests locales
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from api.app import create_app  # noqa: E402
from api.core import config as core_config  # noqa: E402
from api.repositories.seed import INITIAL_PRODUCTS, INITIAL_SCHOOLS  # noqa: E402


@pytest.fixture()
def client(tmp_path, monkeypatch):
    """App apuntando a un directorio de datos temporal; el lifespan crea los archivos."""
    monkeypatch.setenv("DATA_DIR", str(tmp_path / "data"))
    monkeypatch.setenv("PUBLIC_DIR", str(tmp_path / "public"))
    core_config.get_settings.cache_clear()
    app = create_app()
    with TestClient(app) as test_client:
        yield test_client
    core_config.get_settings.cache_clear()


def test_startup_seeds_catalog(client):
    assert client.get("/api/orders").json() == []
    assert client.get("/api/products").json() == INITIAL_PRODUCTS
    assert client.get("/api/schools").json() == INITIAL_SCHOOLS


def test_order_lifecycle(client):
    resp = client.post("/api/orders", json={"customer": "Ana", "status": "Pagado"})
    assert resp.status_code == 201
    body = resp.json()
    assert body["success"] is True
    order = body["order"]
    assert order["status"] == "New"
    assert order["customer"] == "Ana"

    assert client.get("/api/orders").json() == [order]

    resp = client.delete(f"/api/orders/{order['id']}")
    assert resp.status_code == 200
    assert resp.json() == {"success": True}
    assert client.get("/api/orders").json() == []

    resp = client.delete(f"/api/orders/{order['id']}")
    assert resp.status_code == 200


def test_create_order_without_body(client):
    resp = client.post("/api/orders")
    assert resp.status_code == 201
    assert resp.json()["order"]["status"] == "New"


def test_order_save_failure_is_500(client, monkeypatch):
    store = client.app.state.order_service.store
    monkeypatch.setattr(store, "save", lambda records: False)
    resp = client.post("/api/orders", json={"customer": "Ana"})
    assert resp.status_code == 500
    assert resp.json() == {"success": False, "error": "Error al guardar el pedido"}

    resp = client.delete("/api/orders/1")
    assert resp.status_code == 500
    assert resp.json()["success"] is False


def test_product_create_update_delete(client):
    resp = client.post("/api/products", json={"name": "Campera", "price": 21000, "category": "abrigo", "stock": 3})
    assert resp.status_code == 201
    product = resp.json()["product"]
    assert product["image"] == "fas fa-tshirt"

    resp = client.put(f"/api/products/{product['id']}", json={"stock": 2, "id": 1})
    assert resp.status_code == 200
    updated = resp.json()["product"]
    assert updated == {**product, "stock": 2}

    resp = client.delete(f"/api/products/{product['id']}")
    assert resp.status_code == 200
    assert client.get("/api/products").json() == INITIAL_PRODUCTS


def test_update_unknown_product_is_404(client):
    resp = client.put("/api/products/424242", json={"price": 1})
    assert resp.status_code == 404
    assert resp.json() == {"success": False, "error": "Producto no encontrado"}
    assert client.get("/api/products").json() == INITIAL_PRODUCTS


def test_school_routes(client):
    resp = client.post("/api/schools", json={"name": "Escuela X"})
    assert resp.status_code == 201
    assert resp.json() == {"success": True, "school": "Escuela X"}

    resp = client.post("/api/schools", json={"name": "Escuela X"})
    assert resp.status_code == 400
    assert resp.json()["success"] is False

    assert client.post("/api/schools", json={}).status_code == 400

    schools = client.get("/api/schools").json()
    assert schools.count("Escuela X") == 1

    resp = client.delete("/api/schools/1")
    assert resp.status_code == 200
    assert client.get("/api/schools").json() == schools[:1] + schools[2:]

    resp = client.delete("/api/schools/500")
    assert resp.status_code == 404
    assert resp.json() == {"success": False, "error": "Escuela no encontrada"}


def test_corrupted_collection_is_served_empty_then_repaired(client, tmp_path):
    products_file = tmp_path / "data" / "products.json"
    products_file.write_text("not json", encoding="utf-8")
    assert client.get("/api/products").json() == []

    resp = client.post("/api/products", json={"name": "Medias"})
    assert resp.status_code == 201
    assert client.get("/api/products").json() == [resp.json()["product"]]


def test_strict_reads_surface_corruption(tmp_path, monkeypatch):
    monkeypatch.setenv("DATA_DIR", str(tmp_path / "data"))
    monkeypatch.setenv("PUBLIC_DIR", str(tmp_path / "public"))
    monkeypatch.setenv("READ_FAIL_OPEN", "false")
    core_config.get_settings.cache_clear()
    try:
        with TestClient(create_app()) as client:
            (tmp_path / "data" / "schools.json").write_text("[", encoding="utf-8")
            resp = client.get("/api/schools")
            assert resp.status_code == 500
            assert resp.json()["success"] is False
    finally:
        core_config.get_settings.cache_clear()


def test_static_front_end_is_served(tmp_path, monkeypatch):
    public = tmp_path / "public"
    public.mkdir()
    (public / "index.html").write_text("<h1>Cylaba</h1>", encoding="utf-8")
    monkeypatch.setenv("DATA_DIR", str(tmp_path / "data"))
    monkeypatch.setenv("PUBLIC_DIR", str(public))
    core_config.get_settings.cache_clear()
    try:
        with TestClient(create_app()) as client:
            assert "Cylaba" in client.get("/").text
            assert client.get("/api/orders").json() == []
    finally:
        core_config.get_settings.cache_clear()


def test_product_and_school_save_failures_are_500(client, monkeypatch):
    monkeypatch.setattr(client.app.state.product_service.store, "save", lambda records: False)
    monkeypatch.setattr(client.app.state.school_service.store, "save", lambda records: False)

    resp = client.put("/api/products/1", json={"price": 1})
    assert resp.status_code == 500
    assert resp.json() == {"success": False, "error": "Error al actualizar el producto"}

    resp = client.delete("/api/products/1")
    assert resp.status_code == 500
    assert resp.json() == {"success": False, "error": "Error al eliminar el producto"}

    resp = client.post("/api/schools", json={"name": "Escuela Nueva"})
    assert resp.status_code == 500
    assert resp.json() == {"success": False, "error": "Error al guardar la escuela"}

    resp = client.delete("/api/schools/0")
    assert resp.status_code == 500
    assert resp.json()["success"] is False

    assert client.get("/api/products").json() == INITIAL_PRODUCTS
    assert client.get("/api/schools").json() == INITIAL_SCHOOLS


def test_cors_allows_patch_preflight(client):
    resp = client.options(
        "/api/products/1",
        headers={"Origin": "http://localhost:5173", "Access-Control-Request-Method": "PATCH"},
    )
    assert resp.status_code == 200
    assert "PATCH" in resp.headers["access-control-allow-methods"]
