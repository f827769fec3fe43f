from fastapi.testclient import TestClient

from address_gateway.api.routes.health import get_health
from address_gateway.main import app


def test_routes_exist():
    paths = app.openapi()["paths"]
    assert "/health" in paths
    assert "get" in paths["/search"]
    assert "post" in paths["/api/search-address"]


def test_health_ok():
    client = TestClient(app)
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


def test_health_ignores_missing_api_key(keyless_client, upstream):
    resp = keyless_client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}
    assert upstream.requests == []


def test_health_function():
    import asyncio

    assert asyncio.run(get_health()).model_dump() == {"status": "ok"}


def test_root_redirects_to_test_page():
    client = TestClient(app)
    resp = client.get("/", follow_redirects=False)
    assert resp.status_code == 302
    assert resp.headers["location"] == "/test/index.html"


def test_test_page_is_served():
    client = TestClient(app)
    resp = client.get("/test/index.html")
    assert resp.status_code == 200
    assert "/api/search-address" in resp.text


def test_correlation_id_is_echoed(client, upstream):
    resp = client.get("/health", headers={"X-Correlation-ID": "abc-123"})
    assert resp.headers["X-Correlation-ID"] == "abc-123"


def test_correlation_id_is_generated(client):
    resp = client.get("/health")
    assert resp.headers["X-Correlation-ID"]
