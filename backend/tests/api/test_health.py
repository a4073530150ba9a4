"""API tests: health, root and tables endpoints."""
import pytest

pytestmark = pytest.mark.api


def test_api_health_returns_200(client):
    """GET /api/health returns 200 and service info."""
    r = client.get("/api/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok", "service": "vessel-type-proxy"}


def test_root_returns_info(client):
    """GET / returns service info and docs link."""
    r = client.get("/")
    assert r.status_code == 200
    data = r.json()
    assert data["service"] == "vessel-type-proxy"
    assert data["health"] == "/api/health"


def test_tables_lists_allow_list(client):
    """GET /api/tables returns the table names requests may target."""
    r = client.get("/api/tables")
    assert r.status_code == 200
    assert r.json() == ["unit_type"]
