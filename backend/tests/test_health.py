from fastapi.testclient import TestClient
from mfg_api.main import app

def test_health_ok():
    with TestClient(app) as c:
        r = c.get("/health")

    assert r.status_code == 200

    ctype = r.headers.get("content-type", "")
    assert "application/json" in ctype
    data = r.json()
    assert isinstance(data, dict)
    # {"ok": true, "data": {...}}
    assert data.get("ok") is True
    assert data["data"]["service"]

def test_db_ping(api):
    r = api.get("/db-ping")
    assert r.status_code == 200
    assert r.json()["data"]["select1"] == 1

def test_routes_registered():
    paths = app.openapi()["paths"]
    assert "/rest/{table}" in paths
    assert "/realtime/{table}" in paths
