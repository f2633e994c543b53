def _data(r):
    body = r.json()
    assert body["ok"] is True, body
    return body["data"]


def test_requires_store_key(api):
    r = api.get("/rest/departments")
    assert r.status_code == 401
    assert r.json() == {"ok": False, "error": "Invalid or missing store key"}

    r = api.get("/rest/departments", headers={"Authorization": "Bearer test-store-key"})
    assert r.status_code == 200


def test_unknown_table_is_404(api, auth_headers):
    r = api.get("/rest/machines", headers=auth_headers)
    assert r.status_code == 404
    assert r.json()["ok"] is False
    assert "machines" in r.json()["error"]


def test_insert_and_list(api, auth_headers):
    r = api.post("/rest/departments", json={"name": "Packaging", "location": "Building D", "manager": "Ann Lee"},
                 headers=auth_headers)
    assert r.status_code == 201
    created = _data(r)
    assert created["id"] >= 1
    assert created["employee_count"] == 0
    assert created["created_at"]

    r = api.get("/rest/departments", headers=auth_headers)
    rows = _data(r)
    assert r.json()["meta"]["count"] == 1
    assert rows[0]["name"] == "Packaging"
    assert rows[0]["employee_count"] == 0


def test_list_order(api, auth_headers):
    for name in ("Beta", "Alpha", "Gamma"):
        api.post("/rest/suppliers", json={"name": name}, headers=auth_headers)

    by_id = [r["name"] for r in _data(api.get("/rest/suppliers", headers=auth_headers))]
    assert by_id == ["Beta", "Alpha", "Gamma"]

    by_name = _data(api.get("/rest/suppliers", params={"order": "name"}, headers=auth_headers))
    assert [r["name"] for r in by_name] == ["Alpha", "Beta", "Gamma"]

    desc = _data(api.get("/rest/suppliers", params={"order": "-id"}, headers=auth_headers))
    assert [r["name"] for r in desc] == ["Gamma", "Alpha", "Beta"]

    r = api.get("/rest/suppliers", params={"order": "nope"}, headers=auth_headers)
    assert r.status_code == 400


def test_update_keeps_unpatched_fields(api, auth_headers):
    created = _data(api.post("/rest/products", json={"name": "Valve", "sku": "V-1", "price": "$10.00", "stock": 5},
                             headers=auth_headers))
    r = api.patch(f"/rest/products/{created['id']}", json={"stock": 7, "id": 999}, headers=auth_headers)
    updated = _data(r)
    assert updated["id"] == created["id"]
    assert updated["created_at"] == created["created_at"]
    assert updated["stock"] == 7
    assert updated["sku"] == "V-1"
    assert updated["price"] == "$10.00"


def test_update_and_delete_missing_row(api, auth_headers):
    r = api.patch("/rest/customers/42", json={"name": "X"}, headers=auth_headers)
    assert r.status_code == 404
    r = api.delete("/rest/customers/42", headers=auth_headers)
    assert r.status_code == 404
    assert r.json()["ok"] is False


def test_delete(api, auth_headers):
    created = _data(api.post("/rest/customers", json={"name": "Acme"}, headers=auth_headers))
    r = api.delete(f"/rest/customers/{created['id']}", headers=auth_headers)
    assert _data(r) == {"id": created["id"]}
    assert _data(api.get("/rest/customers", headers=auth_headers)) == []


def test_validation_errors(api, auth_headers):
    # name is required
    r = api.post("/rest/departments", json={"location": "Nowhere"}, headers=auth_headers)
    assert r.status_code == 422
    assert r.json()["error"].startswith("Validation error")

    r = api.post("/rest/defects", json={"product": "Valve", "severity": "Apocalyptic"}, headers=auth_headers)
    assert r.status_code == 422


def test_count(api, auth_headers):
    assert _data(api.get("/rest/employees/count", headers=auth_headers)) == {"count": 0}
    api.post("/rest/employees", json={"name": "John Smith", "department": "Production"}, headers=auth_headers)
    api.post("/rest/employees", json={"name": "Sarah Johnson"}, headers=auth_headers)
    assert _data(api.get("/rest/employees/count", headers=auth_headers)) == {"count": 2}


def test_material_mapping_roundtrip(api, auth_headers):
    r = api.post("/rest/material_mappings",
                 json={"product": "Valve", "material": "Stainless Steel", "quantity": 2.5, "unit": "kg", "cost": "$31.25"},
                 headers=auth_headers)
    created = _data(r)
    assert created["quantity"] == 2.5
    assert created["cost"] == "$31.25"
