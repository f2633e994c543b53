from mfg_api.services.change_feed import ChangeLog


def _feed(api, headers, table, after=None):
    params = {"after": after} if after is not None else None
    r = api.get(f"/realtime/{table}", params=params, headers=headers)
    assert r.status_code == 200
    return r.json()["data"]


def test_subscribe_returns_cursor_only(api, auth_headers):
    api.post("/rest/suppliers", json={"name": "Steel Industries Inc."}, headers=auth_headers)
    data = _feed(api, auth_headers, "suppliers")
    assert data["cursor"] == 1
    assert data["events"] == []
    assert data["truncated"] is False
    assert data["epoch"]


def test_events_after_cursor(api, auth_headers):
    start = _feed(api, auth_headers, "suppliers")["cursor"]

    created = api.post("/rest/suppliers", json={"name": "MetalWorks Co."}, headers=auth_headers).json()["data"]
    api.patch(f"/rest/suppliers/{created['id']}", json={"status": "Inactive"}, headers=auth_headers)
    api.post("/rest/customers", json={"name": "Acme"}, headers=auth_headers)
    api.delete(f"/rest/suppliers/{created['id']}", headers=auth_headers)

    data = _feed(api, auth_headers, "suppliers", after=start)
    assert [e["type"] for e in data["events"]] == ["INSERT", "UPDATE", "DELETE"]
    assert all(e["id"] == created["id"] for e in data["events"])
    assert data["cursor"] == 4

    # nothing new since the returned cursor
    assert _feed(api, auth_headers, "suppliers", after=data["cursor"])["events"] == []


def test_failed_write_publishes_nothing(api, auth_headers):
    api.patch("/rest/suppliers/77", json={"name": "Ghost"}, headers=auth_headers)
    assert _feed(api, auth_headers, "suppliers", after=0)["events"] == []


def test_unknown_table_and_key(api, auth_headers):
    assert api.get("/realtime/nope", headers=auth_headers).status_code == 404
    assert api.get("/realtime/suppliers").status_code == 401


def test_change_log_is_bounded():
    log = ChangeLog(maxlen=3)
    for i in range(5):
        log.publish("products", "INSERT", i + 1)
    data = log.since("products", 0)
    assert data["cursor"] == 5
    assert [e["seq"] for e in data["events"]] == [3, 4, 5]
    # seq 1 and 2 are gone
    assert data["truncated"] is True

    # a reader that saw seq 2 missed nothing
    assert log.since("products", 2)["truncated"] is False
    assert log.since("products", 4)["truncated"] is False


def test_reset_starts_a_new_epoch():
    log = ChangeLog()
    log.publish("suppliers", "INSERT", 1)
    before = log.since("suppliers", None)
    log.reset()
    after = log.since("suppliers", None)
    assert after["cursor"] == 0
    assert after["epoch"] != before["epoch"]


def test_partly_filled_log_is_never_truncated():
    log = ChangeLog(maxlen=10)
    for i in range(3):
        log.publish("defects", "UPDATE", 1)
    assert log.since("defects", 0)["truncated"] is False
