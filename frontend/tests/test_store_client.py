import os

import pytest
import requests

from mfg_ui.store import StoreClient, StoreError, ensure_array, unwrap


@pytest.fixture
def client(api):
    return StoreClient("http://testserver/", os.environ["STORE_API_KEY"], session=api)


def test_crud_against_store(client):
    created = client.insert("customers", {"name": "Acme Industries", "order_count": 12})
    assert created["status"] == "Active"

    updated = client.update("customers", created["id"], {"status": "Inactive"})
    assert updated["status"] == "Inactive"
    assert updated["order_count"] == 12

    assert [r["name"] for r in client.list("customers")] == ["Acme Industries"]
    assert client.count("customers") == 1

    assert client.delete("customers", created["id"]) is True
    assert client.list("customers") == []
    assert client.count("customers") == 0


def test_errors_become_store_errors(client, api):
    with pytest.raises(StoreError) as ei:
        client.delete("customers", 999)
    assert ei.value.status == 404
    assert "not found" in str(ei.value)

    with pytest.raises(StoreError) as ei:
        client.insert("customers", {"contact": "nobody"})
    assert ei.value.status == 422

    anonymous = StoreClient("http://testserver", "", session=api)
    with pytest.raises(StoreError) as ei:
        anonymous.list("customers")
    assert ei.value.status == 401
    assert "STORE_KEY" in str(ei.value)


def test_change_cursor(client):
    first = client.changes("products")
    assert first["cursor"] == 0 and first["events"] == []
    assert first["epoch"] and first["truncated"] is False
    client.insert("products", {"name": "Valve"})
    batch = client.changes("products", after=first["cursor"])
    assert batch["cursor"] == 1
    assert [e["type"] for e in batch["events"]] == ["INSERT"]


class _DownSession:
    def request(self, *args, **kwargs):
        raise requests.ConnectionError("refused")


def test_connection_failure():
    with pytest.raises(StoreError) as ei:
        StoreClient("http://127.0.0.1:1", "k", session=_DownSession()).list("products")
    assert "Could not connect" in str(ei.value)


def test_envelope_helpers():
    assert ensure_array({"ok": True, "data": [{"id": 1}]}) == [{"id": 1}]
    assert ensure_array([{"id": 2}]) == [{"id": 2}]
    assert ensure_array({"ok": True, "data": {"id": 3}}) == []
    assert unwrap({"ok": True, "data": {"id": 3}}) == {"id": 3}
    assert unwrap({"id": 4}) == {"id": 4}
