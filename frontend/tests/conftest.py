import itertools

import pytest

from mfg_ui.cache import QueryCache
from mfg_ui.notify import Notifier
from mfg_ui.store import StoreError


class FakeStore:
    """In-memory stand-in for StoreClient; `fail_next` makes the next call raise."""

    def __init__(self):
        self.tables = {}
        self.ids = itertools.count(1)
        self.calls = []
        self.fail_next = None

    def _maybe_fail(self, op):
        self.calls.append(op)
        if self.fail_next:
            msg, self.fail_next = self.fail_next, None
            raise StoreError(msg, 500)

    def seed(self, table, *rows):
        for row in rows:
            self.tables.setdefault(table, []).append({"id": next(self.ids), "created_at": "2024-01-01T00:00:00", **row})

    def list(self, table, order="id"):
        self._maybe_fail("list")
        rows = [dict(r) for r in self.tables.get(table, [])]
        key = order.lstrip("-")
        return sorted(rows, key=lambda r: (r.get(key) is None, r.get(key)), reverse=order.startswith("-"))

    def insert(self, table, record):
        self._maybe_fail("insert")
        row = {"id": next(self.ids), "created_at": "2024-01-01T00:00:00", **record}
        self.tables.setdefault(table, []).append(row)
        return dict(row)

    def update(self, table, row_id, patch):
        self._maybe_fail("update")
        for row in self.tables.get(table, []):
            if row["id"] == row_id:
                row.update({k: v for k, v in patch.items() if k not in ("id", "created_at")})
                return dict(row)
        raise StoreError(f"Not found (404): {table} row {row_id} not found", 404)

    def delete(self, table, row_id):
        self._maybe_fail("delete")
        rows = self.tables.get(table, [])
        for i, row in enumerate(rows):
            if row["id"] == row_id:
                del rows[i]
                return True
        raise StoreError(f"Not found (404): {table} row {row_id} not found", 404)

    def count(self, table):
        self._maybe_fail("count")
        return len(self.tables.get(table, []))


@pytest.fixture
def store():
    return FakeStore()


@pytest.fixture
def cache():
    return QueryCache()


@pytest.fixture
def notifier():
    return Notifier()
