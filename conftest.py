# conftest.py
import os
import tempfile

import pytest

# The store reads its settings at import time; point it at a throwaway SQLite file.
_DB_FILE = os.path.join(tempfile.mkdtemp(prefix="mfg_store_"), "store.db")
os.environ["DATABASE_URL"] = f"sqlite:///{_DB_FILE}"
os.environ["STORE_API_KEY"] = "test-store-key"

STORE_KEY = os.environ["STORE_API_KEY"]


@pytest.fixture
def fresh_store():
    """Empty tables and an empty change log."""
    from mfg_api.core.db import Base, engine
    from mfg_api import models  # noqa: F401
    from mfg_api.services.change_feed import change_log

    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    change_log.reset()
    yield
    change_log.reset()


@pytest.fixture
def api(fresh_store):
    from fastapi.testclient import TestClient
    from mfg_api.main import app

    with TestClient(app) as c:
        yield c


@pytest.fixture
def auth_headers():
    return {"apikey": STORE_KEY}
