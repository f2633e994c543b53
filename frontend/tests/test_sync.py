import mfg_api.routers.realtime as realtime
import mfg_api.services.row_service as row_service
from mfg_api.services import change_feed
from mfg_api.services.change_feed import ChangeLog

from mfg_ui.cache import QueryCache
from mfg_ui.config import StoreConfig
from mfg_ui.context import DashboardContext
from mfg_ui.entities import DEPARTMENTS, EMPLOYEES, SUPPLIERS
from mfg_ui.entity import EntityScreen
from mfg_ui.feed import ChangeFeed
from mfg_ui.notify import Notifier
from mfg_ui.store import StoreClient


def _dashboard(api, key):
    store = StoreClient("http://testserver", key, session=api)
    feed = ChangeFeed(store)
    return store, feed, QueryCache(), Notifier()


def test_other_clients_write_reaches_mounted_screen(api):
    key = "test-store-key"
    store_a, feed_a, cache_a, notes_a = _dashboard(api, key)
    store_b, feed_b, cache_b, notes_b = _dashboard(api, key)

    screen_a = EntityScreen(SUPPLIERS, store_a, cache_a, notes_a, feed_a)
    screen_b = EntityScreen(SUPPLIERS, store_b, cache_b, notes_b, feed_b)
    screen_a.mount()
    screen_b.mount()
    assert screen_b.rows == []

    screen_a.create({**SUPPLIERS.blank_draft(), "name": "Steel Industries Inc.", "materials": "Stainless Steel"})
    assert [r["name"] for r in screen_a.rows] == ["Steel Industries Inc."]

    # B still shows its cached list until the feed reports the insert
    assert screen_b.rows == []
    assert feed_b.poll() == 1
    assert [r["name"] for r in screen_b.rows] == ["Steel Industries Inc."]

    # nothing new: no reload
    assert feed_b.poll() == 0


def test_unmounted_screen_stops_listening(api):
    key = "test-store-key"
    store_a, _, cache_a, notes_a = _dashboard(api, key)
    store_b, feed_b, cache_b, notes_b = _dashboard(api, key)

    screen_b = EntityScreen(DEPARTMENTS, store_b, cache_b, notes_b, feed_b)
    screen_b.mount()
    assert feed_b.subscribed_tables() == ["departments"]
    screen_b.unmount()
    assert feed_b.subscribed_tables() == []

    EntityScreen(DEPARTMENTS, store_a, cache_a, notes_a).create({"name": "Packaging"})
    assert feed_b.poll() == 0
    assert screen_b.rows == []


def test_only_subscribed_table_reloads(api):
    key = "test-store-key"
    store_a, _, cache_a, notes_a = _dashboard(api, key)
    store_b, feed_b, cache_b, notes_b = _dashboard(api, key)

    suppliers_b = EntityScreen(SUPPLIERS, store_b, cache_b, notes_b, feed_b)
    suppliers_b.mount()

    EntityScreen(DEPARTMENTS, store_a, cache_a, notes_a).create({"name": "Packaging"})
    assert feed_b.poll() == 0


def test_returning_to_a_page_shows_writes_made_meanwhile(api):
    key = "test-store-key"
    ctx_a = DashboardContext(StoreConfig(url="http://testserver", key=key), session=api)
    ctx_b = DashboardContext(StoreConfig(url="http://testserver", key=key), session=api)

    ctx_a.activate(DEPARTMENTS)
    ctx_a.activate(EMPLOYEES)
    ctx_b.activate(DEPARTMENTS).create({"name": "Packaging"})

    deps_a = ctx_a.activate(DEPARTMENTS)
    assert [r["name"] for r in deps_a.rows] == ["Packaging"]


def test_store_restart_forces_reload(api):
    key = "test-store-key"
    store_a, _, cache_a, notes_a = _dashboard(api, key)
    store_b, feed_b, cache_b, notes_b = _dashboard(api, key)
    writer = EntityScreen(SUPPLIERS, store_a, cache_a, notes_a)
    for i in range(3):
        writer.create({"name": f"S{i}"})

    screen_b = EntityScreen(SUPPLIERS, store_b, cache_b, notes_b, feed_b)
    screen_b.mount()
    change_feed.change_log.reset()  # the store process came back with an empty log

    writer.create({"name": "After restart"})

    assert feed_b.poll() == 1
    assert [r["name"] for r in screen_b.rows] == ["S0", "S1", "S2", "After restart"]
    assert feed_b.poll() == 0


def test_reader_behind_the_window_reloads(api, monkeypatch):
    small = ChangeLog(maxlen=2)
    # the router and the row service hold the log by name
    monkeypatch.setattr(realtime, "change_log", small)
    monkeypatch.setattr(row_service, "change_log", small)

    key = "test-store-key"
    store_a, _, cache_a, notes_a = _dashboard(api, key)
    store_b, feed_b, cache_b, notes_b = _dashboard(api, key)

    screen_b = EntityScreen(SUPPLIERS, store_b, cache_b, notes_b, feed_b)
    screen_b.mount()

    EntityScreen(SUPPLIERS, store_a, cache_a, notes_a).create({"name": "MetalWorks Co."})
    departments_a = EntityScreen(DEPARTMENTS, store_a, cache_a, notes_a)
    departments_a.create({"name": "Packaging"})
    departments_a.create({"name": "Logistics"})

    # the supplier insert fell out of the window; only department events remain
    assert feed_b.poll() == 1
    assert [r["name"] for r in screen_b.rows] == ["MetalWorks Co."]
