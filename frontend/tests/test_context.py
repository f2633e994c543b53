from mfg_ui.config import StoreConfig
from mfg_ui.context import DashboardContext
from mfg_ui.entities import ALL_SPECS, DEPARTMENTS, PRODUCTS


def _ctx(api, key="test-store-key"):
    return DashboardContext(StoreConfig(url="http://testserver", key=key), session=api)


def test_one_active_screen_at_a_time(api):
    ctx = _ctx(api)
    deps = ctx.activate(DEPARTMENTS)
    assert deps.mounted and ctx.feed.subscribed_tables() == ["departments"]

    prods = ctx.activate(PRODUCTS)
    assert prods.mounted and not deps.mounted
    assert ctx.feed.subscribed_tables() == ["products"]
    assert ctx.activate(PRODUCTS) is prods

    ctx.deactivate()
    assert ctx.active is None and ctx.feed.subscribed_tables() == []


def test_counts(api):
    ctx = _ctx(api)
    ctx.activate(DEPARTMENTS).create({"name": "Packaging"})
    counts = ctx.counts([s.table for s in ALL_SPECS])
    assert counts["departments"] == 1
    assert counts["defects"] == 0


def test_counts_failure_is_none(api):
    ctx = _ctx(api, key="wrong")
    assert ctx.counts(["departments"]) == {"departments": None}


def test_reset(api):
    ctx = _ctx(api)
    ctx.activate(DEPARTMENTS)
    ctx.notifier.success("hello")
    ctx.reset()
    assert ctx.screens == {} and ctx.active is None
    assert ctx.notifier.pending == []
    assert ctx.cache.peek("departments", ("list", "id")) is None
