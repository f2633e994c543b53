import types

import pytest

from mfg_ui import views
from mfg_ui.notify import Notifier


def _ctx():
    return types.SimpleNamespace(notifier=Notifier())


def test_notices_become_toasts(monkeypatch):
    shown = []
    monkeypatch.setattr(views.st, "toast", lambda text, icon=None: shown.append((text, icon)))
    ctx = _ctx()
    ctx.notifier.success("Department Added", "Packaging has been added successfully.")
    ctx.notifier.warn("Department Deleted")

    views.flush_notices(ctx)

    assert shown == [
        ("**Department Added**: Packaging has been added successfully.", "✅"),
        ("**Department Deleted**", "⚠️"),
    ]
    assert ctx.notifier.pending == []


def test_toast_errors_are_not_hidden(monkeypatch):
    def broken(text, icon=None):
        raise RuntimeError("toast failed")

    monkeypatch.setattr(views.st, "toast", broken)
    ctx = _ctx()
    ctx.notifier.success("Profile Updated")

    with pytest.raises(RuntimeError):
        views.flush_notices(ctx)
