# frontend/mfg_ui/entity.py
"""
Generic entity screen: one backing table, its loaded collection and the
add / edit / delete dialog state.

Every CRUD page of the dashboard is an EntityScreen driven by an EntitySpec
(see mfg_ui.entities); the Streamlit layer in mfg_ui.views only renders it.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

from .store import StoreError

logger = logging.getLogger(__name__)

# form field kinds
TEXT = "text"
TEXTAREA = "textarea"
NUMBER = "number"      # integer, unparsable input -> 0
DECIMAL = "decimal"    # float, unparsable input -> 0
MONEY = "money"        # stored as "$<value>"
DATE = "date"          # ISO string
SELECT = "select"

CURRENCY = "$"


@dataclass(frozen=True)
class Column:
    key: str
    label: str


@dataclass(frozen=True)
class Field:
    name: str
    label: str
    kind: str = TEXT
    required: bool = False
    options: Tuple[str, ...] = ()
    # (table, column) to fill a select from another table's rows
    options_from: Optional[Tuple[str, str]] = None
    default: Any = ""


# ---------- coercion helpers ----------
def to_int(value) -> int:
    try:
        num = float(str(value).strip())
    except (TypeError, ValueError):
        return 0
    return int(num) if math.isfinite(num) else 0


def to_float(value) -> float:
    try:
        num = float(str(value).strip())
    except (TypeError, ValueError):
        return 0.0
    return num if math.isfinite(num) else 0.0


def strip_currency(value) -> str:
    return str(value or "").strip().lstrip(CURRENCY).strip()


def to_money(value) -> str:
    raw = strip_currency(value)
    return f"{CURRENCY}{raw}" if raw else ""


def _cell_text(value) -> str:
    return "" if value is None else str(value)


def search_rows(rows: Sequence[Dict[str, Any]], columns: Sequence[Column], query: str) -> List[Dict[str, Any]]:
    """Case-insensitive substring match; a row matches when ANY display column contains the query."""
    q = (query or "").lower()
    if not q:
        return list(rows)
    keys = [c.key for c in columns]
    return [r for r in rows if any(q in _cell_text(r.get(k)).lower() for k in keys)]


def _identity(row: Dict[str, Any]) -> Dict[str, Any]:
    return dict(row)


def _by_name(row: Dict[str, Any]) -> str:
    return _cell_text(row.get("name"))


@dataclass
class EntitySpec:
    name: str                      # singular, e.g. "Department"
    title: str                     # plural, e.g. "Departments"
    table: str
    columns: Tuple[Column, ...]
    fields: Tuple[Field, ...]
    subtitle: str = ""
    order: str = "id"
    insert_defaults: Dict[str, Any] = field(default_factory=dict)
    to_view: Callable[[Dict[str, Any]], Dict[str, Any]] = _identity
    to_record: Callable[[Dict[str, Any]], Dict[str, Any]] = _identity
    describe: Callable[[Dict[str, Any]], str] = _by_name
    added_title: str = ""

    def blank_draft(self) -> Dict[str, Any]:
        return {f.name: f.default for f in self.fields}

    def draft_from(self, row: Dict[str, Any]) -> Dict[str, Any]:
        """Form representation of a stored row (edit dialog prefill)."""
        draft = {}
        for f in self.fields:
            value = row.get(f.name, f.default)
            if f.kind == MONEY:
                value = strip_currency(value)
            elif value is None:
                value = f.default
            draft[f.name] = value
        return draft

    def build_record(self, draft: Dict[str, Any]) -> Dict[str, Any]:
        """Draft -> store record: per-kind coercion, then the entity's own transform."""
        record: Dict[str, Any] = {}
        for f in self.fields:
            value = draft.get(f.name, f.default)
            if f.kind == NUMBER:
                value = to_int(value)
            elif f.kind == DECIMAL:
                value = to_float(value)
            elif f.kind == MONEY:
                value = to_money(value)
            elif value is None:
                value = ""
            else:
                value = str(value)
            record[f.name] = value
        return self.to_record(record)

    def missing_required(self, draft: Dict[str, Any]) -> List[str]:
        return [f.label for f in self.fields if f.required and not _cell_text(draft.get(f.name)).strip()]


class EntityScreen:
    """
    Owns the in-memory copy of one table plus the three dialogs.

    Writes never touch `rows` directly: a confirmed write invalidates the
    table in the query cache and reloads. Notifications from the change feed
    do the same for writes made by other clients.
    """

    def __init__(self, spec: EntitySpec, store, cache, notifier, feed=None):
        self.spec = spec
        self.store = store
        self.cache = cache
        self.notifier = notifier
        self.feed = feed

        self.rows: List[Dict[str, Any]] = []
        self.loaded = False
        self.loading = False

        self.add_open = False
        self.edit_open = False
        self.delete_open = False
        # each dialog keeps its own row; both can be open at once
        self.edit_target: Optional[Dict[str, Any]] = None
        self.delete_target: Optional[Dict[str, Any]] = None
        self.draft: Dict[str, Any] = spec.blank_draft()

        self.mounted = False
        self._subscription = None
        self._disposed = False

    # ---------- lifecycle ----------
    def mount(self) -> List[Dict[str, Any]]:
        if self.mounted:
            return self.rows
        self.mounted = True
        self._disposed = False
        if self.feed is not None:
            self._subscription = self.feed.subscribe(self.spec.table, self._on_change)
        # writes made while unmounted never reached this screen
        return self.reload()

    def unmount(self) -> None:
        if self.feed is not None and self._subscription is not None:
            self.feed.unsubscribe(self._subscription)
        self._subscription = None
        self.mounted = False
        self._disposed = True

    def _on_change(self, events) -> None:
        if self._disposed:
            return
        logger.debug("%s changed (%d events), reloading", self.spec.table, len(events))
        self.reload()

    # ---------- reads ----------
    def _fetch(self) -> List[Dict[str, Any]]:
        return self.store.list(self.spec.table, order=self.spec.order)

    def load(self) -> List[Dict[str, Any]]:
        self.loading = True
        try:
            raw = self.cache.get(self.spec.table, ("list", self.spec.order), self._fetch)
        except StoreError as e:
            self.notifier.error("Error", f"Failed to fetch {self.spec.title.lower()}: {e}", e)
            if not self._disposed:
                # finished, just empty-handed; keep whatever was shown before
                self.loaded = True
            return []
        finally:
            self.loading = False

        rows = [self.spec.to_view(r) for r in raw]
        if self._disposed:
            # screen went away while the request was in flight
            return rows
        self.rows = rows
        self.loaded = True
        return rows

    def reload(self) -> List[Dict[str, Any]]:
        self.cache.invalidate(self.spec.table)
        return self.load()

    def search(self, query: str) -> List[Dict[str, Any]]:
        return search_rows(self.rows, self.spec.columns, query)

    def field_options(self, f: Field) -> List[str]:
        if f.options_from is None:
            return list(f.options)
        table, column = f.options_from

        def _names():
            return [r.get(column) for r in self.store.list(table, order=column) if r.get(column)]

        try:
            return list(self.cache.get(table, ("options", column), _names))
        except StoreError as e:
            logger.error("Error fetching %s for %s: %s", table, f.name, e)
            return []

    # ---------- dialogs ----------
    def open_add(self) -> None:
        self.draft = self.spec.blank_draft()
        self.add_open = True

    def open_edit(self, row: Dict[str, Any]) -> None:
        self.edit_target = row
        self.draft = self.spec.draft_from(row)
        self.edit_open = True

    def open_delete(self, row: Dict[str, Any]) -> None:
        self.delete_target = row
        self.delete_open = True

    def close_dialogs(self) -> None:
        self.add_open = self.edit_open = self.delete_open = False

    # ---------- writes ----------
    def create(self, draft: Optional[Dict[str, Any]] = None) -> Optional[Dict[str, Any]]:
        draft = dict(self.draft if draft is None else draft)
        record = {**self.spec.insert_defaults, **self.spec.build_record(draft)}
        try:
            created = self.store.insert(self.spec.table, record)
        except StoreError as e:
            self.draft = draft
            self.notifier.error("Error", f"Failed to add {self.spec.name.lower()}: {e}", e)
            return None

        self.add_open = False
        title = self.spec.added_title or f"{self.spec.name} Added"
        self.notifier.success(title, f"{self.spec.describe(record)} has been added successfully.")
        self.reload()
        return created

    def update(self, row_id: int, patch: Optional[Dict[str, Any]] = None) -> Optional[Dict[str, Any]]:
        patch = dict(self.draft if patch is None else patch)
        record = self.spec.build_record(patch)
        try:
            updated = self.store.update(self.spec.table, row_id, record)
        except StoreError as e:
            self.draft = patch
            self.notifier.error("Error", f"Failed to update {self.spec.name.lower()}: {e}", e)
            return None

        self.edit_open = False
        self.notifier.success(f"{self.spec.name} Updated", f"{self.spec.describe(record)} has been updated successfully.")
        self.reload()
        return updated

    def remove(self, row_id: int) -> bool:
        target = self.delete_target if self.delete_target and self.delete_target.get("id") == row_id else {"id": row_id}
        try:
            self.store.delete(self.spec.table, row_id)
        except StoreError as e:
            self.notifier.error("Error", f"Failed to delete {self.spec.name.lower()}: {e}", e)
            return False

        self.delete_open = False
        self.notifier.warn(f"{self.spec.name} Deleted", f"{self.spec.describe(target)} has been deleted successfully.")
        self.reload()
        return True

    # dialog submit shortcuts used by the view
    def submit_add(self):
        return self.create()

    def submit_edit(self):
        if not self.edit_target:
            return None
        return self.update(self.edit_target["id"])

    def confirm_delete(self) -> bool:
        if not self.delete_target:
            return False
        return self.remove(self.delete_target["id"])
