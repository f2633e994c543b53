# frontend/mfg_ui/feed.py
from __future__ import annotations

import itertools
import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

from .store import StoreError

logger = logging.getLogger(__name__)


@dataclass
class Subscription:
    handle: int
    table: str
    on_change: Callable[[List[dict]], None]


@dataclass
class _TableCursor:
    cursor: int = 0
    epoch: Optional[str] = None
    subscribers: Dict[int, Subscription] = field(default_factory=dict)


class ChangeFeed:
    """
    Per-table change notifications, pulled from the store's /realtime endpoint.

    subscribe() pins the table's current cursor so only later writes notify;
    poll() asks the store for events after that cursor and calls every
    subscriber of a table that changed once, with the batch of events.
    When the store lost track of the cursor (restart, or events dropped out of
    its window) subscribers are called as well, possibly with no events.
    """

    def __init__(self, client):
        self.client = client
        self._tables: Dict[str, _TableCursor] = {}
        self._handles = itertools.count(1)

    def subscribe(self, table: str, on_change: Callable[[List[dict]], None]) -> Subscription:
        state = self._tables.get(table)
        if state is None:
            state = _TableCursor()
            try:
                pinned = self.client.changes(table)
                state.cursor, state.epoch = pinned["cursor"], pinned.get("epoch")
            except StoreError as e:
                # next poll starts from 0 and may report a few stale events
                logger.warning("change feed subscribe failed for %s: %s", table, e)
            self._tables[table] = state
        sub = Subscription(next(self._handles), table, on_change)
        state.subscribers[sub.handle] = sub
        return sub

    def unsubscribe(self, sub: Subscription) -> None:
        state = self._tables.get(sub.table)
        if state is None:
            return
        state.subscribers.pop(sub.handle, None)
        if not state.subscribers:
            del self._tables[sub.table]

    def subscribed_tables(self) -> List[str]:
        return list(self._tables)

    @staticmethod
    def _lost_track(state: _TableCursor, batch) -> bool:
        if batch.get("truncated") or batch["cursor"] < state.cursor:
            return True
        return state.epoch is not None and batch.get("epoch") != state.epoch

    def poll(self) -> int:
        changed = 0
        for table, state in list(self._tables.items()):
            try:
                batch = self.client.changes(table, after=state.cursor)
            except StoreError as e:
                logger.warning("change feed poll failed for %s: %s", table, e)
                continue
            stale = self._lost_track(state, batch)
            state.epoch = batch.get("epoch")
            state.cursor = batch["cursor"] if stale else max(state.cursor, batch["cursor"])
            events = batch["events"]
            if not events and not stale:
                continue
            if stale:
                logger.info("change feed for %s restarted or truncated, resyncing", table)
            changed += 1
            for sub in list(state.subscribers.values()):
                sub.on_change(events)
        return changed
