from __future__ import annotations
import os
import threading
import uuid
from collections import deque
from datetime import datetime, timezone
from typing import Deque, Dict, List, Optional

from ..domain.constants import EVENT_DELETE, EVENT_INSERT, EVENT_UPDATE

DEFAULT_LOG_SIZE = 1000


class ChangeLog:
    """
    In-process, bounded log of row changes.

    Sequence numbers are global and strictly increasing within one `epoch`;
    readers keep the last seq they saw per table and ask for everything after
    it. The epoch changes whenever the log starts over (process start, reset),
    so a reader holding a cursor from an older epoch knows it must resync.

    Old events fall off the left end once `maxlen` is reached. A reader whose
    cursor is older than the retained window gets `truncated: True`; the
    events it missed may have touched its table.
    """

    def __init__(self, maxlen: int = DEFAULT_LOG_SIZE):
        self._lock = threading.Lock()
        self._events: Deque[Dict] = deque(maxlen=maxlen)
        self._seq = 0
        self._epoch = uuid.uuid4().hex

    @property
    def cursor(self) -> int:
        with self._lock:
            return self._seq

    @property
    def epoch(self) -> str:
        with self._lock:
            return self._epoch

    def publish(self, table: str, event_type: str, row_id: int) -> Dict:
        if event_type not in (EVENT_INSERT, EVENT_UPDATE, EVENT_DELETE):
            raise ValueError(f"unknown event type: {event_type}")
        with self._lock:
            self._seq += 1
            event = {
                "seq": self._seq,
                "table": table,
                "type": event_type,
                "id": row_id,
                "at": datetime.now(tz=timezone.utc).isoformat(),
            }
            self._events.append(event)
            return event

    def _dropped_since(self, after: int) -> bool:
        # nothing is dropped until the deque is full
        if len(self._events) < self._events.maxlen:
            return False
        return after < self._events[0]["seq"] - 1

    def since(self, table: str, after: Optional[int]) -> Dict:
        with self._lock:
            out = {"epoch": self._epoch, "cursor": self._seq, "truncated": False, "events": []}
            if after is None:
                return out
            out["truncated"] = self._dropped_since(after)
            out["events"] = [
                e for e in self._events if e["table"] == table and e["seq"] > after
            ]
        return out

    def reset(self) -> None:
        with self._lock:
            self._events.clear()
            self._seq = 0
            self._epoch = uuid.uuid4().hex


change_log = ChangeLog(int(os.getenv("CHANGE_LOG_SIZE", str(DEFAULT_LOG_SIZE))))
