# frontend/mfg_ui/cache.py
from typing import Any, Callable, Dict, Hashable, Tuple


class QueryCache:
    """Query results keyed by (table, key); writes and change events invalidate a whole table."""

    def __init__(self):
        self._entries: Dict[Tuple[str, Hashable], Any] = {}

    def get(self, table: str, key: Hashable, loader: Callable[[], Any]):
        slot = (table, key)
        if slot not in self._entries:
            # loader errors propagate and nothing is cached
            self._entries[slot] = loader()
        return self._entries[slot]

    def peek(self, table: str, key: Hashable, default=None):
        return self._entries.get((table, key), default)

    def invalidate(self, table: str) -> int:
        stale = [slot for slot in self._entries if slot[0] == table]
        for slot in stale:
            del self._entries[slot]
        return len(stale)

    def clear(self) -> None:
        self._entries.clear()
