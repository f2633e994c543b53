# frontend/mfg_ui/context.py
import logging
from typing import Dict, Optional

from .cache import QueryCache
from .config import StoreConfig
from .entity import EntityScreen, EntitySpec
from .feed import ChangeFeed
from .notify import Notifier
from .store import StoreClient, StoreError

logger = logging.getLogger(__name__)


class DashboardContext:
    """
    Everything one browser session shares: store client, query cache,
    notifier, change feed and one EntityScreen per table.

    Only the screen of the page being shown is mounted (subscribed to its
    table's change feed); switching pages unmounts the previous one.
    """

    def __init__(self, config: StoreConfig, session=None):
        self.config = config
        self.store = StoreClient(config.url, config.key, session=session)
        self.cache = QueryCache()
        self.notifier = Notifier()
        self.feed = ChangeFeed(self.store)
        self.screens: Dict[str, EntityScreen] = {}
        self.active: Optional[EntityScreen] = None

    def screen(self, spec: EntitySpec) -> EntityScreen:
        scr = self.screens.get(spec.table)
        if scr is None:
            scr = EntityScreen(spec, self.store, self.cache, self.notifier, self.feed)
            self.screens[spec.table] = scr
        return scr

    def activate(self, spec: EntitySpec) -> EntityScreen:
        scr = self.screen(spec)
        if self.active is not scr:
            self.deactivate()
            self.active = scr
        if not scr.mounted:
            scr.mount()
        return scr

    def deactivate(self) -> None:
        if self.active is not None:
            self.active.unmount()
            self.active = None

    def counts(self, tables) -> Dict[str, Optional[int]]:
        out: Dict[str, Optional[int]] = {}
        for table in tables:
            try:
                out[table] = self.cache.get(table, ("count",), lambda t=table: self.store.count(t))
            except StoreError as e:
                logger.error("count failed for %s: %s", table, e)
                out[table] = None
        return out

    def reset(self) -> None:
        """Drop every screen and cached result (logout)."""
        self.deactivate()
        self.screens.clear()
        self.cache.clear()
        self.notifier.drain()
