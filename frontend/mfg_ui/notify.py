# frontend/mfg_ui/notify.py
import logging
from dataclasses import dataclass
from typing import List

logger = logging.getLogger("mfg_ui.console")

DEFAULT = "default"
DESTRUCTIVE = "destructive"


@dataclass(frozen=True)
class Notice:
    title: str
    description: str = ""
    variant: str = DEFAULT

    @property
    def icon(self) -> str:
        return "⚠️" if self.variant == DESTRUCTIVE else "✅"


class Notifier:
    """Transient, dismissable notices; the page drains them into toasts on each run."""

    def __init__(self):
        self._pending: List[Notice] = []

    def success(self, title: str, description: str = "") -> Notice:
        return self._push(Notice(title, description))

    def warn(self, title: str, description: str = "") -> Notice:
        return self._push(Notice(title, description, DESTRUCTIVE))

    def error(self, title: str, description: str = "", exc: Exception | None = None) -> Notice:
        # developer-facing console channel
        if exc is not None:
            logger.error("%s: %s (%s)", title, description, exc)
        else:
            logger.error("%s: %s", title, description)
        return self._push(Notice(title, description, DESTRUCTIVE))

    def _push(self, notice: Notice) -> Notice:
        self._pending.append(notice)
        return notice

    @property
    def pending(self) -> List[Notice]:
        return list(self._pending)

    def drain(self) -> List[Notice]:
        out, self._pending = self._pending, []
        return out
