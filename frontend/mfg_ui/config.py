# frontend/mfg_ui/config.py
import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()

DEFAULT_POLL_SECONDS = 5.0


class ConfigError(Exception):
    """Store connection parameters are missing; shown once as a setup screen."""

    def __init__(self, missing):
        self.missing = list(missing)
        super().__init__("Missing store configuration: " + ", ".join(self.missing))


@dataclass(frozen=True)
class StoreConfig:
    url: str
    key: str
    poll_seconds: float = DEFAULT_POLL_SECONDS


def _clean(raw) -> str:
    return str(raw or "").strip().strip('"').strip("'")


def _poll_seconds(raw) -> float:
    try:
        val = float(_clean(raw))
    except ValueError:
        return DEFAULT_POLL_SECONDS
    return val if val > 0 else DEFAULT_POLL_SECONDS


def load_config(env=None) -> StoreConfig:
    env = os.environ if env is None else env
    url = _clean(env.get("STORE_URL")).rstrip("/")
    key = _clean(env.get("STORE_KEY"))
    missing = [name for name, val in (("STORE_URL", url), ("STORE_KEY", key)) if not val]
    if missing:
        raise ConfigError(missing)
    return StoreConfig(url=url, key=key, poll_seconds=_poll_seconds(env.get("FEED_POLL_SECONDS")))
