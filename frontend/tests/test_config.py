import pytest

from mfg_ui.config import DEFAULT_POLL_SECONDS, ConfigError, load_config


def test_missing_values_are_reported_together():
    with pytest.raises(ConfigError) as ei:
        load_config({})
    assert ei.value.missing == ["STORE_URL", "STORE_KEY"]


def test_blank_key_counts_as_missing():
    with pytest.raises(ConfigError) as ei:
        load_config({"STORE_URL": "http://127.0.0.1:8011", "STORE_KEY": "  "})
    assert ei.value.missing == ["STORE_KEY"]


def test_values_are_cleaned():
    cfg = load_config({"STORE_URL": '"http://127.0.0.1:8011/"', "STORE_KEY": "'abc'", "FEED_POLL_SECONDS": "2"})
    assert cfg.url == "http://127.0.0.1:8011"
    assert cfg.key == "abc"
    assert cfg.poll_seconds == 2.0


def test_bad_poll_interval_falls_back():
    cfg = load_config({"STORE_URL": "http://x", "STORE_KEY": "k", "FEED_POLL_SECONDS": "soon"})
    assert cfg.poll_seconds == DEFAULT_POLL_SECONDS
