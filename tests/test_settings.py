"""Typed smoke tests for the settings loader.

These tests verify three guarantees:
1) Importing the module-level `settings` yields a `Settings` instance.
2) Environment variables override defaults after clearing the loader cache.
3) `get_logger()` respects the configured LOG_LEVEL when constructing loggers.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Any

import pytest

from chronoline.core.settings import Settings, get_logger, load_settings, settings


@pytest.fixture(autouse=True)  # type: ignore[misc]
def _reset_cache() -> Iterator[None]:
    """Drop any settings built from a monkeypatched environment."""
    yield
    load_settings.cache_clear()


def test_settings_instance_type() -> None:
    assert isinstance(settings, Settings)


def test_env_overrides_with_cache_clear(monkeypatch: Any) -> None:
    """Changing env vars takes effect after `load_settings.cache_clear()`."""
    monkeypatch.setenv("CHRONOLINE_ENV", "test")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("CHRONOLINE_DEFAULT_FIRST_YEAR", "1500")

    load_settings.cache_clear()
    s = load_settings()

    assert s.environment == "test"
    assert s.log_level == "DEBUG"
    assert s.default_first_year == 1500


def test_default_year_span_follows_settings(monkeypatch: Any) -> None:
    from chronoline.core.source import TimelineSource

    monkeypatch.setenv("CHRONOLINE_DEFAULT_LAST_YEAR", "2100")
    load_settings.cache_clear()
    assert TimelineSource(raw_events=[]).last_year() == 2100


def test_get_logger_respects_level(monkeypatch: Any) -> None:
    monkeypatch.setenv("LOG_LEVEL", "ERROR")
    load_settings.cache_clear()

    logger = get_logger("chronoline.tests.settings")

    assert logger.level == logging.ERROR
    assert logger.handlers, "Expected at least one StreamHandler to be attached."
