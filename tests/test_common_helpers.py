"""Unit tests for shared date and logging helpers."""

import logging

from common.dates import epoch_ms_from_iso8601, is_within_window
from common.logging_utils import Timer, extra_context, is_debug_enabled, safe_url

NOW = epoch_ms_from_iso8601("2024-06-01T00:00:00Z")


def test_epoch_ms_from_iso8601_formats():
    assert epoch_ms_from_iso8601("1970-01-01") == 0
    assert epoch_ms_from_iso8601("1970-01-01T00:00:01Z") == 1000
    assert epoch_ms_from_iso8601("1970-01-01T01:00:00+01:00") == 0


def test_epoch_ms_from_iso8601_invalid():
    assert epoch_ms_from_iso8601("tomorrow") is None
    assert epoch_ms_from_iso8601("") is None
    assert epoch_ms_from_iso8601(None) is None
    assert epoch_ms_from_iso8601(20240101) is None


def test_is_within_window():
    assert is_within_window("2023-10-24", "2026-04-30", NOW) is True
    assert is_within_window("2025-01-01", "2026-04-30", NOW) is False
    assert is_within_window("2020-01-01", "2023-01-01", NOW) is False


def test_is_within_window_bounds_exclusive():
    assert is_within_window("2024-06-01", "2025-01-01", NOW) is False
    assert is_within_window("2023-01-01", "2024-06-01", NOW) is False


def test_is_within_window_missing_dates():
    assert is_within_window(None, "2026-04-30", NOW) is False
    assert is_within_window("2023-10-24", None, NOW) is False


def test_safe_url_strips_secrets():
    assert safe_url("https://user:pw@example.test:8443/a/b?token=x#frag") == "https://example.test:8443/a/b"


def test_extra_context_drops_none():
    assert extra_context(event="x", target=None) == {"event": "x"}


def test_is_debug_enabled():
    logger = logging.getLogger("test_common_helpers.debug")
    logger.setLevel(logging.DEBUG)
    assert is_debug_enabled(logger) is True
    logger.setLevel(logging.INFO)
    assert is_debug_enabled(logger) is False


def test_timer_measures():
    with Timer() as t:
        pass
    assert t.duration_ms() >= 0
