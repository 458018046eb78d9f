"""Date helpers for release schedule windows."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Optional


def epoch_ms_from_iso8601(value: Any) -> Optional[int]:
    """Parse an ISO-8601 string into epoch milliseconds.

    Date-only and naive values are read as UTC. Anything unparseable
    returns None.
    """
    if not isinstance(value, str) or not value.strip():
        return None
    text = value.strip()
    try:
        if text.endswith("Z"):
            parsed = datetime.fromisoformat(text[:-1]).replace(tzinfo=timezone.utc)
        else:
            parsed = datetime.fromisoformat(text)
            if parsed.tzinfo is None:
                parsed = parsed.replace(tzinfo=timezone.utc)
        return int(parsed.timestamp() * 1000)
    except (ValueError, TypeError):
        return None


def now_ms() -> int:
    """Current wall-clock time in epoch milliseconds."""
    return int(datetime.now(timezone.utc).timestamp() * 1000)


def is_within_window(start: Any, end: Any, now: Optional[int] = None) -> bool:
    """Return True when ``start < now < end``; both bounds exclusive.

    An unparseable bound makes the window inactive.
    """
    start_ms = epoch_ms_from_iso8601(start)
    end_ms = epoch_ms_from_iso8601(end)
    if start_ms is None or end_ms is None:
        return False
    if now is None:
        now = now_ms()
    return start_ms < now < end_ms
