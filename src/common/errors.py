"""Exception types raised by the resolver and its HTTP helper."""

from __future__ import annotations

from typing import Optional


class InvalidArgumentError(ValueError):
    """Raised when a caller passes an unrecognized mode or list name."""


class FetchTimeoutError(TimeoutError):
    """Raised when a feed did not respond within the configured timeout."""

    def __init__(self, url: str, timeout_ms: int):
        self.url = url
        self.timeout_ms = timeout_ms
        super().__init__(
            f"Timeout. Server did not respond in time ({timeout_ms} ms): {url}"
        )


class NetworkError(ConnectionError):
    """Raised when a feed responded unsuccessfully or could not be reached."""

    def __init__(self, url: str, status: Optional[int] = None, reason: Optional[str] = None):
        self.url = url
        self.status = status
        if status is not None:
            msg = f"Network response was not ok. status: {status}"
        else:
            msg = f"Network request failed: {reason}"
        super().__init__(msg)
