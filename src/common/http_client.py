"""Timed JSON fetch used by the version resolver.

Wraps ``requests`` so callers get one of three outcomes: the parsed JSON
body, ``FetchTimeoutError`` or ``NetworkError``. There is no retry and no
response cache; every call issues exactly one request.
"""
from __future__ import annotations

import json
import logging
from typing import Any

import requests

from constants import Constants
from common.errors import FetchTimeoutError, NetworkError
from common.logging_utils import extra_context, is_debug_enabled, safe_url, Timer

logger = logging.getLogger(__name__)

DEFAULT_HEADERS = {
    "User-Agent": Constants.USER_AGENT,
    "Accept": "application/vnd.github+json, application/json;q=0.9, */*;q=0.1",
}


def fetch_json(url: str, timeout_ms: int) -> Any:
    """GET ``url`` and return the parsed JSON body.

    Args:
        url: Target URL.
        timeout_ms: Timeout in milliseconds; 0 fails immediately. requests
            applies it to the connect and to each socket read separately,
            so a server trickling bytes can exceed it in total.

    Returns:
        Parsed JSON (list, dict, ...) or None when the body is not JSON.

    Raises:
        FetchTimeoutError: No connect or read progress within ``timeout_ms``.
        NetworkError: Connection failure or a non-2xx status.
    """
    safe_target = safe_url(url)
    if timeout_ms <= 0:
        raise FetchTimeoutError(safe_target, timeout_ms)

    with Timer() as t:
        if is_debug_enabled(logger):
            logger.debug(
                "HTTP request",
                extra=extra_context(
                    event="http_request",
                    component="http_client",
                    action="GET",
                    target=safe_target,
                    timeout_ms=timeout_ms,
                )
            )
        try:
            res = requests.get(url, headers=DEFAULT_HEADERS, timeout=timeout_ms / 1000)
        except requests.Timeout as exc:
            logger.error("Request to %s timed out after %s ms", safe_target, timeout_ms)
            raise FetchTimeoutError(safe_target, timeout_ms) from exc
        except requests.RequestException as exc:  # includes ConnectionError
            logger.error("Connection error for %s: %s", safe_target, exc)
            raise NetworkError(safe_target, reason=str(exc)) from exc

    if not res.ok:
        logger.error("Request to %s failed with status %s", safe_target, res.status_code)
        raise NetworkError(safe_target, status=res.status_code)

    if is_debug_enabled(logger):
        logger.debug(
            "HTTP response ok",
            extra=extra_context(
                event="http_response",
                component="http_client",
                action="GET",
                outcome="success",
                status_code=res.status_code,
                duration_ms=t.duration_ms(),
                target=safe_target,
            )
        )

    try:
        return json.loads(res.text)
    except json.JSONDecodeError:
        if is_debug_enabled(logger):
            logger.debug(
                "JSON decode error",
                extra=extra_context(
                    event="parse",
                    component="http_client",
                    action="fetch_json",
                    outcome="json_decode_error",
                    status_code=res.status_code,
                    target=safe_target,
                )
            )
        return None
