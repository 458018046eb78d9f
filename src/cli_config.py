"""Runtime configuration overrides for feed URLs and the fetch timeout.

Precedence, lowest to highest: Constants defaults, environment variables,
CLI flags. Malformed values are logged and ignored so a bad environment
never prevents the CLI from running.
"""

from __future__ import annotations

import logging
import os
from typing import Mapping, Optional

from constants import Constants

logger = logging.getLogger(__name__)

_URL_SETTINGS = (
    # (Constants attribute, environment variable, argparse dest)
    ("JS2BIN_RELEASE_URL", Constants.ENV_RELEASE_URL, "RELEASE_URL"),
    ("NODEJS_RELEASE_URL", Constants.ENV_NODE_INDEX_URL, "NODE_INDEX_URL"),
    ("NODEJS_SCHEDULE_URL", Constants.ENV_NODE_SCHEDULE_URL, "NODE_SCHEDULE_URL"),
)


def parse_timeout(value: Optional[str]) -> Optional[int]:
    """Parse a millisecond timeout; returns None when missing or invalid."""
    if value is None or not str(value).strip():
        return None
    try:
        timeout = int(str(value).strip())
    except ValueError:
        logger.warning("Ignoring non-integer timeout: %r", value)
        return None
    if timeout < 0:
        logger.warning("Ignoring negative timeout: %r", value)
        return None
    return timeout


def apply_env_overrides(environ: Optional[Mapping[str, str]] = None) -> None:
    """Apply JS2BIN_VERSION_* environment variables onto Constants."""
    env = os.environ if environ is None else environ
    timeout = parse_timeout(env.get(Constants.ENV_TIMEOUT))
    if timeout is not None:
        Constants.FETCH_TIMEOUT_MS = timeout
    for attr, env_name, _ in _URL_SETTINGS:
        url = env.get(env_name, "").strip()
        if url:
            setattr(Constants, attr, url)


def apply_cli_overrides(args) -> None:
    """Apply CLI flags onto Constants; flags win over the environment."""
    timeout = getattr(args, "TIMEOUT", None)
    if timeout is not None:
        if timeout < 0:
            logger.warning("Ignoring negative --timeout: %s", timeout)
        else:
            Constants.FETCH_TIMEOUT_MS = timeout
    for attr, _, dest in _URL_SETTINGS:
        url = getattr(args, dest, None)
        if url:
            setattr(Constants, attr, url)
