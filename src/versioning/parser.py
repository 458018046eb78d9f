"""Token extraction for release asset names and feed entries."""

from typing import Any, Optional

from constants import Constants, Platform
from .semver import is_valid_semver


def extract_platform(name: Any) -> Optional[Platform]:
    """Return the platform named in an asset file name, if any."""
    if not isinstance(name, str):
        return None
    match = Constants.PLATFORM_PATTERN.search(name)
    if not match:
        return None
    return Platform(match.group(1))


def extract_version(text: Any) -> Optional[str]:
    """Return the trailing x.y.z embedded in text, if it is a strict semver.

    "js2bin-windows-1.2.3-x64.exe" -> "1.2.3", "v20.11.1" -> "20.11.1".
    """
    if not isinstance(text, str):
        return None
    match = Constants.SEMVER_PATTERN.search(text)
    if not match:
        return None
    version = match.group(1)
    if not is_valid_semver(version, strict=True):
        return None
    return version


def is_schedule_key(key: Any) -> bool:
    """True for release line keys such as "v0.10" or "v20"."""
    return isinstance(key, str) and bool(Constants.NODEJS_KEY_PATTERN.match(key))


def release_channel(lts: Any, include_current: bool) -> Optional[str]:
    """Channel a Node.js release belongs to.

    Uses the LTS codename when present; non-LTS releases map to the
    current channel only when it is tracked.
    """
    if lts:
        return lts if isinstance(lts, str) else None
    if include_current:
        return Constants.CURRENT_CHANNEL
    return None
