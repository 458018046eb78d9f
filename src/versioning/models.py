"""Data models for tracked js2bin and Node.js versions."""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set

from constants import Constants, Platform
from .semver import is_valid_semver


class VersionSet:
    """Append-only set of strict semantic versions with a tracked latest.

    Invalid input is ignored rather than rejected with an error. ``latest``
    is not forced to be the maximum of the members; whoever calls
    ``set_latest`` decides that.
    """

    def __init__(self) -> None:
        self._latest: Optional[str] = None
        self._versions: Set[str] = set()

    @property
    def latest(self) -> Optional[str]:
        return self._latest

    def set_latest(self, version) -> bool:
        """Set latest if version is valid; returns whether it was accepted."""
        if not is_valid_semver(version, strict=True):
            return False
        self._latest = version
        return True

    def add(self, version) -> bool:
        """Add version if valid; returns whether it was accepted."""
        if not is_valid_semver(version, strict=True):
            return False
        self._versions.add(version)
        return True

    def list(self) -> List[str]:
        """Snapshot of the members in no particular order."""
        return list(self._versions)

    def __contains__(self, version) -> bool:
        return version in self._versions

    def __len__(self) -> int:
        return len(self._versions)

    def __repr__(self) -> str:
        return f"VersionSet(latest={self._latest!r}, versions={sorted(self._versions)!r})"


def _platform_sets() -> Dict[Platform, VersionSet]:
    return {platform: VersionSet() for platform in Platform}


@dataclass
class ArtifactVersions:
    """js2bin versions seen in release assets, per platform."""
    latest: Optional[str] = None
    platforms: Dict[Platform, VersionSet] = field(default_factory=_platform_sets)


@dataclass
class NodeVersions:
    """Node.js versions per active release channel (LTS codename or "current")."""
    latest: Optional[str] = None
    channels: Dict[str, VersionSet] = field(default_factory=dict)


@dataclass
class ResolverOptions:
    """Per-call configuration for VersionResolver.get."""
    active: bool = False
    current: bool = False
    timeout: int = field(default_factory=lambda: Constants.FETCH_TIMEOUT_MS)
