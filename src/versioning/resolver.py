"""Resolve built js2bin versions against active Node.js release lines.

Three feeds are consulted, strictly in this order:

1. js2bin GitHub releases: assets of the most recent release name the
   platform and the Node.js version each binary was built for.
2. Node.js release index: every published Node.js version with its LTS
   codename (or a falsy value for non-LTS releases).
3. Node.js release schedule: start/end dates per release line, used to
   decide which codenames are currently active.

Feeds with an unexpected shape contribute nothing; fetch failures
(timeouts, bad HTTP status) propagate to the caller of ``get``.
"""

from __future__ import annotations

import logging
from typing import Any, List, Mapping, Optional, Union

from constants import Constants, Mode, Platform
from common.dates import is_within_window, now_ms
from common.errors import InvalidArgumentError
from common.http_client import fetch_json
from common.logging_utils import extra_context, is_debug_enabled
from .models import ArtifactVersions, NodeVersions, ResolverOptions, VersionSet
from .parser import extract_platform, extract_version, is_schedule_key, release_channel
from .semver import is_greater

logger = logging.getLogger(__name__)

Result = Union[str, List[str], None]

LIST_JS2BIN = "js2bin"
LIST_NODE = "node"


def _is_timeout(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def _describe(value: Any) -> str:
    return f'"{value}"' if isinstance(value, str) else str(value)


class VersionResolver:
    """Tracks js2bin and Node.js versions and answers "build" / "ci" queries.

    State accumulates over the lifetime of an instance: repeated ``get``
    calls merge into what earlier calls already saw. Channel sets are
    rebuilt from the schedule on every Node.js fetch.
    """

    def __init__(
        self,
        active: bool = False,
        current: bool = False,
        timeout: Optional[int] = None,
        *,
        release_url: Optional[str] = None,
        node_index_url: Optional[str] = None,
        node_schedule_url: Optional[str] = None,
    ):
        """Initialize the resolver.

        Args:
            active: For "ci", report only the newest Node.js version.
            current: Also track the non-LTS "current" release line.
            timeout: Per-fetch timeout in milliseconds; invalid values fall
                back to Constants.FETCH_TIMEOUT_MS.
            release_url: Override for the js2bin releases feed.
            node_index_url: Override for the Node.js release index.
            node_schedule_url: Override for the Node.js release schedule.
        """
        self.active = bool(active)
        self.include_current = bool(current)
        self.timeout = timeout if _is_timeout(timeout) else Constants.FETCH_TIMEOUT_MS
        self.release_url = release_url or Constants.JS2BIN_RELEASE_URL
        self.node_index_url = node_index_url or Constants.NODEJS_RELEASE_URL
        self.node_schedule_url = node_schedule_url or Constants.NODEJS_SCHEDULE_URL
        self.artifact_versions = ArtifactVersions()
        self.node_versions = NodeVersions()

    def _options(self, overrides: Optional[Mapping[str, Any]] = None) -> ResolverOptions:
        """Merge per-call overrides of the right type over instance settings."""
        opts = ResolverOptions(
            active=self.active,
            current=self.include_current,
            timeout=self.timeout,
        )
        if not overrides:
            return opts
        active = overrides.get("active")
        if isinstance(active, bool):
            opts.active = active
        current = overrides.get("current")
        if isinstance(current, bool):
            opts.current = current
        timeout = overrides.get("timeout")
        if _is_timeout(timeout):
            opts.timeout = timeout
        return opts

    def get_version_list(self, name: str) -> List[str]:
        """Return a de-duplicated version list.

        "js2bin" gives every built version across all platforms; "node"
        gives the latest version of each tracked channel.

        Raises:
            InvalidArgumentError: For any other name.
        """
        if name == LIST_JS2BIN:
            versions = set()
            for version_set in self.artifact_versions.platforms.values():
                versions.update(version_set.list())
            return list(versions)
        if name == LIST_NODE:
            return list({
                version_set.latest
                for version_set in self.node_versions.channels.values()
                if version_set.latest
            })
        raise InvalidArgumentError(
            f'Expected either "{LIST_JS2BIN}" or "{LIST_NODE}" but got {_describe(name)}.'
        )

    def fetch_artifact_versions(self, options: Optional[ResolverOptions] = None) -> None:
        """Merge versions from the newest js2bin release's assets."""
        opts = options or self._options()
        res = fetch_json(self.release_url, opts.timeout)
        if not isinstance(res, list) or not res or not isinstance(res[0], dict):
            logger.debug("Ignoring js2bin release feed of unexpected shape")
            return
        assets = res[0].get("assets")
        if not isinstance(assets, list):
            logger.debug("Newest js2bin release has no asset list")
            return
        for asset in assets:
            name = asset.get("name") if isinstance(asset, dict) else None
            platform = extract_platform(name)
            version = extract_version(name)
            if platform is None or version is None:
                continue
            self._merge_artifact(platform, version)

    def _merge_artifact(self, platform: Platform, version: str) -> None:
        artifacts = self.artifact_versions
        if is_greater(version, artifacts.latest):
            artifacts.latest = version
        version_set = artifacts.platforms[platform]
        if is_greater(version, version_set.latest):
            version_set.set_latest(version)
        version_set.add(version)

    def discover_channels(self, options: Optional[ResolverOptions] = None) -> None:
        """Create an empty set for every release line active right now."""
        opts = options or self._options()
        schedule = fetch_json(self.node_schedule_url, opts.timeout)
        if not isinstance(schedule, dict):
            logger.debug("Ignoring Node.js schedule of unexpected shape")
            return
        now = now_ms()
        channels = self.node_versions.channels
        for key, entry in schedule.items():
            if not is_schedule_key(key) or not isinstance(entry, dict):
                logger.debug("Skipping schedule entry %r", key)
                continue
            codename = entry.get("codename")
            if not codename or not isinstance(codename, str):
                continue
            if is_within_window(entry.get("start"), entry.get("end"), now):
                channels[codename] = VersionSet()
        if opts.current:
            channels[Constants.CURRENT_CHANNEL] = VersionSet()
        if is_debug_enabled(logger):
            logger.debug(
                "Active release channels",
                extra=extra_context(
                    event="channels",
                    component="resolver",
                    channels=sorted(channels),
                )
            )

    def fetch_node_versions(self, options: Optional[ResolverOptions] = None) -> None:
        """Merge Node.js releases that belong to a currently active channel."""
        opts = options or self._options()
        releases = fetch_json(self.node_index_url, opts.timeout)
        if not isinstance(releases, list):
            logger.debug("Ignoring Node.js release index of unexpected shape")
            return
        self.discover_channels(opts)
        channels = self.node_versions.channels
        for item in releases:
            if not isinstance(item, dict):
                continue
            channel = release_channel(item.get("lts"), opts.current)
            if channel is None or channel not in channels:
                continue
            version = extract_version(item.get("version"))
            if version is None:
                continue
            if is_greater(version, self.node_versions.latest):
                self.node_versions.latest = version
            version_set = channels[channel]
            if is_greater(version, version_set.latest):
                version_set.set_latest(version)
            version_set.add(version)

    def get(self, mode: str, options: Optional[Mapping[str, Any]] = None) -> Result:
        """Answer a query.

        Args:
            mode: "build" for the latest built js2bin version, "ci" for the
                Node.js versions that still need a build.
            options: Per-call overrides: ``active`` (bool), ``current``
                (bool), ``timeout`` (non-negative int, milliseconds).

        Returns:
            "build": version string or None.
            "ci": list of versions, or with ``active`` a version string or None.

        Raises:
            InvalidArgumentError: Unknown mode; raised before any fetch.
            FetchTimeoutError: A feed did not respond in time.
            NetworkError: A feed responded with an unsuccessful status.
        """
        if mode not in (Mode.BUILD.value, Mode.CI.value):
            raise InvalidArgumentError(
                f'Expected either "build" or "ci" but got {_describe(mode)}.'
            )
        opts = self._options(options)
        self.fetch_artifact_versions(opts)
        if mode == Mode.BUILD.value:
            return self.artifact_versions.latest or None

        built = set(self.get_version_list(LIST_JS2BIN))
        self.fetch_node_versions(opts)
        if opts.active:
            latest = self.node_versions.latest
            if latest and latest not in built:
                return latest
            return None
        return [
            version for version in self.get_version_list(LIST_NODE)
            if version not in built
        ]
