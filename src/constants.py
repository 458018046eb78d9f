"""Constants used in the project."""

import re
from enum import Enum


class ExitCodes(Enum):
    """Exit codes for the program.

    Args:
        Enum (int): Exit codes for the program.
    """

    SUCCESS = 0
    INVALID_ARGUMENT = 1
    CONNECTION_ERROR = 2


class Platform(Enum):
    """Platforms js2bin publishes release assets for.

    Args:
        Enum (string): Platform token as it appears in asset names.
    """

    DARWIN = "darwin"
    LINUX = "linux"
    WINDOWS = "windows"


class Mode(Enum):
    """Query modes accepted by the resolver.

    Args:
        Enum (string): Mode name.
    """

    BUILD = "build"
    CI = "ci"


class Constants:  # pylint: disable=too-few-public-methods
    """General constants used in the project.
    Data holder for configuration constants; not intended to provide behavior.
    """

    JS2BIN_RELEASE_URL = "https://api.github.com/repos/criblio/js2bin/releases"
    NODEJS_RELEASE_URL = "https://nodejs.org/download/release/index.json"
    NODEJS_SCHEDULE_URL = (
        "https://raw.githubusercontent.com/nodejs/Release/master/schedule.json"
    )
    FETCH_TIMEOUT_MS = 30000  # Timeout in milliseconds for each feed fetch
    CURRENT_CHANNEL = "current"
    USER_AGENT = "js2bin-version/1.0"
    LOG_FORMAT = "[%(levelname)s] %(message)s"

    # Schedule keys look like "v0.10", "v0.12", "v4", "v20"
    NODEJS_KEY_PATTERN = re.compile(r"^v(?:0\.(?:0|[1-9]\d*)|[1-9]\d*)$")
    PLATFORM_PATTERN = re.compile(r"(darwin|linux|windows)")
    # Trailing x.y.z preceded and followed by a non-dot character
    SEMVER_PATTERN = re.compile(
        r"[^.]((?:0|[1-9]?\d+)(?:\.(?:0|[1-9]?\d+)){2})(?:[^.].*)?$"
    )

    ENV_TIMEOUT = "JS2BIN_VERSION_TIMEOUT"
    ENV_RELEASE_URL = "JS2BIN_VERSION_RELEASE_URL"
    ENV_NODE_INDEX_URL = "JS2BIN_VERSION_NODE_INDEX_URL"
    ENV_NODE_SCHEDULE_URL = "JS2BIN_VERSION_NODE_SCHEDULE_URL"
