"""js2bin-version - resolve js2bin build versions against Node.js releases.

    Returns:
        int: Exit code
"""
import json
import logging
import sys

from constants import Constants, ExitCodes
from common.errors import FetchTimeoutError, InvalidArgumentError, NetworkError
from common.logging_utils import configure_logging
from args import parse_args
from cli_config import apply_cli_overrides, apply_env_overrides
from versioning.resolver import VersionResolver

logger = logging.getLogger(__name__)


def build_resolver(args):
    """Create a resolver from parsed CLI args and the effective Constants."""
    return VersionResolver(
        active=args.ACTIVE,
        current=args.CURRENT,
        timeout=Constants.FETCH_TIMEOUT_MS,
        release_url=Constants.JS2BIN_RELEASE_URL,
        node_index_url=Constants.NODEJS_RELEASE_URL,
        node_schedule_url=Constants.NODEJS_SCHEDULE_URL,
    )


def main(argv=None):
    """Main function of the program."""
    args = parse_args(argv)
    configure_logging(args.LOG_LEVEL, args.LOG_FILE)
    apply_env_overrides()
    apply_cli_overrides(args)

    resolver = build_resolver(args)
    logger.info("Resolving %s versions", args.mode)
    try:
        result = resolver.get(args.mode)
    except InvalidArgumentError as exc:
        logger.error("%s", exc)
        return ExitCodes.INVALID_ARGUMENT.value
    except (FetchTimeoutError, NetworkError) as exc:
        logger.error("Unable to fetch release information: %s", exc)
        return ExitCodes.CONNECTION_ERROR.value

    sys.stdout.write(json.dumps(result) + "\n")
    return ExitCodes.SUCCESS.value


if __name__ == "__main__":
    sys.exit(main())
