"""Argument parsing functionality for js2bin-version."""

import argparse
from constants import Mode


def parse_args(argv=None):
    """Parses the arguments passed to the program."""
    parser = argparse.ArgumentParser(
        prog="js2bin-version",
        description=(
            "Report the latest built js2bin version, or the Node.js "
            "versions that still need a js2bin build"
        ),
        add_help=True,
    )

    parser.add_argument("mode",
                        help="build: latest built js2bin version; "
                             "ci: Node.js versions without a js2bin build",
                        type=str,
                        choices=[mode.value for mode in Mode])
    parser.add_argument("-a", "--active",
                        dest="ACTIVE",
                        help="For ci, report only the newest Node.js version.",
                        action="store_true")
    parser.add_argument("-c", "--current",
                        dest="CURRENT",
                        help="For ci, also track the non-LTS current release line.",
                        action="store_true")
    parser.add_argument("-t", "--timeout",
                        dest="TIMEOUT",
                        help="Timeout per fetch, in milliseconds (default: 30000)",
                        action="store",
                        type=int)
    parser.add_argument("--release-url",
                        dest="RELEASE_URL",
                        help="Override the js2bin releases feed URL",
                        action="store",
                        type=str)
    parser.add_argument("--node-index-url",
                        dest="NODE_INDEX_URL",
                        help="Override the Node.js release index URL",
                        action="store",
                        type=str)
    parser.add_argument("--node-schedule-url",
                        dest="NODE_SCHEDULE_URL",
                        help="Override the Node.js release schedule URL",
                        action="store",
                        type=str)
    parser.add_argument("--loglevel",
                        dest="LOG_LEVEL",
                        help="Set the logging level",
                        action="store",
                        type=str,
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                        default='WARNING')
    parser.add_argument("--logfile",
                        dest="LOG_FILE",
                        help="Log output file",
                        action="store",
                        type=str)

    return parser.parse_args(argv)
