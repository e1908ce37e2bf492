"""Main CLI entry point for JSON Delta."""

import argparse
import logging
import sys
from typing import List, Optional

from .config import DiffConfig
from .engine import DeltaEngine
from .errors import JsonDeltaError, UsageError
from .logging_utils import configure_logging
from .serialize import DeltaSerializer, load_json_argument

logger = logging.getLogger(__name__)

PROG = "jsondelta"
USAGE = f"usage: {PROG} <json1> <json2>\n"


class BridgeArgumentParser(argparse.ArgumentParser):
    """Argument parser that raises instead of printing and exiting."""

    def error(self, message: str) -> None:
        raise UsageError(message)


def create_parser() -> argparse.ArgumentParser:
    """Create command line argument parser."""
    parser = BridgeArgumentParser(
        prog=PROG,
        description="Print the structural delta between two JSON documents",
        add_help=False,
    )

    parser.add_argument(
        "json1",
        help="JSON text of the first value",
    )
    parser.add_argument(
        "json2",
        help="JSON text of the second value",
    )

    return parser


def parse_arguments(argv: List[str]) -> argparse.Namespace:
    """Parse the two positional JSON arguments.

    Every argument is positional, so JSON such as ``-1`` is never read as an
    option. Arguments after the second one are ignored.
    """
    parser = create_parser()
    args, extra = parser.parse_known_args(["--", *argv])
    if extra:
        logger.debug("Ignoring extra arguments", extra={"count": len(extra)})
    return args


def compute_delta(json1: str, json2: str, config: Optional[DiffConfig] = None) -> str:
    """Parse both arguments, diff them and return the delta as JSON text."""
    first = load_json_argument(json1, "json1")
    second = load_json_argument(json2, "json2")

    engine = DeltaEngine(config or DiffConfig())
    delta = engine.diff(first, second)

    return DeltaSerializer().to_json_string(delta)


def report_error(code: str, message: str, details: Optional[dict] = None) -> None:
    """Write an error envelope to stderr."""
    serializer = DeltaSerializer()
    envelope = serializer.create_error_envelope(code, message, details)
    sys.stderr.write(serializer.to_error_line(envelope))


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    configure_logging()

    if argv is None:
        argv = sys.argv[1:]

    try:
        args = parse_arguments(argv)
    except UsageError as e:
        logger.debug("Usage error", extra={"reason": e.details.get("reason")})
        sys.stderr.write(USAGE)
        return 1

    try:
        output = compute_delta(args.json1, args.json2)

        # Nothing reaches stdout until the delta is complete
        sys.stdout.write(output)
        sys.stdout.flush()

    except JsonDeltaError as e:
        # Handle known JSON Delta errors
        report_error(e.code, e.message, e.details)
        return 1

    except Exception as e:
        # Handle unexpected errors
        logger.debug("Unexpected error", exc_info=True)
        report_error(
            "INTERNAL_ERROR",
            f"Internal error: {str(e)}",
            {"type": type(e).__name__},
        )
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
