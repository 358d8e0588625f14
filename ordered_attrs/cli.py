# ==============================================
# CLI — Command Line Entry Point
# ==============================================
#
# PURPOSE:
#   Inspect and produce persisted values by hand, e.g. to check
#   what a store holds or to prepare fixture data.
#
# COMMANDS:
# ---------
# 1. Encode values the way an ordered attribute would store them:
#    python -m ordered_attrs.cli encode Clotho Lachesis Atropos
#    echo '["Clotho", "Lachesis"]' | python -m ordered_attrs.cli encode --stdin
#
# 2. Decode values read back from a store:
#    python -m ordered_attrs.cli decode 2~Atropos 1~Lachesis 0~Clotho
#
# 3. List the registered serializers:
#    python -m ordered_attrs.cli serializers
#
# OPTIONS:
# --------
#   --serializer NAME   (encode/decode) default from ORDERED_ATTRS_SERIALIZER
#   --log-level LEVEL   default from ORDERED_ATTRS_LOG_LEVEL
#
# EXIT CODES:
# -----------
#   0 success, 1 configuration or input error, 2 usage error
#
# ==============================================

import argparse
import json
import logging
import sys
from typing import List, Optional

from . import __version__
from .config import LOG_LEVELS, configure_logging, get_config
from .errors import OrderedAttrsError
from .serializers import available_serializers, get_serializer

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ordered-attrs",
        description="Encode and decode order-preserving attribute values."
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--log-level", choices=LOG_LEVELS, type=str.upper,
                        help="Override ORDERED_ATTRS_LOG_LEVEL")

    subparsers = parser.add_subparsers(dest="command", required=True)

    for command, help_text in (("encode", "Serialize ordered values for storage"),
                               ("decode", "Deserialize stored values back into order")):
        sub = subparsers.add_parser(command, help=help_text)
        sub.add_argument("values", nargs="*", help="Values to process")
        sub.add_argument("--stdin", action="store_true",
                         help="Read a JSON array of values from stdin instead")
        sub.add_argument("--serializer", help="Serializer name (see 'serializers')")

    subparsers.add_parser("serializers", help="List available serializers")
    return parser


def _read_values(args) -> List[str]:
    if not args.stdin:
        return args.values

    try:
        values = json.load(sys.stdin)
    except json.JSONDecodeError as e:
        raise ValueError(f"stdin is not valid JSON: {e}") from e
    if not isinstance(values, list):
        raise ValueError("stdin must contain a JSON array")
    return values


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)

    try:
        configure_logging(args.log_level)

        if args.command == "serializers":
            for name in available_serializers():
                print(name)
            return 0

        serializer = get_serializer(args.serializer or get_config().cli.serializer)
        values = _read_values(args)
        logger.info("Running %s on %d values with %r", args.command, len(values), serializer)

        if args.command == "encode":
            result = serializer.serialize(values)
        else:
            result = serializer.deserialize(values)
    except (OrderedAttrsError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    print(json.dumps(result, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
