import argparse
import os
import sys

import yaml

from graphwire.bootstrap.deps import get_config
from graphwire.core.helpers.utils import setup_logging
from graphwire.core.models.fingerprint import TypeFingerprint
from graphwire.core.models.ident import BinaryID


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="graphwire",
        description=(
            "Inspect graphwire identifiers and configuration.\n\n"
            "graphwire is a binary object-graph codec: shared instances are\n"
            "sent once per session and decoded through a fingerprint-keyed\n"
            "type registry."
        ),
        formatter_class=argparse.RawTextHelpFormatter
    )

    parser.add_argument(
        "-c", "--config",
        type=str,
        help="Path to a graphwire configuration file"
    )

    parser.add_argument(
        "-l", "--log-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging verbosity, overrides the configuration file."
    )

    commands = parser.add_subparsers(dest="command", required=True)

    fingerprint = commands.add_parser(
        "fingerprint",
        help="Print the type fingerprint derived from a type signature."
    )
    fingerprint.add_argument("signature", help="Canonical type signature, e.g. 'geo.Point{x:f64,y:f64}'")

    binary_id = commands.add_parser(
        "binary-id",
        help="Print the content identifier of a file ('-' reads stdin)."
    )
    binary_id.add_argument("path")

    commands.add_parser("config", help="Print the effective configuration as YAML.")

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    if args.config:
        os.environ["GRAPHWIRECONFIG"] = args.config

    config = get_config()
    setup_logging(args.log_level or config.logging.level)

    if args.command == "fingerprint":
        print(TypeFingerprint.for_signature(args.signature))
    elif args.command == "binary-id":
        if args.path == "-":
            payload = sys.stdin.buffer.read()
        else:
            with open(args.path, "rb") as f:
                payload = f.read()
        print(BinaryID.of(payload))
    elif args.command == "config":
        print(yaml.safe_dump(config.model_dump(mode="json"), sort_keys=False), end="")

    return 0


if __name__ == "__main__":
    sys.exit(main())
