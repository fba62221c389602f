"""
compressible CLI.

Classify media types and inspect the reference table from the shell.
"""

import argparse
import sys

from ..classifier import classify
from ..constants import MIME_DB_COMMIT, MIME_DB_SOURCE_URL
from ..logging import cli_logger as logger
from ..logging import configure_logging
from ..table import get_reference_table
from .formatters import (
    classification_to_dict,
    format_classifications_text,
    format_essences_text,
    format_info_text,
    format_json,
)


def cmd_check(args) -> int:
    """Classify each media type given on the command line."""
    classifications = [classify(content_type) for content_type in args.content_types]

    if args.format == "json":
        print(format_json([classification_to_dict(c) for c in classifications]), end="")
    else:
        print(format_classifications_text(classifications), end="")

    rejected = [c for c in classifications if not c.compressible]
    logger.debug("check_complete", checked=len(classifications), rejected=len(rejected))

    if args.strict and rejected:
        return 1
    return 0


def cmd_list(args) -> int:
    """List media types in the reference table."""
    essences = get_reference_table().essences(prefix=args.prefix)

    if args.format == "json":
        print(format_json(essences), end="")
    else:
        print(format_essences_text(essences), end="")
    return 0


def cmd_info(args) -> int:
    """Show where the reference data came from."""
    info = {
        "source_commit": MIME_DB_COMMIT,
        "source_url": MIME_DB_SOURCE_URL,
        "entries": len(get_reference_table()),
    }

    if args.format == "json":
        print(format_json(info), end="")
    else:
        print(format_info_text(info), end="")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="compressible",
        description="compressible - Check whether media types are worth compressing",
    )
    parser.add_argument("--log-level", help="Override COMPRESSIBLE_LOG_LEVEL")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Check command
    check_parser = subparsers.add_parser("check", help="Classify media types")
    check_parser.add_argument("content_types", nargs="+", metavar="TYPE", help="Media type")
    check_parser.add_argument("--format", choices=["text", "json"], default="text")
    check_parser.add_argument(
        "--strict", action="store_true", help="Exit 1 if any type is not compressible"
    )

    # List command
    list_parser = subparsers.add_parser("list", help="List compressible media types")
    list_parser.add_argument("--prefix", help="Only types starting with this, e.g. 'text/'")
    list_parser.add_argument("--format", choices=["text", "json"], default="text")

    # Info command
    info_parser = subparsers.add_parser("info", help="Show reference data provenance")
    info_parser.add_argument("--format", choices=["text", "json"], default="text")

    return parser


def main(argv=None) -> int:
    """Main entry point with CLI interface."""
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(args.log_level)

    commands = {
        "check": cmd_check,
        "list": cmd_list,
        "info": cmd_info,
    }

    if args.command in commands:
        return commands[args.command](args)

    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
