# hide/cli.py

"""Command line entry point for hiding sensitive values in JSON files."""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from pydantic import ValidationError

from hide import __version__
from hide.core.exceptions import RedactionError
from hide.core.loader import KeysConfigLoader
from hide.logging_config import configure_logging
from hide.service.config import Settings
from hide.service.pipeline import prepare_store, redact_file

logger = logging.getLogger(__name__)


def split_keys(values: Optional[Sequence[str]]) -> List[str]:
    """Flattens repeated, comma-delimited flag values into single keys.

    Surrounding whitespace is stripped; empty items are kept so the store
    can reject them.
    """
    keys: List[str] = []
    for value in values or ():
        keys.extend(part.strip() for part in value.split(","))
    return keys


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hide",
        description="Hide the values of sensitive keys in a JSON document.",
    )
    parser.add_argument(
        "-i", "--input", type=Path, metavar="FILE", help="path to the input JSON file"
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        metavar="FILE",
        help="path to the output file, requires --input",
    )
    parser.add_argument(
        "-d", "--debug", action="store_true", help="enable debug logging"
    )
    parser.add_argument(
        "--add-keys",
        action="append",
        metavar="LIST",
        help="comma-separated keys to hide in the JSON; "
        "whitespace around each key is stripped",
    )
    parser.add_argument(
        "--remove-keys",
        action="append",
        metavar="LIST",
        help="comma-separated keys to stop hiding; "
        "whitespace around each key is stripped",
    )
    parser.add_argument(
        "-V", "--version", action="version", version=f"%(prog)s {__version__}"
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Runs the tool and returns the process exit status."""
    parser = build_parser()
    argv = list(sys.argv[1:] if argv is None else argv)

    if not argv:
        parser.print_help(sys.stderr)
        return 2

    args = parser.parse_args(argv)

    if args.output is not None and args.input is None:
        parser.error("the following arguments are required: -i/--input")

    try:
        settings = Settings()
    except ValidationError as e:
        print(f"hide: invalid settings: {e}", file=sys.stderr)
        return 1

    configure_logging("DEBUG" if args.debug else settings.log_level)
    logger.debug("Arguments received", extra={"cli_args": vars(args)})

    add = split_keys(args.add_keys)
    remove = split_keys(args.remove_keys)

    try:
        store, _ = prepare_store(KeysConfigLoader(settings.config_path), add, remove)

        if args.input is None:
            logger.info("No input given, only key changes were applied")
            return 0

        redact_file(args.input, store, args.output, indent=settings.indent)

    except RedactionError as e:
        logger.debug("Run aborted", exc_info=True)
        print(f"hide: {e}", file=sys.stderr)
        return 1

    return 0


def run() -> None:
    sys.exit(main())
