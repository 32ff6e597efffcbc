"""Command-line interface for prefixer.

Usage:
    prefixer inject ./e2e-tests --prefix "//go:build e2e" --pattern "*.go" -e
    prefixer remove ./e2e-tests --prefix-file header.txt --pattern "*.go"
    prefixer rm ./src --prefix "# generated" -e

Exit status:
    0: run completed (individual file failures are reported, not fatal)
    1: invalid input, unreadable prefix file, unreadable root, bad config
    2: usage error reported by argparse (e.g. missing root path)
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from typing import TextIO

from pydantic import ValidationError

from . import __version__
from .config import ConfigLoader, PrefixerConfig
from .engine import (
    ArgumentError,
    Operation,
    OperationRequest,
    PrefixerError,
    PrefixRunner,
    resolve_prefix,
)

logger = logging.getLogger(__name__)

_OPERATIONS = {
    "inject": Operation.INJECT,
    "remove": Operation.REMOVE,
    "rm": Operation.REMOVE,
}


def _common_options() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("root_path", metavar="ROOT_PATH", help="Directory to walk recursively")
    common.add_argument(
        "--pattern",
        default=None,
        help="File pattern specifying files to modify (default: '*').",
    )
    common.add_argument("--prefix", default=None, help="Prefix to inject or remove.")
    common.add_argument(
        "--prefix-file",
        default=None,
        help="File from which prefix to inject or remove should be read.",
    )
    common.add_argument(
        "-e",
        "--with-line-end",
        action="store_true",
        default=None,
        help="Additionally add/remove a line break after the prefix.",
    )
    common.add_argument(
        "--no-with-line-end",
        dest="with_line_end",
        action="store_false",
        default=None,
        help="Do not add/remove a line break, even if the config file enables it.",
    )
    return common


def build_parser() -> argparse.ArgumentParser:
    """Build the ``prefixer`` argument parser with inject/remove subcommands."""
    parser = argparse.ArgumentParser(
        prog="prefixer",
        description="Add or remove prefixes from all files matching the pattern in directory.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--config", default=None, help="Path to YAML config file.")
    parser.add_argument(
        "--log-level",
        default=None,
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level for diagnostics on stderr.",
    )

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    common = _common_options()

    subparsers.add_parser(
        "inject",
        parents=[common],
        help="Inject prefix to all matching files that do not already start with it.",
        epilog='Example: prefixer inject ./e2e-tests --prefix "//+build e2e" --pattern "*.go"',
    )
    subparsers.add_parser(
        "remove",
        aliases=["rm"],
        parents=[common],
        help="Remove prefix from all matching files.",
        epilog='Example: prefixer remove ./e2e-tests --prefix "//+build e2e" --pattern "*.go"',
    )
    return parser


def configure_logging(level_name: str) -> None:
    """Send diagnostics to stderr; stdout is reserved for progress output."""
    logging.basicConfig(
        level=getattr(logging, level_name),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


def build_request(args: argparse.Namespace, config: PrefixerConfig) -> OperationRequest:
    """Merge parsed arguments over config defaults into an OperationRequest.

    Raises:
        ArgumentError: Empty root path, no prefix, or an invalid value
        PrefixSourceError: --prefix-file could not be read
    """
    if not args.root_path:
        raise ArgumentError("requires 1 argument [ROOT_PATH]")

    prefix = resolve_prefix(args.prefix, args.prefix_file, config.encoding)
    pattern = args.pattern if args.pattern is not None else config.pattern
    with_line_end = (
        args.with_line_end if args.with_line_end is not None else config.with_line_end
    )

    try:
        return OperationRequest(
            operation=_OPERATIONS[args.command],
            root_path=args.root_path,
            prefix=prefix,
            pattern=pattern,
            with_line_end=with_line_end,
            encoding=config.encoding,
        )
    except ValidationError as e:
        raise ArgumentError(f"invalid arguments: {e}") from e


def main(argv: Sequence[str] | None = None, out: TextIO | None = None) -> int:
    """Entry point for the ``prefixer`` console script.

    Args:
        argv: Arguments without the program name (defaults to sys.argv[1:])
        out: Progress output stream (defaults to sys.stdout)

    Returns:
        Process exit status
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help(file=out)
        return 0

    try:
        config = ConfigLoader(args.config).load_config()
    except PrefixerError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    configure_logging(args.log_level or config.log_level)

    try:
        request = build_request(args, config)
        PrefixRunner(out=out).run(request)
    except PrefixerError as e:
        logger.debug(f"Aborting: {e!r}")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0
