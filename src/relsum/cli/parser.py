"""CLI argument parser for relsum."""

import argparse
from argparse import Namespace
from collections.abc import Sequence

from relsum.constants import DEFAULT_DOWNLOAD_TIMEOUT_SECONDS


def _positive_seconds(value: str) -> float:
    try:
        seconds = float(value)
    except ValueError:
        msg = f"not a number: {value!r}"
        raise argparse.ArgumentTypeError(msg) from None
    if seconds <= 0:
        msg = f"must be positive: {value!r}"
        raise argparse.ArgumentTypeError(msg)
    return seconds


class CLIParser:
    """Command-line argument parser for relsum."""

    def create_parser(self) -> argparse.ArgumentParser:
        """Create the argument parser.

        Returns:
            argparse.ArgumentParser: Configured parser

        """
        parser = argparse.ArgumentParser(
            prog="relsum",
            description=(
                "Update a binq item manifest to the latest GitHub release, "
                "with checksums of the release assets"
            ),
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="""
Examples:
  # Check an item and prompt before updating it
  %(prog)s path/to/item.json

  # Update without confirmation, verbose output
  %(prog)s -y -L debug path/to/item.json

Environment:
  GITHUB_TOKEN     GitHub API token (if --token is not given)
  BINQ_BIN         binq executable (default: binq)
  RELSUM_LOG_FILE  also write a debug log to this file
            """,
        )
        parser.add_argument(
            "item",
            nargs="?",
            metavar="ITEM_JSON",
            help="binq item JSON file to check",
        )
        parser.add_argument(
            "-t",
            "--token",
            default="",
            help="GitHub API token",
        )
        parser.add_argument(
            "-y",
            "--yes",
            action="store_true",
            help="update JSON file without confirmation",
        )
        parser.add_argument(
            "-L",
            "--log-level",
            default="",
            metavar="LEVEL",
            help="log level (debug, info, notice, warn, error)",
        )
        parser.add_argument(
            "-T",
            "--download-timeout",
            type=_positive_seconds,
            default=DEFAULT_DOWNLOAD_TIMEOUT_SECONDS,
            metavar="SECONDS",
            help="timeout for each asset download (default: %(default)s)",
        )
        parser.add_argument(
            "-v",
            "--version",
            action="store_true",
            help="show version and exit",
        )
        return parser

    def parse_args(self, argv: Sequence[str] | None = None) -> Namespace:
        """Parse command-line arguments.

        Args:
            argv: Arguments without the program name (defaults to
                sys.argv[1:])

        Returns:
            Namespace: Parsed arguments namespace.

        """
        return self.create_parser().parse_args(argv)
