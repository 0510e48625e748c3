"""CLI runner for relsum.

Turns parsed arguments into RunOptions, runs the update check and maps the
outcome to an exit code.
"""

import os
import sys
from collections.abc import Mapping, Sequence
from pathlib import Path

from relsum import __version__
from relsum.cli.parser import CLIParser
from relsum.config import RunOptions
from relsum.core.http_session import create_http_session
from relsum.core.update import ManifestUpdater
from relsum.exceptions import RelsumError
from relsum.logger import get_logger, set_console_level

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_NG = 1


class CLIRunner:
    """Run one relsum invocation."""

    def __init__(
        self,
        parser: CLIParser | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        """Initialize CLI runner.

        Args:
            parser: Argument parser (default CLIParser)
            environ: Environment mapping (defaults to os.environ)

        """
        self.parser = parser or CLIParser()
        self.environ = os.environ if environ is None else environ

    async def run(self, argv: Sequence[str] | None = None) -> int:
        """Parse arguments and run the update check.

        Args:
            argv: Arguments without the program name

        Returns:
            Process exit code

        """
        args = self.parser.parse_args(argv)

        if args.version:
            print(f"Version: {__version__}")
            return EXIT_OK

        if args.log_level:
            set_console_level(args.log_level)

        if not args.item:
            print("Error! Target is not specified", file=sys.stderr)
            self.parser.create_parser().print_usage(sys.stderr)
            return EXIT_NG

        options = RunOptions.from_args(args, self.environ)
        return await self._check(Path(args.item), options)

    async def _check(self, item_file: Path, options: RunOptions) -> int:
        try:
            async with create_http_session() as session:
                updater = ManifestUpdater(session, options)
                result = await updater.check(item_file)
        except RelsumError as e:
            logger.error("Error! %s", e)
            return EXIT_NG

        if result.up_to_date:
            print("Manifest is up-to-date. Nothing to do")
        return EXIT_OK
