"""Main CLI entry point for relsum."""

import sys

import uvloop

from relsum.cli import CLIRunner
from relsum.logger import flush_all_handlers, get_logger

logger = get_logger(__name__)


async def async_main() -> int:
    """Run the CLI and return its exit code."""
    logger.debug("CLI started")
    return await CLIRunner().run()


def main() -> None:
    """Run the CLI application.

    Raises:
        SystemExit: Always, with the run's exit code

    """
    try:
        exit_code = uvloop.run(async_main())
    except KeyboardInterrupt:
        logger.info("Cancelled by user")
        exit_code = 1
    except Exception:
        logger.exception("Unexpected error")
        exit_code = 1
    finally:
        flush_all_handlers()
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
