"""Logging formatters for console output.

- ColoredConsoleFormatter: ANSI color on the level name
- HybridConsoleFormatter: bare message for INFO and NOTICE, colored
  structured lines for everything else

Progress lines such as ``GET <url>`` are logged at INFO and should read like
plain output, while warnings and errors keep their context.
"""

import logging

from relsum.constants import LOG_COLORS, NOTICE_LEVEL


class ColoredConsoleFormatter(logging.Formatter):
    """Console formatter that colors the level name.

    The record's levelname is swapped only for the duration of format() so
    other handlers see the original value.
    """

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with a colored level name.

        Args:
            record: The log record to format

        Returns:
            Formatted message

        """
        color = LOG_COLORS.get(record.levelname)
        if color is None:
            return super().format(record)

        original_levelname = record.levelname
        record.levelname = f"{color}{original_levelname}{LOG_COLORS['RESET']}"
        try:
            return super().format(record)
        finally:
            record.levelname = original_levelname


class HybridConsoleFormatter(logging.Formatter):
    """Bare messages for INFO/NOTICE, structured colored lines otherwise.

    Example Output:
        INFO:     "GET https://github.com/o/r/releases/download/v1/app.zip"
        WARNING:  "12:30:45 - relsum.core.checksum - WARNING - Unknown ..."

    """

    def __init__(
        self,
        fmt: str | None = None,
        datefmt: str | None = None,
    ) -> None:
        """Initialize hybrid formatter.

        Args:
            fmt: Format string for structured messages
            datefmt: Date format string for timestamps

        """
        super().__init__(fmt, datefmt)
        self._colored_formatter = ColoredConsoleFormatter(fmt, datefmt)

    def format(self, record: logging.LogRecord) -> str:
        """Format log record using simple or structured format by level.

        Args:
            record: The log record to format

        Returns:
            Formatted message

        """
        if record.levelno in (logging.INFO, NOTICE_LEVEL):
            message = record.getMessage()
            if record.exc_info:
                message = f"{message}\n{self.formatException(record.exc_info)}"
            return message
        return self._colored_formatter.format(record)
