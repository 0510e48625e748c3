"""Logging utilities for relsum.

Application → QueueHandler → Queue → QueueListener → console (stderr)
and, when $RELSUM_LOG_FILE is set, a rotating file.

Rules for contributors:
    1. Always use: logger = get_logger(__name__)
    2. Never call logging.basicConfig()
    3. Never attach handlers to child loggers
    4. Use %-formatting in log calls, never f-strings
"""

from relsum.logger.formatters import (
    ColoredConsoleFormatter,
    HybridConsoleFormatter,
)
from relsum.logger.handlers import ConfigurationError
from relsum.logger.logger import (
    clear_logger_state,
    flush_all_handlers,
    get_logger,
    parse_log_level,
    set_console_level,
    setup_logging,
)
from relsum.logger.state import get_state

__all__ = [
    "ColoredConsoleFormatter",
    "ConfigurationError",
    "HybridConsoleFormatter",
    "clear_logger_state",
    "flush_all_handlers",
    "get_logger",
    "get_state",
    "parse_log_level",
    "set_console_level",
    "setup_logging",
]
