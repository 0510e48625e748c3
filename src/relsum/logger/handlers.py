"""Handler creation for the relsum logging system.

All handlers hang off a QueueListener; the ``relsum`` root logger only
carries a QueueHandler, so coroutines never block on handler I/O.
"""

import logging
import queue
import sys
from logging.handlers import QueueHandler, QueueListener, RotatingFileHandler
from pathlib import Path

from relsum.constants import (
    LOG_BACKUP_COUNT,
    LOG_CONSOLE_DATE_FORMAT,
    LOG_CONSOLE_FORMAT,
    LOG_FILE_DATE_FORMAT,
    LOG_FILE_FORMAT,
    LOG_ROTATION_THRESHOLD_BYTES,
)
from relsum.logger.formatters import HybridConsoleFormatter

ROOT_LOGGER_NAME = "relsum"


class ConfigurationError(Exception):
    """Error in logging configuration."""


def _create_console_handler(level: int) -> logging.StreamHandler:
    """Create the stderr handler.

    stdout is left to the revise subprocess and to final user messages.
    """
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(
        HybridConsoleFormatter(
            LOG_CONSOLE_FORMAT,
            datefmt=LOG_CONSOLE_DATE_FORMAT,
        )
    )
    console_handler.setLevel(level)
    return console_handler


def _create_file_handler(log_file: Path) -> RotatingFileHandler:
    """Create a rotating file handler that records everything.

    Raises:
        ConfigurationError: If the log file cannot be opened

    """
    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            filename=str(log_file),
            maxBytes=LOG_ROTATION_THRESHOLD_BYTES,
            backupCount=LOG_BACKUP_COUNT,
            encoding="utf-8",
        )
    except OSError as e:
        msg = f"Failed to setup file logging: {e}"
        raise ConfigurationError(msg) from e

    file_handler.setFormatter(
        logging.Formatter(LOG_FILE_FORMAT, datefmt=LOG_FILE_DATE_FORMAT)
    )
    file_handler.setLevel(logging.DEBUG)
    return file_handler


def setup_root_logger(
    state,
    console_level: int,
    log_file: Path | None,
) -> None:
    """Attach a QueueHandler to the root logger and start the listener.

    Args:
        state: Logger state object (from logger.state module)
        console_level: Numeric level for console output
        log_file: Optional path for a rotating debug log

    Raises:
        ConfigurationError: If the file handler cannot be created

    """
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(logging.DEBUG)  # Capture all, filter at handlers
    root_logger.propagate = False

    for handler in root_logger.handlers[:]:
        handler.close()
        root_logger.removeHandler(handler)

    console_handler = _create_console_handler(console_level)
    handlers: list[logging.Handler] = [console_handler]
    if log_file is not None:
        handlers.append(_create_file_handler(log_file))

    state.log_queue = queue.Queue(-1)
    state.queue_listener = QueueListener(
        state.log_queue,
        *handlers,
        respect_handler_level=True,
    )
    state.queue_listener.start()
    root_logger.addHandler(QueueHandler(state.log_queue))

    state.console_handler = console_handler
    state.root_initialized = True
