"""Public logging API for relsum.

- setup_logging(): wire the root logger once, return a named logger
- get_logger(): the call every module uses
- parse_log_level() / set_console_level(): apply ``--log-level`` words
- flush_all_handlers() / clear_logger_state(): shutdown and test helpers
"""

import atexit
import contextlib
import logging
import os
import time
from pathlib import Path

from relsum.constants import (
    DEFAULT_LOG_LEVEL,
    ENV_LOG_FILE,
    ENV_LOG_LEVEL,
    LOG_LEVEL_WORDS,
    NOTICE_LEVEL,
    NOTICE_LEVEL_NAME,
)
from relsum.logger.handlers import ROOT_LOGGER_NAME, setup_root_logger
from relsum.logger.state import get_state

logging.addLevelName(NOTICE_LEVEL, NOTICE_LEVEL_NAME)


def parse_log_level(word: str) -> int | None:
    """Translate a level word into a numeric logging level.

    Accepts the CLI words (debug, info, notice, warn, error) and standard
    level names, case-insensitively.

    Args:
        word: Level word from the command line or environment

    Returns:
        Numeric level, or None if the word is unknown

    """
    name = LOG_LEVEL_WORDS.get(word.strip().lower())
    if name is None:
        return None
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else None


def _default_console_level() -> int:
    env_word = os.getenv(ENV_LOG_LEVEL)
    if env_word:
        level = parse_log_level(env_word)
        if level is not None:
            return level
    return logging.getLevelName(DEFAULT_LOG_LEVEL)


def _default_log_file() -> Path | None:
    env_path = os.getenv(ENV_LOG_FILE)
    if not env_path:
        return None
    return Path(env_path).expanduser()


def flush_all_handlers() -> None:
    """Wait for the log queue to drain and flush every handler."""
    state = get_state()
    if state.queue_listener is None or state.log_queue is None:
        return

    deadline = time.monotonic() + 5.0
    while not state.log_queue.empty() and time.monotonic() < deadline:
        time.sleep(0.01)
    # Listener may still be inside handle() for the last record
    time.sleep(0.05)

    for handler in state.queue_listener.handlers:
        with contextlib.suppress(OSError, ValueError):
            handler.flush()


def _cleanup_logging() -> None:
    state = get_state()
    if state.queue_listener is not None:
        flush_all_handlers()
        state.queue_listener.stop()
        state.queue_listener = None


atexit.register(_cleanup_logging)


def setup_logging(
    name: str = ROOT_LOGGER_NAME,
    console_level: int | None = None,
    log_file: Path | None = None,
) -> logging.Logger:
    """Configure the root logger once and return the requested logger.

    Args:
        name: Logger name, typically __name__
        console_level: Console level; defaults to INFO or $LOG_LEVEL
        log_file: Rotating log file; defaults to $RELSUM_LOG_FILE if set

    Returns:
        Logger instance

    Raises:
        ConfigurationError: If file logging setup fails

    """
    state = get_state()
    with state.lock:
        if not state.root_initialized:
            setup_root_logger(
                state,
                console_level
                if console_level is not None
                else _default_console_level(),
                log_file if log_file is not None else _default_log_file(),
            )
    return logging.getLogger(name)


def get_logger(name: str = ROOT_LOGGER_NAME) -> logging.Logger:
    """Get a logger under the relsum hierarchy.

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.info("GET %s", url)

    """
    return setup_logging(name=name)


def set_console_level(word: str) -> bool:
    """Apply a ``--log-level`` word to the console handler.

    Args:
        word: Level word (debug, info, notice, warn, error)

    Returns:
        True if applied, False if the word is unknown (a warning is logged
        and the current level is kept)

    """
    level = parse_log_level(word)
    logger = get_logger(ROOT_LOGGER_NAME)
    if level is None:
        logger.warning("Unknown log level: %s", word)
        return False

    state = get_state()
    if state.console_handler is not None:
        state.console_handler.setLevel(level)
    return True


def clear_logger_state() -> None:
    """Stop the listener and drop relsum loggers. For tests only."""
    state = get_state()
    with state.lock:
        if state.queue_listener is not None:
            flush_all_handlers()
            state.queue_listener.stop()
            state.queue_listener = None

        state.log_queue = None
        state.console_handler = None
        state.root_initialized = False

        for logger_name in list(logging.Logger.manager.loggerDict):
            if logger_name.startswith(ROOT_LOGGER_NAME):
                log_instance = logging.getLogger(logger_name)
                for handler in log_instance.handlers[:]:
                    handler.close()
                    log_instance.removeHandler(handler)
