"""Logger state shared by the relsum logging package.

A single module-level instance tracks whether the root ``relsum`` logger has
been wired to its QueueListener.
"""

import threading
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import logging
    import queue
    from logging.handlers import QueueListener


class _LoggerState:
    """Container for logger state (avoids module-level mutable globals).

    Attributes:
        lock: Guards root logger initialization
        root_initialized: Whether the root logger has handlers attached
        queue_listener: Background thread draining the log queue
        log_queue: Queue between QueueHandler and the listener
        console_handler: Console handler, kept for level changes

    """

    def __init__(self) -> None:
        """Initialize logger state."""
        self.lock = threading.Lock()
        self.root_initialized = False
        self.queue_listener: QueueListener | None = None
        self.log_queue: queue.Queue | None = None
        self.console_handler: logging.Handler | None = None


_state = _LoggerState()


def get_state() -> _LoggerState:
    """Get the global logger state singleton.

    Returns:
        The global logger state instance

    """
    return _state
