"""Process-wide state of the hash1 logging setup."""

import logging
import threading
from dataclasses import dataclass, field
from logging.handlers import RotatingFileHandler


@dataclass(slots=True)
class _LoggerState:
    """Handlers attached to the ``hash1`` logger and setup flags.

    Attributes:
        lock: Guards initialization and handler changes
        root_initialized: Whether the ``hash1`` logger has handlers
        config_applied: Whether settings.conf has been applied
        console_handler: Handler writing to the standard error stream
        file_handler: Rotating file handler, None until file logging is on

    """

    lock: threading.Lock = field(default_factory=threading.Lock)
    root_initialized: bool = False
    config_applied: bool = False
    console_handler: logging.Handler | None = None
    file_handler: RotatingFileHandler | None = None


_state = _LoggerState()


def get_state() -> _LoggerState:
    """Return the logger state shared by the whole process."""
    return _state
