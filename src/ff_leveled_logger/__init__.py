"""
ff-leveled-logger: Leveled logging with one sink per severity.

Provides info, warning, error and fatal logging on top of structlog, plus
an error wrapper that captures the call stack.
"""

__version__ = "0.1.0"

from .base import LeveledLogger
from .config import configure_logging
from .default import (
    close,
    error,
    errorf,
    fatal,
    fatalf,
    get_logger,
    info,
    infof,
    init,
    warning,
    warningf,
)
from .errors import LoggerNotInitializedError, WrappedError, wrap, wrap_error
from .severity import Severity
from .sinks import file_for_saving

__all__ = [
    "LeveledLogger",
    "Severity",
    "WrappedError",
    "LoggerNotInitializedError",
    "init",
    "get_logger",
    "info",
    "infof",
    "warning",
    "warningf",
    "error",
    "errorf",
    "fatal",
    "fatalf",
    "close",
    "file_for_saving",
    "configure_logging",
    "wrap",
    "wrap_error",
]
