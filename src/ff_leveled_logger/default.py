"""
Process-wide default logger.

Thin module-level wrappers around a single :class:`LeveledLogger` for
programs that only need one. Call :func:`init` once during single-threaded
startup before logging.
"""

from typing import IO, Any

from .base import LeveledLogger
from .errors import LoggerNotInitializedError

_default_logger: LeveledLogger | None = None


def init(info_sink: IO, warning_sink: IO, error_sink: IO, fatal_sink: IO) -> LeveledLogger:
    """
    Create the default logger, replacing any previous one.

    Not safe to call concurrently with itself or with logging calls.

    Returns:
        The new default logger
    """
    global _default_logger
    _default_logger = LeveledLogger(info_sink, warning_sink, error_sink, fatal_sink)
    return _default_logger


def set_logger(logger: LeveledLogger | None) -> None:
    """Install an existing logger as the default, or clear it with ``None``."""
    global _default_logger
    _default_logger = logger


def get_logger() -> LeveledLogger:
    """
    Get the default logger.

    Raises:
        LoggerNotInitializedError: If init() has not been called
    """
    if _default_logger is None:
        raise LoggerNotInitializedError()
    return _default_logger


def is_initialized() -> bool:
    return _default_logger is not None


def info(*values: Any) -> None:
    get_logger().info(*values)


def infof(format_string: str, *args: Any) -> None:
    get_logger().infof(format_string, *args)


def warning(*values: Any) -> None:
    get_logger().warning(*values)


def warningf(format_string: str, *args: Any) -> None:
    get_logger().warningf(format_string, *args)


def error(*values: Any) -> None:
    get_logger().error(*values)


def errorf(format_string: str, *args: Any) -> None:
    get_logger().errorf(format_string, *args)


def fatal(*values: Any) -> None:
    get_logger().fatal(*values)


def fatalf(format_string: str, *args: Any) -> None:
    get_logger().fatalf(format_string, *args)


def close() -> None:
    """Close every sink of the default logger."""
    get_logger().close()
