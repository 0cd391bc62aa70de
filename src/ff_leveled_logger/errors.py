"""
Errors for ff-leveled-logger, including the stack-capturing error wrapper.
"""

import sys
import traceback
from typing import Any


class LoggerNotInitializedError(RuntimeError):
    """Raised when the default logger is used before ``init`` was called."""

    def __init__(self):
        super().__init__("Default logger is not initialized; call init() first")


class WrappedError(Exception):
    """
    An error message paired with the call stack at the point it was wrapped.

    ``str()`` returns only the message; the stack is kept in
    :attr:`stack_trace`.
    """

    def __init__(self, message: str, stack_trace: str):
        super().__init__(message)
        self._message = message
        self._stack_trace = stack_trace

    @property
    def message(self) -> str:
        return self._message

    @property
    def stack_trace(self) -> str:
        return self._stack_trace

    def __str__(self) -> str:
        return self._message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._message!r})"


def _capture_stack(depth: int) -> str:
    # depth 0 is the caller of _capture_stack
    frame = sys._getframe(depth + 1)
    return "Stack (most recent call last):\n" + "".join(traceback.format_stack(frame))


def wrap_error(message: str) -> WrappedError:
    """
    Build a :class:`WrappedError` carrying ``message`` and the current stack.

    The captured stack ends at the line that called ``wrap_error``.
    """
    return WrappedError(message, _capture_stack(1))


def wrap(error: Any) -> WrappedError:
    """
    Wrap any error-like value with a freshly captured stack trace.

    The trace shows where ``wrap`` was called, not where ``error`` was
    first raised. When ``error`` is an exception it is kept as
    ``__cause__`` so its own traceback stays reachable.

    Example:
        try:
            step()
        except OSError as e:
            raise wrap(e)
    """
    wrapped = WrappedError(str(error), _capture_stack(1))
    if isinstance(error, BaseException):
        wrapped.__cause__ = error
    return wrapped
