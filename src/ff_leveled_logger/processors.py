"""
Message formatting and structlog processors for ff-leveled-logger.

The processor chain for every severity ends in :func:`render_line`, which
turns the event dictionary into the stable text line::

    INFO: 2024/01/31 15:04:05 main.py:42: message
"""

from collections.abc import Mapping
from typing import Any

import structlog
from structlog.types import Processor

from .severity import Severity

TIMESTAMP_FORMAT = "%Y/%m/%d %H:%M:%S"

# Frames from these modules are never reported as the call site.
# Matched by module-name prefix; the trailing dot limits it to our submodules.
INTERNAL_MODULES = ["ff_leveled_logger."]


def sprint(*values: Any) -> str:
    """
    Concatenate values into a message.

    A space is added between two operands when neither of them is a string,
    so ``sprint("count=", 3)`` gives ``"count=3"`` and ``sprint(1, 2)``
    gives ``"1 2"``.
    """
    parts: list[str] = []
    for index, value in enumerate(values):
        if index and not isinstance(value, str) and not isinstance(values[index - 1], str):
            parts.append(" ")
        parts.append(str(value))
    return "".join(parts)


def sprintf(format_string: str, *args: Any) -> str:
    """
    Apply printf-style substitution.

    With no arguments the format string is returned untouched, so a literal
    ``%`` does not need escaping. A single non-empty mapping argument is used
    for named substitution, as in ``sprintf("%(n)d", {"n": 1})``.

    Raises:
        TypeError: If the arguments do not match the format
        ValueError: If the format string is malformed
    """
    if not args:
        return format_string
    if len(args) == 1 and isinstance(args[0], Mapping) and args[0]:
        return format_string % args[0]
    return format_string % args


def render_line(logger: Any, method_name: str, event_dict: dict[str, Any]) -> str:
    """
    Render the final log line.

    Expects ``timestamp``, ``filename`` and ``lineno`` to have been added by
    the earlier processors in the chain.
    """
    severity = Severity.from_method(method_name)
    message = str(event_dict.get("event", ""))
    if message.endswith("\n"):
        message = message[:-1]
    return (
        f"{severity.prefix}{event_dict['timestamp']} "
        f"{event_dict['filename']}:{event_dict['lineno']}: {message}"
    )


def get_default_processors() -> list[Processor]:
    """Processor chain shared by all four severity loggers."""
    return [
        structlog.processors.TimeStamper(fmt=TIMESTAMP_FORMAT, utc=False),
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.FILENAME,
                structlog.processors.CallsiteParameter.LINENO,
            ],
            additional_ignores=INTERNAL_MODULES,
        ),
        render_line,
    ]
