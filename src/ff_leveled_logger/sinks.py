"""
Sink helpers: opening log files, closing sinks and terminating the process.
"""

import os
import sys
from collections.abc import Iterable
from typing import IO, Any, TextIO

# Permission bits for newly created log files, before the umask is applied
FILE_MODE = 0o666


def terminate(code: int = 1) -> None:
    """
    Flush the standard streams and end the process immediately.

    Uses ``os._exit`` so the process ends even when called from a
    non-main thread, and no ``finally`` block or ``except`` clause runs.
    """
    for stream in (sys.stdout, sys.stderr):
        try:
            if stream is not None:
                stream.flush()
        except (OSError, ValueError):
            pass
    os._exit(code)


def _opener(path: str, flags: int) -> int:
    return os.open(path, flags, FILE_MODE)


def file_for_saving(file_name: str | os.PathLike) -> TextIO:
    """
    Open a log file for appending, creating it when missing.

    A program that cannot open its own log file cannot continue, so a
    failure is reported to stderr and the process exits with status 1.

    Args:
        file_name: Path of the log file

    Returns:
        Open text file handle in append mode
    """
    try:
        return open(file_name, "a", encoding="utf-8", buffering=1, opener=_opener)
    except OSError as e:
        print(f"Failed to open log file {file_name}: {e}", file=sys.stderr)
        terminate(1)
        raise


def is_standard_stream(sink: Any) -> bool:
    """Whether ``sink`` is one of the interpreter's standard streams."""
    return any(
        sink is stream
        for stream in (sys.stdout, sys.stderr, sys.__stdout__, sys.__stderr__)
        if stream is not None
    )


def unique_sinks(sinks: Iterable[IO]) -> list[IO]:
    """Drop repeated sink objects, keeping first-registration order."""
    seen: set[int] = set()
    result = []
    for sink in sinks:
        if id(sink) not in seen:
            seen.add(id(sink))
            result.append(sink)
    return result


def close_sinks(sinks: Iterable[IO], diagnostics: TextIO | None = None) -> list[Exception]:
    """
    Close every sink, reporting failures without stopping.

    Standard streams are flushed instead of closed. Objects without a
    ``close`` method are skipped.

    Args:
        sinks: Sinks in the order they were registered
        diagnostics: Stream for failure reports (default: sys.stderr)

    Returns:
        The errors that were reported, in order
    """
    failures = []
    for sink in sinks:
        try:
            if is_standard_stream(sink):
                sink.flush()
            elif hasattr(sink, "close"):
                sink.close()
        except Exception as e:
            failures.append(e)
            print(f"Failed to close log {sink!r}: {e}", file=diagnostics or sys.stderr)
    return failures
