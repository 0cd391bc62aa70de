"""
Leveled logger implementation using structlog.
"""

import sys
import threading
from collections.abc import Callable
from typing import IO, Any, TextIO

import structlog
from structlog.types import Processor

from .processors import get_default_processors, sprint, sprintf
from .severity import Severity
from .sinks import close_sinks, terminate, unique_sinks

# One lock for every write and close, across all severities and instances
_LOG_LOCK = threading.Lock()


class LeveledLogger:
    """
    A logger with one independent sink per severity.

    Each severity gets its own structlog logger writing to its sink. Every
    line carries the severity prefix, date, time and the caller's file and
    line number. Writes are serialized by a single process-wide lock.

    Example:
        logger = LeveledLogger(sys.stdout, sys.stdout, sys.stderr, sys.stderr)
        logger.infof("listening on port %d", 8080)
    """

    def __init__(
        self,
        info_sink: IO,
        warning_sink: IO,
        error_sink: IO,
        fatal_sink: IO,
        diagnostics: TextIO | None = None,
        exit_func: Callable[[int], Any] | None = None,
    ):
        """
        Initialize a leveled logger.

        Args:
            info_sink: Destination for info lines
            warning_sink: Destination for warning lines
            error_sink: Destination for error lines
            fatal_sink: Destination for fatal lines
            diagnostics: Stream for sink close failures (default: sys.stderr)
            exit_func: Called with the exit status after a fatal line
                (default: terminate the process)
        """
        self._sinks = {
            Severity.INFO: info_sink,
            Severity.WARNING: warning_sink,
            Severity.ERROR: error_sink,
            Severity.FATAL: fatal_sink,
        }
        self._closers = unique_sinks(self._sinks.values())
        self._diagnostics = diagnostics
        self._exit = exit_func or terminate

        processors = self._get_default_processors()
        self._loggers = {
            severity: structlog.wrap_logger(
                structlog.WriteLogger(sink),
                processors=processors,
                wrapper_class=structlog.BoundLogger,
                cache_logger_on_first_use=True,
            )
            for severity, sink in self._sinks.items()
        }

    def _get_default_processors(self) -> list[Processor]:
        """
        Get the processor chain.
        Can be overridden in subclasses.
        """
        return get_default_processors()

    def _output(self, severity: Severity, message: str) -> None:
        with _LOG_LOCK:
            getattr(self._loggers[severity], severity.value)(message)

    def sink(self, severity: Severity) -> IO:
        """Get the sink bound to ``severity``."""
        return self._sinks[severity]

    def info(self, *values: Any) -> None:
        """Log values at info severity."""
        self._output(Severity.INFO, sprint(*values))

    def infof(self, format_string: str, *args: Any) -> None:
        """Log a printf-style message at info severity."""
        self._output(Severity.INFO, sprintf(format_string, *args))

    def warning(self, *values: Any) -> None:
        """Log values at warning severity."""
        self._output(Severity.WARNING, sprint(*values))

    def warningf(self, format_string: str, *args: Any) -> None:
        """Log a printf-style message at warning severity."""
        self._output(Severity.WARNING, sprintf(format_string, *args))

    def error(self, *values: Any) -> None:
        """Log values at error severity."""
        self._output(Severity.ERROR, sprint(*values))

    def errorf(self, format_string: str, *args: Any) -> None:
        """Log a printf-style message at error severity."""
        self._output(Severity.ERROR, sprintf(format_string, *args))

    def fatal(self, *values: Any) -> None:
        """Log values at fatal severity, close all sinks and exit with status 1."""
        self._fatal(sprint, *values)

    def fatalf(self, format_string: str, *args: Any) -> None:
        """Log a printf-style fatal message, close all sinks and exit with status 1."""
        self._fatal(sprintf, format_string, *args)

    def _fatal(self, format_func: Callable[..., str], *values: Any) -> None:
        # The process always ends, even when the line cannot be written
        try:
            self._output(Severity.FATAL, format_func(*values))
        except Exception as e:
            print(f"Failed to write fatal log: {e}", file=self._diagnostics or sys.stderr)
        finally:
            self._shutdown()

    def _shutdown(self) -> None:
        self.close()
        self._exit(1)

    def close(self) -> None:
        """
        Close every registered sink in registration order.

        Failures are reported to the diagnostic stream and never raised, and
        the remaining sinks are still closed. A sink passed for several
        severities is closed once. Standard streams are flushed, not closed.
        """
        with _LOG_LOCK:
            close_sinks(self._closers, self._diagnostics)

    def __repr__(self) -> str:
        sinks = ", ".join(f"{s.value}={sink!r}" for s, sink in self._sinks.items())
        return f"{self.__class__.__name__}({sinks})"
