"""
In-memory logger for tests.
"""

import io
from typing import Any

from .base import LeveledLogger
from .severity import Severity


class CaptureBuffer(io.StringIO):
    """A StringIO that counts close() calls and stays readable afterwards."""

    def __init__(self):
        super().__init__()
        self.close_count = 0

    def close(self) -> None:
        self.close_count += 1


class CaptureLogger(LeveledLogger):
    """
    A leveled logger that captures every severity into its own buffer.

    ``fatal`` records the exit status and raises ``SystemExit`` instead of
    ending the process, so tests can assert on it with ``pytest.raises``.

    Example:
        logger = CaptureLogger()
        logger.infof("count=%d", 3)
        assert logger.lines(Severity.INFO)[0].endswith("count=3")
    """

    def __init__(self, diagnostics: Any = None):
        self.exit_code: int | None = None
        super().__init__(
            CaptureBuffer(),
            CaptureBuffer(),
            CaptureBuffer(),
            CaptureBuffer(),
            diagnostics=diagnostics,
            exit_func=self._record_exit,
        )

    def _record_exit(self, code: int) -> None:
        self.exit_code = code
        raise SystemExit(code)

    def output(self, severity: Severity) -> str:
        """Raw text written at ``severity``."""
        return self.sink(severity).getvalue()

    def lines(self, severity: Severity) -> list[str]:
        """Captured lines for ``severity``."""
        return self.output(severity).splitlines()

    def clear(self) -> None:
        """Clear captured output."""
        for severity in Severity:
            buffer = self.sink(severity)
            buffer.seek(0)
            buffer.truncate()
