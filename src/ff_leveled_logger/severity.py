"""
Severity levels for ff-leveled-logger.
"""

from enum import Enum


class Severity(Enum):
    """
    The four fixed log severities.

    The value of each member is the logger method name used to emit it.
    Severities are not ordered and are never used for filtering.
    """

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    FATAL = "fatal"

    @property
    def prefix(self) -> str:
        """Line prefix, e.g. ``"INFO: "``."""
        return f"{self.name}: "

    @classmethod
    def from_method(cls, method_name: str) -> "Severity":
        """Map a structlog method name back to its severity."""
        return cls(method_name)
