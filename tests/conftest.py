"""
Pytest configuration and fixtures for ff-leveled-logger tests.
"""

import io

import pytest
from ff_leveled_logger.config import reset_config
from ff_leveled_logger.default import set_logger


@pytest.fixture(autouse=True)
def reset_logging_state(monkeypatch):
    """Start every test without a default logger or FF_LOG_* overrides."""
    for var in ("FF_LOG_FILE", "FF_LOG_INFO", "FF_LOG_WARNING", "FF_LOG_ERROR", "FF_LOG_FATAL"):
        monkeypatch.delenv(var, raising=False)
    yield
    set_logger(None)
    reset_config()


@pytest.fixture
def buffers():
    """Four separate in-memory sinks, one per severity."""
    return [io.StringIO() for _ in range(4)]
