"""
Configuration system for ff-leveled-logger.

Supports environment variables, config files, and programmatic configuration
of where each severity is written.
"""

import json
import os
import sys
from pathlib import Path
from typing import IO, Any

from .base import LeveledLogger
from .default import get_logger, init, is_initialized
from .sinks import file_for_saving

_DEFAULT_CONFIG: dict[str, str] = {
    "info": "stdout",
    "warning": "stdout",
    "error": "stderr",
    "fatal": "stderr",
}

# Global configuration
_GLOBAL_CONFIG: dict[str, str] = dict(_DEFAULT_CONFIG)

_ENV_VARS = {
    "info": "FF_LOG_INFO",
    "warning": "FF_LOG_WARNING",
    "error": "FF_LOG_ERROR",
    "fatal": "FF_LOG_FATAL",
}


def configure_logging(
    info: str | Path | None = None,
    warning: str | Path | None = None,
    error: str | Path | None = None,
    fatal: str | Path | None = None,
    config_file: str | Path | None = None,
    use_env: bool = True,
) -> LeveledLogger:
    """
    Configure destinations and initialize the default logger.

    Each destination is ``"stdout"``, ``"stderr"`` or a file path.
    Later sources override earlier ones: defaults, config file,
    environment variables, then explicit arguments.
    Any previously installed default logger is closed first; its standard
    streams are only flushed.

    Args:
        info: Destination for info lines
        warning: Destination for warning lines
        error: Destination for error lines
        fatal: Destination for fatal lines
        config_file: Path to JSON config file
        use_env: Whether to read from environment variables

    Returns:
        The newly installed default logger

    Raises:
        ValueError: If the config file contains an unknown key
    """
    # Load from config file if provided
    if config_file:
        config_path = Path(config_file)
        if config_path.exists():
            with open(config_path) as f:
                _GLOBAL_CONFIG.update(_validate(json.load(f)))

    # Load from environment variables if enabled
    if use_env:
        _GLOBAL_CONFIG.update(_load_env_config())

    # Apply explicit arguments (highest priority)
    explicit = {"info": info, "warning": warning, "error": error, "fatal": fatal}
    for key, value in explicit.items():
        if value is not None:
            _GLOBAL_CONFIG[key] = str(value)

    # Release the handles of the logger being replaced
    if is_initialized():
        get_logger().close()

    sinks = open_sinks(_GLOBAL_CONFIG)
    return init(sinks["info"], sinks["warning"], sinks["error"], sinks["fatal"])


def _validate(file_config: dict[str, Any]) -> dict[str, str]:
    unknown = set(file_config) - set(_DEFAULT_CONFIG)
    if unknown:
        raise ValueError(f"Unknown logging config keys: {', '.join(sorted(unknown))}")
    return {key: str(value) for key, value in file_config.items()}


def _load_env_config() -> dict[str, str]:
    """Load configuration from environment variables."""
    config = {}

    # FF_LOG_FILE sends every severity to one file
    if log_file := os.getenv("FF_LOG_FILE"):
        config.update(dict.fromkeys(_DEFAULT_CONFIG, log_file))

    # FF_LOG_INFO, FF_LOG_WARNING, FF_LOG_ERROR, FF_LOG_FATAL
    for key, var in _ENV_VARS.items():
        if destination := os.getenv(var):
            config[key] = destination

    return config


def open_sinks(config: dict[str, str]) -> dict[str, IO]:
    """
    Resolve destinations to open sinks.

    A file path shared by several severities is opened once.
    """
    opened: dict[str, IO] = {}
    sinks = {}
    for key, destination in config.items():
        if destination.lower() == "stdout":
            sinks[key] = sys.stdout
        elif destination.lower() == "stderr":
            sinks[key] = sys.stderr
        else:
            path = os.path.abspath(destination)
            if path not in opened:
                opened[path] = file_for_saving(path)
            sinks[key] = opened[path]
    return sinks


def get_config() -> dict[str, str]:
    """Get current global configuration."""
    return _GLOBAL_CONFIG.copy()


def reset_config() -> None:
    """Reset configuration to defaults."""
    _GLOBAL_CONFIG.clear()
    _GLOBAL_CONFIG.update(_DEFAULT_CONFIG)
