#!/usr/bin/env python3
"""
Example usage of ff-leveled-logger showing the default logger, an explicit
logger instance and error wrapping.
"""

import os
import sys
import tempfile

import ff_leveled_logger as log
from ff_leveled_logger import LeveledLogger


def load_settings(path):
    with open(path) as f:
        return f.read()


def main():
    print("=" * 60)
    print("FF-LEVELED-LOGGER USAGE EXAMPLES")
    print("=" * 60)

    # Example 1: Default logger, errors go to a file
    print("\n1. Default logger with a log file for errors:")
    temp_dir = tempfile.mkdtemp()
    error_log = log.file_for_saving(os.path.join(temp_dir, "errors.log"))
    log.init(sys.stdout, sys.stdout, error_log, error_log)

    log.info("Application started")
    log.infof("Listening on port %d", 8080)
    log.warning("Cache miss for ", "user:42")

    # Example 2: Wrapping errors with a stack trace
    print("\n2. Wrapping an error:")
    try:
        load_settings(os.path.join(temp_dir, "missing.toml"))
    except OSError as e:
        wrapped = log.wrap(e)
        log.error(wrapped)
        print(wrapped.stack_trace)

    # Example 3: An independent logger instance
    print("\n3. Explicit logger instance:")
    audit = LeveledLogger(sys.stdout, sys.stdout, sys.stdout, sys.stdout)
    audit.info("audit trail entry")

    log.close()
    with open(os.path.join(temp_dir, "errors.log")) as f:
        print("\nerrors.log:\n" + f.read())


if __name__ == "__main__":
    main()
