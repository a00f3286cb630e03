"""Levelled, coloured console logging."""

from __future__ import annotations

import sys
from enum import IntEnum

from forgecore import platform


class LogLevel(IntEnum):
    """Severity of a log entry; lower is more severe."""

    FATAL = 0
    ERROR = 1
    WARN = 2
    INFO = 3
    DEBUG = 4
    TRACE = 5


_LEVEL_PREFIXES = {
    LogLevel.FATAL: "[FATAL]: ",
    LogLevel.ERROR: "[ERROR]: ",
    LogLevel.WARN: "[WARN]:  ",
    LogLevel.INFO: "[INFO]:  ",
    LogLevel.DEBUG: "[DEBUG]: ",
    LogLevel.TRACE: "[TRACE]: ",
}

# A single entry holds at most this many characters, terminator included.
_MESSAGE_LIMIT = 32000


def initialize_logging() -> bool:
    """Prepare the logging system. Always succeeds."""
    return True


def shutdown_logging() -> None:
    """Flush anything still pending on the console streams."""
    sys.stdout.flush()
    sys.stderr.flush()


def log_output(level: LogLevel | int, message: str, *args: object) -> str:
    """Format and write a log entry; return the line that was written."""
    level = LogLevel(level)
    text = message % args if args else message
    text = text[: _MESSAGE_LIMIT - 1]
    line = f"{_LEVEL_PREFIXES[level]}{text}\n"
    if level < LogLevel.WARN:
        platform.console_write_error(line, int(level))
    else:
        platform.console_write(line, int(level))
    return line


def fatal(message: str, *args: object) -> str:
    """Log a fatal-level message."""
    return log_output(LogLevel.FATAL, message, *args)


def error(message: str, *args: object) -> str:
    """Log an error-level message."""
    return log_output(LogLevel.ERROR, message, *args)


def warn(message: str, *args: object) -> str:
    """Log a warning-level message."""
    return log_output(LogLevel.WARN, message, *args)


def info(message: str, *args: object) -> str:
    """Log an info-level message."""
    return log_output(LogLevel.INFO, message, *args)


def debug(message: str, *args: object) -> str:
    """Log a debug-level message."""
    return log_output(LogLevel.DEBUG, message, *args)


def trace(message: str, *args: object) -> str:
    """Log a trace-level message."""
    return log_output(LogLevel.TRACE, message, *args)


def report_assertion_failure(expression: str, message: str, file: str, line: int) -> str:
    """Log a failed assertion at fatal level."""
    return log_output(
        LogLevel.FATAL,
        "Assertion Failure: %s, message: %s, in file: %s, line: %d\n",
        expression,
        message,
        file,
        line,
    )