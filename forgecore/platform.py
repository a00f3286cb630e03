"""Console output, timing and sleeping on the host platform."""

from __future__ import annotations

import sys
import time
from typing import TextIO

# Indexed by log level: FATAL, ERROR, WARN, INFO, DEBUG, TRACE.
_COLOUR_CODES = ("0;41", "1;31", "1;33", "1;32", "1;34", "1;30")


def _write(stream: TextIO, message: str, colour: int) -> None:
    stream.write(f"\033[{_COLOUR_CODES[colour]}m{message}\033[0m")
    stream.flush()


def console_write(message: str, colour: int) -> None:
    """Write a coloured message to standard output."""
    _write(sys.stdout, message, colour)


def console_write_error(message: str, colour: int) -> None:
    """Write a coloured message to standard error."""
    _write(sys.stderr, message, colour)


def get_absolute_time() -> float:
    """Return a monotonic time in seconds."""
    return time.monotonic()


def sleep(ms: int) -> None:
    """Block the calling thread for the given number of milliseconds."""
    if ms < 0:
        raise ValueError(f"sleep time must not be negative, got {ms}")
    time.sleep(ms / 1000)