"""A stopwatch driven by a time source."""

from __future__ import annotations

from typing import Callable

from forgecore import platform


class Clock:
    """Tracks time elapsed since it was started."""

    def __init__(self, time_source: Callable[[], float] | None = None) -> None:
        self._time_source = time_source or platform.get_absolute_time
        self.start_time = 0.0
        self.elapsed = 0.0

    def start(self) -> None:
        """Start the clock and reset the elapsed time."""
        self.start_time = self._time_source()
        self.elapsed = 0.0

    def update(self) -> None:
        """Refresh the elapsed time; has no effect on a stopped clock."""
        if self.start_time != 0:
            self.elapsed = self._time_source() - self.start_time

    def stop(self) -> None:
        """Stop the clock without resetting the elapsed time."""
        self.start_time = 0.0