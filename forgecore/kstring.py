"""String helpers with optional memory accounting."""

from __future__ import annotations

from forgecore.kmemory import MemoryTag, MemoryTracker


def string_length(text: str) -> int:
    """Return the number of characters in ``text``."""
    return len(text)


def string_duplicate(text: str, tracker: MemoryTracker | None = None) -> str:
    """Return a copy of ``text``, accounting its storage under STRING."""
    if tracker is not None:
        tracker.allocate(len(text.encode("utf-8")) + 1, MemoryTag.STRING)
    return "".join(text)


def strings_equal(first: str, second: str) -> bool:
    """Case-sensitive comparison."""
    return first == second