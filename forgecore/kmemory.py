"""Tagged memory accounting and raw buffer helpers."""

from __future__ import annotations

from enum import IntEnum

from forgecore import logger


class MemoryTag(IntEnum):
    """Category an allocation is accounted under."""

    UNKNOWN = 0
    ARRAY = 1
    LINEAR_ALLOCATOR = 2
    DARRAY = 3
    DICT = 4
    RING_QUEUE = 5
    BST = 6
    STRING = 7
    APPLICATION = 8
    JOB = 9
    TEXTURE = 10
    MATERIAL_INSTANCE = 11
    RENDERER = 12
    GAME = 13
    TRANSFORM = 14
    ENTITY = 15
    ENTITY_NODE = 16
    SCENE = 17


_TAG_LABELS = {
    MemoryTag.UNKNOWN: "UNKNOWN    ",
    MemoryTag.ARRAY: "ARRAY      ",
    MemoryTag.LINEAR_ALLOCATOR: "LINEAR_ALLC",
    MemoryTag.DARRAY: "DARRAY     ",
    MemoryTag.DICT: "DICT       ",
    MemoryTag.RING_QUEUE: "RING_QUEUE ",
    MemoryTag.BST: "BST        ",
    MemoryTag.STRING: "STRING     ",
    MemoryTag.APPLICATION: "APPLICATION",
    MemoryTag.JOB: "JOB        ",
    MemoryTag.TEXTURE: "TEXTURE    ",
    MemoryTag.MATERIAL_INSTANCE: "MAT_INST   ",
    MemoryTag.RENDERER: "RENDERER   ",
    MemoryTag.GAME: "GAME       ",
    MemoryTag.TRANSFORM: "TRANSFORM  ",
    MemoryTag.ENTITY: "ENTITY     ",
    MemoryTag.ENTITY_NODE: "ENTITY_NODE",
    MemoryTag.SCENE: "SCENE      ",
}

_KIB = 1024
_MIB = 1024 * 1024
_GIB = 1024 * 1024 * 1024


def _format_amount(amount: int) -> str:
    if amount >= _GIB:
        return f"{amount / _GIB:.2f}GiB"
    if amount >= _MIB:
        return f"{amount / _MIB:.2f}MiB"
    if amount >= _KIB:
        return f"{amount / _KIB:.2f}KiB"
    return f"{float(amount):.2f}B"


class MemoryTracker:
    """Keeps running totals of allocated bytes, overall and per tag."""

    def __init__(self) -> None:
        self.total_allocated = 0
        self._tagged = dict.fromkeys(MemoryTag, 0)

    def allocate(self, size: int, tag: MemoryTag | int) -> bytearray:
        """Return a zeroed buffer of ``size`` bytes and account for it."""
        tag = MemoryTag(tag)
        if size < 0:
            raise ValueError(f"allocation size must not be negative, got {size}")
        if tag is MemoryTag.UNKNOWN:
            logger.warn("kallocate called using MEMORY_TAG_UNKNOWN. Re-class this allocation.")
        self.total_allocated += size
        self._tagged[tag] += size
        return bytearray(size)

    def free(self, block: object, size: int, tag: MemoryTag | int) -> None:
        """Release ``size`` bytes previously accounted under ``tag``."""
        tag = MemoryTag(tag)
        if size < 0:
            raise ValueError(f"free size must not be negative, got {size}")
        if tag is MemoryTag.UNKNOWN:
            logger.warn("kfree called using MEMORY_TAG_UNKNOWN. Re-class this allocation.")
        self.total_allocated -= size
        self._tagged[tag] -= size

    def tagged(self, tag: MemoryTag | int) -> int:
        """Bytes currently accounted under ``tag``."""
        return self._tagged[MemoryTag(tag)]

    def usage_report(self) -> str:
        """Human-readable table of memory use per tag."""
        lines = ["System memory use (tagged):\n"]
        lines.extend(
            f"  {_TAG_LABELS[tag]}: {_format_amount(amount)}\n"
            for tag, amount in self._tagged.items()
        )
        return "".join(lines)


def _check_span(buffer_len: int, size: int) -> None:
    if size < 0 or size > buffer_len:
        raise ValueError(f"size {size} does not fit a buffer of {buffer_len} bytes")


def zero_memory(block: bytearray | memoryview) -> bytearray | memoryview:
    """Set every byte of ``block`` to zero and return it."""
    block[:] = bytes(len(block))
    return block


def copy_memory(dest, source, size: int):
    """Copy ``size`` bytes from ``source`` into the start of ``dest``."""
    _check_span(len(dest), size)
    _check_span(len(source), size)
    dest[:size] = bytes(source[:size])
    return dest


def set_memory(dest, value: int, size: int):
    """Fill the first ``size`` bytes of ``dest`` with the low byte of ``value``."""
    _check_span(len(dest), size)
    dest[:size] = bytes([value & 0xFF]) * size
    return dest