"""An event bus keyed by numeric codes with fixed-size payloads."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Callable, Optional

# Codes must fall below this bound.
MAX_MESSAGE_CODES = 16384

# Size in bytes of the payload carried by every event.
CONTEXT_SIZE = 16

_BYTE_ORDER_MARKS = "@=<>!"


class EventCode(IntEnum):
    """Codes used by the engine itself; applications should use codes above 255."""

    # Shuts the application down on the next frame.
    APPLICATION_QUIT = 0x01
    # Payload: u16 key code.
    KEY_PRESSED = 0x02
    # Payload: u16 key code.
    KEY_RELEASED = 0x03
    # Payload: u16 button.
    BUTTON_PRESSED = 0x04
    # Payload: u16 button.
    BUTTON_RELEASED = 0x05
    # Payload: u16 x, u16 y.
    MOUSE_MOVED = 0x06
    # Payload: u8 z delta.
    MOUSE_WHEEL = 0x07
    # Payload: u16 width, u16 height.
    RESIZED = 0x08
    MAX_EVENT_CODE = 0xFF


def _struct_format(fmt: str) -> str:
    return fmt if fmt and fmt[0] in _BYTE_ORDER_MARKS else "<" + fmt


@dataclass(frozen=True)
class EventContext:
    """A 16-byte payload that can be viewed as any packed layout."""

    data: bytes = field(default=bytes(CONTEXT_SIZE))

    def __post_init__(self) -> None:
        raw = bytes(self.data)
        if len(raw) > CONTEXT_SIZE:
            raise ValueError(
                f"event data holds at most {CONTEXT_SIZE} bytes, got {len(raw)}"
            )
        object.__setattr__(self, "data", raw.ljust(CONTEXT_SIZE, b"\0"))

    @classmethod
    def pack(cls, fmt: str, *args: object) -> "EventContext":
        """Build a context from values packed with a ``struct`` format.

        Little-endian is used unless the format names a byte order.
        """
        return cls(struct.pack(_struct_format(fmt), *args))

    def unpack(self, fmt: str) -> tuple:
        """Read values from the start of the payload with a ``struct`` format."""
        return struct.unpack_from(_struct_format(fmt), self.data)


EventCallback = Callable[[int, object, object, EventContext], bool]


@dataclass(frozen=True)
class _Registration:
    listener: object
    callback: EventCallback


def _check_code(code: int) -> int:
    code = int(code)
    if not 0 <= code < MAX_MESSAGE_CODES:
        raise ValueError(f"event code must be in [0, {MAX_MESSAGE_CODES}), got {code}")
    return code


class EventSystem:
    """Dispatches events to registered listeners in registration order."""

    def __init__(self) -> None:
        self._registered: dict[int, list[_Registration]] = {}

    def register(self, code: int, listener: object, callback: EventCallback) -> bool:
        """Listen for ``code``; False if ``listener`` is already registered for it."""
        code = _check_code(code)
        entries = self._registered.setdefault(code, [])
        if any(entry.listener is listener for entry in entries):
            return False
        entries.append(_Registration(listener, callback))
        return True

    def unregister(self, code: int, listener: object, callback: EventCallback) -> bool:
        """Stop listening for ``code``; False if no matching registration exists."""
        code = _check_code(code)
        entries = self._registered.get(code)
        if not entries:
            return False
        for position, entry in enumerate(entries):
            if entry.listener is listener and entry.callback == callback:
                del entries[position]
                return True
        return False

    def fire(
        self,
        code: int,
        sender: object = None,
        context: Optional[EventContext] = None,
    ) -> bool:
        """Send an event; True as soon as a listener reports it handled."""
        code = _check_code(code)
        entries = self._registered.get(code)
        if not entries:
            return False
        if context is None:
            context = EventContext()
        for entry in list(entries):
            if entry.callback(code, sender, entry.listener, context):
                return True
        return False

    def shutdown(self) -> None:
        """Drop every registration."""
        self._registered.clear()