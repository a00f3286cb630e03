"""Keyboard and mouse state tracking with change events."""

from __future__ import annotations

from enum import IntEnum
from typing import Optional

from forgecore import logger
from forgecore.event import EventCode, EventContext, EventSystem

_KEY_SLOTS = 256


class Buttons(IntEnum):
    """Mouse buttons."""

    LEFT = 0
    RIGHT = 1
    MIDDLE = 2
    MAX_BUTTONS = 3


class Keys(IntEnum):
    """Keyboard key codes."""

    BACKSPACE = 0x08
    ENTER = 0x0D
    TAB = 0x09
    SHIFT = 0x10
    CONTROL = 0x11

    PAUSE = 0x13
    CAPITAL = 0x14

    ESCAPE = 0x1B

    CONVERT = 0x1C
    NONCONVERT = 0x1D
    ACCEPT = 0x1E
    MODECHANGE = 0x1F

    SPACE = 0x20
    PRIOR = 0x21
    NEXT = 0x22
    END = 0x23
    HOME = 0x24
    LEFT = 0x25
    UP = 0x26
    RIGHT = 0x27
    DOWN = 0x28
    SELECT = 0x29
    PRINT = 0x2A
    EXECUTE = 0x2B
    SNAPSHOT = 0x2C
    INSERT = 0x2D
    DELETE = 0x2E
    HELP = 0x2F

    A = 0x41
    B = 0x42
    C = 0x43
    D = 0x44
    E = 0x45
    F = 0x46
    G = 0x47
    H = 0x48
    I = 0x49  # noqa: E741
    J = 0x4A
    K = 0x4B
    L = 0x4C
    M = 0x4D
    N = 0x4E
    O = 0x4F  # noqa: E741
    P = 0x50
    Q = 0x51
    R = 0x52
    S = 0x53
    T = 0x54
    U = 0x55
    V = 0x56
    W = 0x57
    X = 0x58
    Y = 0x59
    Z = 0x5A

    LWIN = 0x5B
    RWIN = 0x5C
    APPS = 0x5D

    SLEEP = 0x5F

    NUMPAD0 = 0x60
    NUMPAD1 = 0x61
    NUMPAD2 = 0x62
    NUMPAD3 = 0x63
    NUMPAD4 = 0x64
    NUMPAD5 = 0x65
    NUMPAD6 = 0x66
    NUMPAD7 = 0x67
    NUMPAD8 = 0x68
    NUMPAD9 = 0x69
    MULTIPLY = 0x6A
    ADD = 0x6B
    SEPARATOR = 0x6C
    SUBTRACT = 0x6D
    DECIMAL = 0x6E
    DIVIDE = 0x6F
    F1 = 0x70
    F2 = 0x71
    F3 = 0x72
    F4 = 0x73
    F5 = 0x74
    F6 = 0x75
    F7 = 0x76
    F8 = 0x77
    F9 = 0x78
    F10 = 0x79
    F11 = 0x7A
    F12 = 0x7B
    F13 = 0x7C
    F14 = 0x7D
    F15 = 0x7E
    F16 = 0x7F
    F17 = 0x80
    F18 = 0x81
    F19 = 0x82
    F20 = 0x83
    F21 = 0x84
    F22 = 0x85
    F23 = 0x86
    F24 = 0x87

    NUMLOCK = 0x90
    SCROLL = 0x91

    NUMPAD_EQUAL = 0x92

    LSHIFT = 0xA0
    RSHIFT = 0xA1
    LCONTROL = 0xA2
    RCONTROL = 0xA3
    LALT = 0xA4
    RALT = 0xA5

    SEMICOLON = 0xBA
    PLUS = 0xBB
    COMMA = 0xBC
    MINUS = 0xBD
    PERIOD = 0xBE
    SLASH = 0xBF
    GRAVE = 0xC0

    MAX_KEYS = 0xC1


def _key_index(key: int) -> int:
    index = int(key)
    if not 0 <= index < _KEY_SLOTS:
        raise ValueError(f"key code must be in [0, {_KEY_SLOTS}), got {index}")
    return index


def _button_index(button: int) -> Buttons:
    value = Buttons(button)
    if value is Buttons.MAX_BUTTONS:
        raise ValueError("MAX_BUTTONS is not a real button")
    return value


def _check_range(name: str, value: int, low: int, high: int) -> int:
    value = int(value)
    if not low <= value <= high:
        raise ValueError(f"{name} must be in [{low}, {high}], got {value}")
    return value


class InputSystem:
    """Current and previous-frame keyboard and mouse state."""

    def __init__(self, events: Optional[EventSystem] = None) -> None:
        self.events = events if events is not None else EventSystem()
        self._keys_current = [False] * _KEY_SLOTS
        self._keys_previous = [False] * _KEY_SLOTS
        self._buttons_current = [False] * Buttons.MAX_BUTTONS
        self._buttons_previous = [False] * Buttons.MAX_BUTTONS
        self._mouse_current = (0, 0)
        self._mouse_previous = (0, 0)
        self._initialized = True
        logger.info("Input subsystem initialized")

    def shutdown(self) -> None:
        """Stop reporting state; queries return neutral values afterwards."""
        self._initialized = False

    def update(self, delta_time: float) -> None:
        """Copy the current state to the previous state at the end of a frame."""
        if not self._initialized:
            return
        self._keys_previous = list(self._keys_current)
        self._buttons_previous = list(self._buttons_current)
        self._mouse_previous = self._mouse_current

    # Keyboard

    def is_key_down(self, key: int) -> bool:
        index = _key_index(key)
        return self._initialized and self._keys_current[index]

    def is_key_up(self, key: int) -> bool:
        index = _key_index(key)
        return not self._initialized or not self._keys_current[index]

    def was_key_down(self, key: int) -> bool:
        index = _key_index(key)
        return self._initialized and self._keys_previous[index]

    def was_key_up(self, key: int) -> bool:
        index = _key_index(key)
        return not self._initialized or not self._keys_previous[index]

    def process_key(self, key: int, pressed: bool) -> None:
        """Record a key state and fire an event if it changed."""
        index = _key_index(key)
        pressed = bool(pressed)
        if self._keys_current[index] == pressed:
            return
        self._keys_current[index] = pressed
        code = EventCode.KEY_PRESSED if pressed else EventCode.KEY_RELEASED
        self.events.fire(code, None, EventContext.pack("H", index))

    # Mouse

    def is_button_down(self, button: int) -> bool:
        index = _button_index(button)
        return self._initialized and self._buttons_current[index]

    def is_button_up(self, button: int) -> bool:
        index = _button_index(button)
        return not self._initialized or not self._buttons_current[index]

    def was_button_down(self, button: int) -> bool:
        index = _button_index(button)
        return self._initialized and self._buttons_previous[index]

    def was_button_up(self, button: int) -> bool:
        index = _button_index(button)
        return not self._initialized or not self._buttons_previous[index]

    def mouse_position(self) -> tuple[int, int]:
        """Current cursor position, or (0, 0) when shut down."""
        return self._mouse_current if self._initialized else (0, 0)

    def previous_mouse_position(self) -> tuple[int, int]:
        """Cursor position at the end of the last frame, or (0, 0) when shut down."""
        return self._mouse_previous if self._initialized else (0, 0)

    def process_button(self, button: int, pressed: bool) -> None:
        """Record a button state and fire an event if it changed."""
        index = _button_index(button)
        pressed = bool(pressed)
        if self._buttons_current[index] == pressed:
            return
        self._buttons_current[index] = pressed
        code = EventCode.BUTTON_PRESSED if pressed else EventCode.BUTTON_RELEASED
        self.events.fire(code, None, EventContext.pack("H", int(index)))

    def process_mouse_move(self, x: int, y: int) -> None:
        """Record the cursor position and fire an event if it changed."""
        x = _check_range("x", x, -32768, 32767)
        y = _check_range("y", y, -32768, 32767)
        if (x, y) == self._mouse_current:
            return
        self._mouse_current = (x, y)
        context = EventContext.pack("HH", x & 0xFFFF, y & 0xFFFF)
        self.events.fire(EventCode.MOUSE_MOVED, None, context)

    def process_mouse_wheel(self, z_delta: int) -> None:
        """Fire a mouse wheel event; no state is kept."""
        z_delta = _check_range("z_delta", z_delta, -128, 127)
        context = EventContext.pack("B", z_delta & 0xFF)
        self.events.fire(EventCode.MOUSE_WHEEL, None, context)