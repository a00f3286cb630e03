import pytest

from forgecore.event import EventCode, EventSystem
from forgecore.input import Buttons, InputSystem, Keys


class Capture:
    def __init__(self):
        self.received = []

    def __call__(self, code, sender, listener, context):
        self.received.append((code, context))
        return False


@pytest.fixture
def events():
    return EventSystem()


@pytest.fixture
def system(events):
    return InputSystem(events)


def listen(events, code):
    capture = Capture()
    events.register(code, capture, capture)
    return capture


@pytest.mark.parametrize("raw, key", [(0x1B, Keys.ESCAPE), (0x41, Keys.A), (0x5A, Keys.Z)])
def test_key_values_match_source(system, raw, key):
    system.process_key(raw, True)
    assert system.is_key_down(key) is True


@pytest.mark.parametrize(
    "raw, button", [(0, Buttons.LEFT), (1, Buttons.RIGHT), (2, Buttons.MIDDLE)]
)
def test_button_order(system, raw, button):
    system.process_button(raw, True)
    assert system.is_button_down(button) is True


def test_initial_state_all_up(system):
    assert system.is_key_up(Keys.A) is True
    assert system.is_key_down(Keys.A) is False
    assert system.is_button_up(Buttons.LEFT) is True
    assert system.mouse_position() == (0, 0)


def test_process_key_fires_pressed_event(system, events):
    capture = listen(events, EventCode.KEY_PRESSED)
    system.process_key(Keys.A, True)
    assert system.is_key_down(Keys.A) is True
    assert len(capture.received) == 1
    code, context = capture.received[0]
    assert code == EventCode.KEY_PRESSED
    assert context.unpack("H") == (Keys.A,)


def test_unchanged_key_does_not_fire(system, events):
    capture = listen(events, EventCode.KEY_PRESSED)
    system.process_key(Keys.B, True)
    system.process_key(Keys.B, True)
    assert len(capture.received) == 1


def test_key_release_fires_released_event(system, events):
    capture = listen(events, EventCode.KEY_RELEASED)
    system.process_key(Keys.SPACE, True)
    system.process_key(Keys.SPACE, False)
    assert [c for c, _ in capture.received] == [EventCode.KEY_RELEASED]
    assert system.is_key_up(Keys.SPACE) is True


def test_update_copies_current_to_previous(system):
    system.process_key(Keys.ENTER, True)
    assert system.was_key_down(Keys.ENTER) is False
    system.update(0.016)
    assert system.was_key_down(Keys.ENTER) is True
    system.process_key(Keys.ENTER, False)
    assert system.was_key_down(Keys.ENTER) is True
    assert system.is_key_up(Keys.ENTER) is True


def test_button_press_and_previous_state(system, events):
    capture = listen(events, EventCode.BUTTON_PRESSED)
    system.process_button(Buttons.RIGHT, True)
    assert system.is_button_down(Buttons.RIGHT) is True
    assert system.was_button_up(Buttons.RIGHT) is True
    system.update(0.016)
    assert system.was_button_down(Buttons.RIGHT) is True
    assert capture.received[0][1].unpack("H") == (Buttons.RIGHT,)


def test_invalid_button_rejected(system):
    with pytest.raises(ValueError):
        system.process_button(Buttons.MAX_BUTTONS, True)
    with pytest.raises(ValueError):
        system.is_button_down(7)


def test_invalid_key_rejected(system):
    with pytest.raises(ValueError):
        system.process_key(256, True)


def test_mouse_move_updates_position_and_fires(system, events):
    capture = listen(events, EventCode.MOUSE_MOVED)
    system.process_mouse_move(-1, 5)
    assert system.mouse_position() == (-1, 5)
    assert capture.received[0][1].unpack("hh") == (-1, 5)
    system.process_mouse_move(-1, 5)
    assert len(capture.received) == 1


def test_previous_mouse_position_follows_update(system):
    system.process_mouse_move(10, 20)
    assert system.previous_mouse_position() == (0, 0)
    system.update(0.016)
    assert system.previous_mouse_position() == (10, 20)


def test_mouse_move_out_of_range_rejected(system):
    with pytest.raises(ValueError):
        system.process_mouse_move(40000, 0)


def test_mouse_wheel_fires_every_time(system, events):
    capture = listen(events, EventCode.MOUSE_WHEEL)
    system.process_mouse_wheel(-1)
    system.process_mouse_wheel(-1)
    assert len(capture.received) == 2
    assert capture.received[0][1].unpack("b") == (-1,)


def test_shutdown_returns_neutral_values(system):
    system.process_key(Keys.A, True)
    system.process_mouse_move(3, 4)
    system.update(0.016)
    system.shutdown()
    assert system.is_key_down(Keys.A) is False
    assert system.is_key_up(Keys.A) is True
    assert system.was_key_up(Keys.A) is True
    assert system.mouse_position() == (0, 0)
    assert system.previous_mouse_position() == (0, 0)


def test_default_event_system_created():
    system = InputSystem()
    capture = listen(system.events, EventCode.KEY_PRESSED)
    system.process_key(Keys.Z, True)
    assert capture.received[0][1].unpack("H") == (Keys.Z,)