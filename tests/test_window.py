import string

import pytest

from hazel.events import (
    KeyPressedEvent,
    KeyReleasedEvent,
    KeyTypedEvent,
    MouseButtonPressedEvent,
    MouseMovedEvent,
    MouseScrolledEvent,
    WindowCloseEvent,
)
from hazel.input_codes import Key, MouseButton
from hazel.window import (
    Window,
    WindowProps,
    _WindowState,
    translate_key,
    translate_mouse_button,
)


@pytest.fixture
def state():
    events = []
    window_state = _WindowState("test", 200, 100)
    window_state.callback = events.append
    return window_state, events


def test_window_props_defaults():
    props = WindowProps()
    assert (props.title, props.width, props.height) == ("Hazel Engine", 1280, 720)


def test_window_is_abstract():
    with pytest.raises(TypeError):
        Window()


def test_letters_translate_to_matching_keys():
    for letter in string.ascii_lowercase:
        assert translate_key(ord(letter)) == Key[letter.upper()]


def test_digits_translate():
    for digit in range(10):
        assert translate_key(ord(str(digit))) == Key[f"D{digit}"]


def test_printable_punctuation_uses_ascii():
    assert translate_key(ord(" ")) is Key.SPACE
    assert translate_key(ord(",")) is Key.COMMA


def test_function_keys_translate():
    assert translate_key(0xFF0D) is Key.ENTER
    assert translate_key(0xFF1B) is Key.ESCAPE
    assert translate_key(0xFFBE) is Key.F1


def test_unknown_key_translates_to_none():
    assert translate_key(-5) is None


def test_mouse_buttons_translate():
    assert translate_mouse_button(1) is MouseButton.LEFT
    assert translate_mouse_button(4) is MouseButton.RIGHT
    assert translate_mouse_button(2) is MouseButton.MIDDLE
    assert translate_mouse_button(3) is None


def test_resize_updates_size_and_emits(state):
    window_state, events = state
    window_state.on_resize(800, 600)
    assert (window_state.width, window_state.height) == (800, 600)
    assert str(events[0]) == "WindowResizeEvent: (800, 600)"


def test_close_is_handled_and_emits(state):
    window_state, events = state
    assert window_state.on_close() is True
    assert isinstance(events[0], WindowCloseEvent)


def test_key_press_and_release(state):
    window_state, events = state
    window_state.on_key_press(ord("a"), 0)
    window_state.on_key_release(ord("a"), 0)
    assert isinstance(events[0], KeyPressedEvent)
    assert events[0].key_code == Key.A
    assert isinstance(events[1], KeyReleasedEvent)
    assert events[1].key_code == Key.A


def test_unknown_key_emits_nothing(state):
    window_state, events = state
    window_state.on_key_press(-5, 0)
    assert events == []


def test_text_emits_one_event_per_character(state):
    window_state, events = state
    window_state.on_text("ab")
    assert all(isinstance(event, KeyTypedEvent) for event in events)
    assert [event.key_code for event in events] == [ord("a"), ord("b")]


def test_mouse_press_uses_engine_button(state):
    window_state, events = state
    window_state.on_mouse_press(0, 0, 1, 0)
    assert isinstance(events[0], MouseButtonPressedEvent)
    assert events[0].button == MouseButton.LEFT


def test_mouse_motion_flips_y(state):
    window_state, events = state
    window_state.on_mouse_motion(10, 20, 0, 0)
    event = events[0]
    assert isinstance(event, MouseMovedEvent)
    assert event.x == 10
    assert event.y + 20 == window_state.height


def test_mouse_drag_reports_motion(state):
    window_state, events = state
    window_state.on_mouse_drag(5, 100, 1, 1, 1, 0)
    assert isinstance(events[0], MouseMovedEvent)
    assert events[0].y == 0


def test_scroll_reports_offsets(state):
    window_state, events = state
    window_state.on_mouse_scroll(0, 0, 1.5, -2.0)
    assert isinstance(events[0], MouseScrolledEvent)
    assert (events[0].x_offset, events[0].y_offset) == (1.5, -2.0)