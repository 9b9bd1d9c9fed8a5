"""Polling of keyboard and mouse state."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Optional, Set, Tuple

from hazel.events import (
    Event,
    KeyPressedEvent,
    KeyReleasedEvent,
    MouseButtonPressedEvent,
    MouseButtonReleasedEvent,
    MouseMovedEvent,
)
from hazel.log import core_assert


class Input(ABC):
    """A source of current keyboard and mouse state."""

    @abstractmethod
    def is_key_pressed(self, keycode: int) -> bool:
        """Whether the key is held down."""

    @abstractmethod
    def is_mouse_button_pressed(self, button: int) -> bool:
        """Whether the mouse button is held down."""

    @abstractmethod
    def mouse_position(self) -> Tuple[float, float]:
        """The cursor position within the window."""


class WindowInput(Input):
    """Input state kept up to date from the events of a window."""

    def __init__(self, window: Any) -> None:
        self.window = window
        self._keys: Set[int] = set()
        self._buttons: Set[int] = set()
        self._position: Tuple[float, float] = (0.0, 0.0)

    def on_event(self, event: Event) -> None:
        """Update the state from an event of the window."""
        if isinstance(event, KeyPressedEvent):
            self._keys.add(int(event.key_code))
        elif isinstance(event, KeyReleasedEvent):
            self._keys.discard(int(event.key_code))
        elif isinstance(event, MouseButtonPressedEvent):
            self._buttons.add(int(event.button))
        elif isinstance(event, MouseButtonReleasedEvent):
            self._buttons.discard(int(event.button))
        elif isinstance(event, MouseMovedEvent):
            self._position = (float(event.x), float(event.y))

    def is_key_pressed(self, keycode: int) -> bool:
        return int(keycode) in self._keys

    def is_mouse_button_pressed(self, button: int) -> bool:
        return int(button) in self._buttons

    def mouse_position(self) -> Tuple[float, float]:
        return self._position


_input: Optional[Input] = None


def set_input(input_impl: Optional[Input]) -> Optional[Input]:
    """Make ``input_impl`` the global input source; return the previous one."""
    global _input
    previous, _input = _input, input_impl
    return previous


def _current() -> Input:
    core_assert(_input is not None, "no input source has been set")
    return _input  # type: ignore[return-value]


def is_key_pressed(keycode: int) -> bool:
    """Whether the key is held down."""
    return _current().is_key_pressed(keycode)


def is_mouse_button_pressed(button: int) -> bool:
    """Whether the mouse button is held down."""
    return _current().is_mouse_button_pressed(button)


def get_mouse_position() -> Tuple[float, float]:
    """The cursor position within the window."""
    return _current().mouse_position()


def get_mouse_x() -> float:
    """The cursor's horizontal position."""
    return get_mouse_position()[0]


def get_mouse_y() -> float:
    """The cursor's vertical position."""
    return get_mouse_position()[1]