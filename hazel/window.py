"""Windows that deliver their input and state changes as engine events."""

from __future__ import annotations

import string
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional

from hazel.events import (
    Event,
    KeyPressedEvent,
    KeyReleasedEvent,
    KeyTypedEvent,
    MouseButtonPressedEvent,
    MouseButtonReleasedEvent,
    MouseMovedEvent,
    MouseScrolledEvent,
    WindowCloseEvent,
    WindowResizeEvent,
)
from hazel.input_codes import Key, MouseButton
from hazel.opengl import OpenGLContext

EventCallback = Callable[[Event], None]


@dataclass
class WindowProps:
    """Options used when a window is created."""

    title: str = "Hazel Engine"
    width: int = 1280
    height: int = 720


class Window(ABC):
    """A native window that reports events through a single callback."""

    @abstractmethod
    def on_update(self) -> None:
        """Process pending native events and present the frame."""

    @property
    @abstractmethod
    def width(self) -> int:
        """Current width in pixels."""

    @property
    @abstractmethod
    def height(self) -> int:
        """Current height in pixels."""

    @property
    @abstractmethod
    def vsync(self) -> bool:
        """Whether presenting waits for vertical sync."""

    @property
    @abstractmethod
    def native_window(self) -> Any:
        """The underlying window object."""

    @abstractmethod
    def set_event_callback(self, callback: EventCallback) -> None:
        """Send every event from this window to ``callback``."""

    def close(self) -> None:
        """Release the native window; nothing to release by default."""


# Key symbols as delivered by pyglet.
_KEYS: Dict[int, Key] = {ord(c): Key[c.upper()] for c in string.ascii_lowercase}
_KEYS.update({ord(str(d)): Key[f"D{d}"] for d in range(10)})
_KEYS.update({0xFFB0 + d: Key[f"KP_{d}"] for d in range(10)})
_KEYS.update({0xFFBE + n: Key[f"F{n + 1}"] for n in range(24)})
_KEYS.update(
    {
        0x20: Key.SPACE,
        0x27: Key.APOSTROPHE,
        0x2C: Key.COMMA,
        0x2D: Key.MINUS,
        0x2E: Key.PERIOD,
        0x2F: Key.SLASH,
        0x3B: Key.SEMICOLON,
        0x3D: Key.EQUAL,
        0x5B: Key.LEFT_BRACKET,
        0x5C: Key.BACKSLASH,
        0x5D: Key.RIGHT_BRACKET,
        0x60: Key.GRAVE_ACCENT,
        0xFF08: Key.BACKSPACE,
        0xFF09: Key.TAB,
        0xFF0D: Key.ENTER,
        0xFF13: Key.PAUSE,
        0xFF14: Key.SCROLL_LOCK,
        0xFF1B: Key.ESCAPE,
        0xFFFF: Key.DELETE,
        0xFF50: Key.HOME,
        0xFF51: Key.LEFT,
        0xFF52: Key.UP,
        0xFF53: Key.RIGHT,
        0xFF54: Key.DOWN,
        0xFF55: Key.PAGE_UP,
        0xFF56: Key.PAGE_DOWN,
        0xFF57: Key.END,
        0xFF61: Key.PRINT_SCREEN,
        0xFF63: Key.INSERT,
        0xFF67: Key.MENU,
        0xFF7F: Key.NUM_LOCK,
        0xFF8D: Key.KP_ENTER,
        0xFFAA: Key.KP_MULTIPLY,
        0xFFAB: Key.KP_ADD,
        0xFFAD: Key.KP_SUBTRACT,
        0xFFAE: Key.KP_DECIMAL,
        0xFFAF: Key.KP_DIVIDE,
        0xFFBD: Key.KP_EQUAL,
        0xFFE1: Key.LEFT_SHIFT,
        0xFFE2: Key.RIGHT_SHIFT,
        0xFFE3: Key.LEFT_CONTROL,
        0xFFE4: Key.RIGHT_CONTROL,
        0xFFE5: Key.CAPS_LOCK,
        0xFFE9: Key.LEFT_ALT,
        0xFFEA: Key.RIGHT_ALT,
        0xFFEB: Key.LEFT_SUPER,
        0xFFEC: Key.RIGHT_SUPER,
    }
)

# Mouse button bits as delivered by pyglet.
_MOUSE_BUTTONS: Dict[int, MouseButton] = {
    1: MouseButton.LEFT,
    2: MouseButton.MIDDLE,
    4: MouseButton.RIGHT,
    8: MouseButton.BUTTON_4,
    16: MouseButton.BUTTON_5,
}


def translate_key(symbol: int) -> Optional[Key]:
    """The engine key for a pyglet key symbol, or None if it has none."""
    return _KEYS.get(symbol)


def translate_mouse_button(button: int) -> Optional[MouseButton]:
    """The engine mouse button for a pyglet button, or None if it has none."""
    return _MOUSE_BUTTONS.get(button)


@dataclass
class _WindowState:
    """Runtime window data; its methods are the native event handlers."""

    title: str
    width: int
    height: int
    vsync: bool = True
    callback: Optional[EventCallback] = field(default=None, repr=False)

    def _emit(self, event: Event) -> None:
        if self.callback is not None:
            self.callback(event)

    def on_resize(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self._emit(WindowResizeEvent(width, height))

    def on_close(self) -> bool:
        self._emit(WindowCloseEvent())
        return True  # the application decides when to close

    def on_key_press(self, symbol: int, modifiers: int) -> bool:
        key = translate_key(symbol)
        if key is not None:
            self._emit(KeyPressedEvent(int(key), 0))
        return True

    def on_key_release(self, symbol: int, modifiers: int) -> None:
        key = translate_key(symbol)
        if key is not None:
            self._emit(KeyReleasedEvent(int(key)))

    def on_text(self, text: str) -> None:
        for character in text:
            self._emit(KeyTypedEvent(ord(character)))

    def on_mouse_press(self, x: int, y: int, button: int, modifiers: int) -> None:
        translated = translate_mouse_button(button)
        if translated is not None:
            self._emit(MouseButtonPressedEvent(int(translated)))

    def on_mouse_release(self, x: int, y: int, button: int, modifiers: int) -> None:
        translated = translate_mouse_button(button)
        if translated is not None:
            self._emit(MouseButtonReleasedEvent(int(translated)))

    def on_mouse_scroll(self, x: int, y: int, scroll_x: float, scroll_y: float) -> None:
        self._emit(MouseScrolledEvent(float(scroll_x), float(scroll_y)))

    def on_mouse_motion(self, x: int, y: int, dx: int, dy: int) -> None:
        # Native y grows upwards; engine y grows downwards from the top edge.
        self._emit(MouseMovedEvent(float(x), float(self.height - y)))

    def on_mouse_drag(
        self, x: int, y: int, dx: int, dy: int, buttons: int, modifiers: int
    ) -> None:
        self.on_mouse_motion(x, y, dx, dy)


class PygletWindow(Window):
    """A resizable pyglet window with an OpenGL context."""

    def __init__(self, props: Optional[WindowProps] = None) -> None:
        import pyglet.window

        props = props or WindowProps()
        self._state = _WindowState(props.title, props.width, props.height)
        self._native = pyglet.window.Window(
            width=props.width,
            height=props.height,
            caption=props.title,
            resizable=True,
            vsync=True,
        )
        self._context = OpenGLContext(self._native)
        self._context.init()
        self._native.push_handlers(self._state)
        self._closed = False
        self.vsync = True

    def on_update(self) -> None:
        self._native.dispatch_events()
        self._context.swap_buffers()

    @property
    def width(self) -> int:
        return self._state.width

    @property
    def height(self) -> int:
        return self._state.height

    @property
    def vsync(self) -> bool:
        return self._state.vsync

    @vsync.setter
    def vsync(self, enable: bool) -> None:
        self._native.set_vsync(bool(enable))
        self._state.vsync = bool(enable)

    @property
    def native_window(self) -> Any:
        return self._native

    def set_event_callback(self, callback: EventCallback) -> None:
        self._state.callback = callback

    def close(self) -> None:
        """Destroy the native window."""
        if not self._closed:
            self._closed = True
            self._native.close()


def create_window(props: Optional[WindowProps] = None) -> Window:
    """A window for the current platform."""
    return PygletWindow(props or WindowProps())