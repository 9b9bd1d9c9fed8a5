"""Blocking, immediately dispatched window and input events."""

from __future__ import annotations

from enum import Enum, IntFlag
from typing import Callable, ClassVar, TypeVar


class EventType(Enum):
    """Kinds of event."""

    NONE = 0
    WINDOW_CLOSE = 1
    WINDOW_RESIZE = 2
    WINDOW_FOCUS = 3
    WINDOW_LOST_FOCUS = 4
    WINDOW_MOVED = 5
    APP_TICK = 6
    APP_UPDATE = 7
    APP_RENDER = 8
    KEY_PRESSED = 9
    KEY_RELEASED = 10
    KEY_TYPED = 11
    MOUSE_BUTTON_PRESSED = 12
    MOUSE_BUTTON_RELEASED = 13
    MOUSE_MOVED = 14
    MOUSE_SCROLLED = 15


class EventCategory(IntFlag):
    """Categories an event may belong to; combinable as flags."""

    NONE = 0
    APPLICATION = 1 << 0
    INPUT = 1 << 1
    KEYBOARD = 1 << 2
    MOUSE = 1 << 3
    MOUSE_BUTTON = 1 << 4


def _number(value: float) -> str:
    return f"{value:g}"


class Event:
    """Base of all events. Concrete subclasses define ``event_type``."""

    event_type: ClassVar[EventType]
    category: ClassVar[EventCategory] = EventCategory.NONE

    def __init__(self) -> None:
        if not hasattr(type(self), "event_type"):
            raise TypeError(f"{type(self).__name__} is abstract")
        self.handled = False

    @property
    def name(self) -> str:
        """The event's name, e.g. ``WindowClose``."""
        return "".join(part.capitalize() for part in self.event_type.name.split("_"))

    def is_in_category(self, category: EventCategory) -> bool:
        """Whether this event belongs to ``category``."""
        return bool(self.category & category)

    def __str__(self) -> str:
        return self.name


E = TypeVar("E", bound=Event)


class EventDispatcher:
    """Routes an event to a handler when the event is of the handler's type."""

    def __init__(self, event: Event) -> None:
        self._event = event

    def dispatch(self, event_class: type[E], handler: Callable[[E], bool]) -> bool:
        """Call ``handler`` if the event matches ``event_class``; return whether it did."""
        if self._event.event_type is not event_class.event_type:
            return False
        self._event.handled = bool(handler(self._event))  # type: ignore[arg-type]
        return True


class WindowCloseEvent(Event):
    event_type = EventType.WINDOW_CLOSE
    category = EventCategory.APPLICATION


class WindowResizeEvent(Event):
    event_type = EventType.WINDOW_RESIZE
    category = EventCategory.APPLICATION

    def __init__(self, width: int, height: int) -> None:
        super().__init__()
        self.width = width
        self.height = height

    def __str__(self) -> str:
        return f"WindowResizeEvent: ({self.width}, {self.height})"


class AppTickEvent(Event):
    event_type = EventType.APP_TICK
    category = EventCategory.APPLICATION


class AppUpdateEvent(Event):
    event_type = EventType.APP_UPDATE
    category = EventCategory.APPLICATION


class AppRenderEvent(Event):
    event_type = EventType.APP_RENDER
    category = EventCategory.APPLICATION


class KeyEvent(Event):
    """Base of keyboard events."""

    category = EventCategory.KEYBOARD | EventCategory.INPUT

    def __init__(self, key_code: int) -> None:
        super().__init__()
        self.key_code = key_code


class KeyPressedEvent(KeyEvent):
    event_type = EventType.KEY_PRESSED

    def __init__(self, key_code: int, repeat_count: int) -> None:
        super().__init__(key_code)
        self.repeat_count = repeat_count

    def __str__(self) -> str:
        return f"KeyPressedEvent: {self.key_code} ({self.repeat_count}repeats)"


class KeyReleasedEvent(KeyEvent):
    event_type = EventType.KEY_RELEASED

    def __str__(self) -> str:
        return f"KeyReleasedEvent: {self.key_code}"


class KeyTypedEvent(KeyEvent):
    event_type = EventType.KEY_TYPED

    def __str__(self) -> str:
        return f"KeyTypedEvent: {self.key_code}"


class MouseButtonEvent(Event):
    """Base of mouse button events."""

    category = EventCategory.MOUSE | EventCategory.MOUSE_BUTTON | EventCategory.INPUT

    def __init__(self, button: int) -> None:
        super().__init__()
        self.button = button


class MouseButtonPressedEvent(MouseButtonEvent):
    event_type = EventType.MOUSE_BUTTON_PRESSED

    def __str__(self) -> str:
        return f"MouseButtonPressedEvent: {self.button}"


class MouseButtonReleasedEvent(MouseButtonEvent):
    event_type = EventType.MOUSE_BUTTON_RELEASED

    def __str__(self) -> str:
        return f"MouseButtonReleasedEvent: {self.button}"


class MouseMovedEvent(Event):
    event_type = EventType.MOUSE_MOVED
    category = EventCategory.MOUSE | EventCategory.INPUT

    def __init__(self, x: float, y: float) -> None:
        super().__init__()
        self.x = x
        self.y = y

    def __str__(self) -> str:
        return f"MouseMovedEvent: ({_number(self.x)}, {_number(self.y)})"


class MouseScrolledEvent(Event):
    event_type = EventType.MOUSE_SCROLLED
    category = EventCategory.MOUSE | EventCategory.INPUT

    def __init__(self, x_offset: float, y_offset: float) -> None:
        super().__init__()
        self.x_offset = x_offset
        self.y_offset = y_offset

    def __str__(self) -> str:
        return f"MouseScrolledEvent: ({_number(self.x_offset)}, {_number(self.y_offset)})"