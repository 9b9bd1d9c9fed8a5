"""The low-level rendering interface and the choice of graphics API."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import Sequence

from hazel.buffer import VertexArray


class GraphicsAPI(Enum):
    """Graphics back ends a renderer can use."""

    NONE = 0
    OPENGL = 1


_api = GraphicsAPI.OPENGL


def get_api() -> GraphicsAPI:
    """The graphics back end currently selected."""
    return _api


def set_api(api: GraphicsAPI | int) -> None:
    """Select the graphics back end; raises ValueError for an unknown one."""
    global _api
    _api = GraphicsAPI(api)


class RendererAPI(ABC):
    """Drawing commands a graphics back end provides."""

    @abstractmethod
    def set_clear_color(self, color: Sequence[float]) -> None:
        """Set the RGBA colour used when clearing."""

    @abstractmethod
    def clear(self) -> None:
        """Clear the colour and depth buffers."""

    @abstractmethod
    def draw_indexed(self, vertex_array: VertexArray) -> None:
        """Draw triangles from ``vertex_array`` using its index buffer."""


class GraphicsContext(ABC):
    """A graphics context bound to a window."""

    @abstractmethod
    def init(self) -> None:
        """Make the context current and ready for drawing."""

    @abstractmethod
    def swap_buffers(self) -> None:
        """Present the frame that was drawn."""