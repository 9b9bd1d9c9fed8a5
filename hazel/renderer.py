"""Scene submission and the drawing commands of the active graphics back end."""

from __future__ import annotations

from typing import Sequence

from hazel.buffer import IndexBuffer, VertexArray, VertexBuffer
from hazel.log import core_assert
from hazel.opengl import (
    OpenGLIndexBuffer,
    OpenGLRendererAPI,
    OpenGLVertexArray,
    OpenGLVertexBuffer,
)
from hazel.renderer_api import GraphicsAPI, RendererAPI, get_api

_renderer_api: RendererAPI = OpenGLRendererAPI()
_scene_active = False


def _require_supported_api() -> GraphicsAPI:
    api = get_api()
    core_assert(api is not GraphicsAPI.NONE, "rendering with GraphicsAPI.NONE is not supported")
    core_assert(api is GraphicsAPI.OPENGL, f"unknown graphics API: {api!r}")
    return api


def create_vertex_buffer(vertices: Sequence[float]) -> VertexBuffer:
    """A vertex buffer for the selected graphics back end."""
    _require_supported_api()
    return OpenGLVertexBuffer(vertices)


def create_index_buffer(indices: Sequence[int]) -> IndexBuffer:
    """An index buffer for the selected graphics back end."""
    _require_supported_api()
    return OpenGLIndexBuffer(indices)


def create_vertex_array() -> VertexArray:
    """A vertex array for the selected graphics back end."""
    _require_supported_api()
    return OpenGLVertexArray()


def set_renderer_api(renderer_api: RendererAPI) -> RendererAPI:
    """Route drawing commands to ``renderer_api``; return the one used before."""
    global _renderer_api
    previous, _renderer_api = _renderer_api, renderer_api
    return previous


def set_clear_color(color: Sequence[float]) -> None:
    """Set the RGBA colour used when clearing."""
    _renderer_api.set_clear_color(color)


def clear() -> None:
    """Clear the colour and depth buffers."""
    _renderer_api.clear()


def draw_indexed(vertex_array: VertexArray) -> None:
    """Draw triangles from ``vertex_array`` using its index buffer."""
    _renderer_api.draw_indexed(vertex_array)


def scene_active() -> bool:
    """Whether a scene has been begun and not yet ended."""
    return _scene_active


def begin_scene() -> None:
    """Start a scene."""
    global _scene_active
    _scene_active = True


def submit(vertex_array: VertexArray) -> None:
    """Bind ``vertex_array`` and draw it immediately."""
    vertex_array.bind()
    draw_indexed(vertex_array)


def end_scene() -> None:
    """Finish the scene."""
    global _scene_active
    _scene_active = False