"""OpenGL implementations of buffers, vertex arrays, shaders and drawing."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, List, Optional, Sequence

from hazel.buffer import IndexBuffer, ShaderDataType, VertexArray, VertexBuffer
from hazel.log import core_assert, core_logger
from hazel.renderer_api import GraphicsContext, RendererAPI

GL_FALSE = 0
GL_TRUE = 1
GL_TRIANGLES = 0x0004
GL_DEPTH_BUFFER_BIT = 0x00000100
GL_COLOR_BUFFER_BIT = 0x00004000
GL_INT = 0x1404
GL_UNSIGNED_INT = 0x1405
GL_FLOAT = 0x1406
GL_ARRAY_BUFFER = 0x8892
GL_ELEMENT_ARRAY_BUFFER = 0x8893
GL_STATIC_DRAW = 0x88E4

# GLfloat and GLuint are both 32 bits wide by the OpenGL specification.
_SCALAR_BYTES = 4

_gl_module: Any = None


def _gl() -> Any:
    """The OpenGL function table, loaded on first use."""
    global _gl_module
    if _gl_module is None:
        from pyglet import gl

        _gl_module = gl
    return _gl_module


def _shader_api() -> Any:
    from pyglet.graphics import shader

    return shader


_BASE_TYPES = {
    ShaderDataType.FLOAT: GL_FLOAT,
    ShaderDataType.FLOAT2: GL_FLOAT,
    ShaderDataType.FLOAT3: GL_FLOAT,
    ShaderDataType.FLOAT4: GL_FLOAT,
    ShaderDataType.INT: GL_INT,
    ShaderDataType.INT2: GL_INT,
    ShaderDataType.INT3: GL_INT,
    ShaderDataType.INT4: GL_INT,
    ShaderDataType.MAT3: GL_FLOAT,
    ShaderDataType.MAT4: GL_FLOAT,
}


def shader_data_type_to_gl_base_type(data_type: ShaderDataType) -> int:
    """The OpenGL scalar type underlying ``data_type``."""
    base = _BASE_TYPES.get(data_type)
    core_assert(base is not None, f"unknown shader data type: {data_type!r}")
    return base  # type: ignore[return-value]


class _Resource(ABC):
    """Deletes the GL object when used as a context manager."""

    @abstractmethod
    def delete(self) -> None:
        """Release the underlying OpenGL object."""

    def __enter__(self):
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.delete()


def _create_buffer() -> int:
    gl = _gl()
    ids = (gl.GLuint * 1)()
    gl.glCreateBuffers(1, ids)
    return int(ids[0])


def _delete_buffer(renderer_id: int) -> None:
    gl = _gl()
    gl.glDeleteBuffers(1, (gl.GLuint * 1)(renderer_id))


class OpenGLVertexBuffer(VertexBuffer, _Resource):
    """Vertex data uploaded once to a static OpenGL buffer."""

    def __init__(self, vertices: Sequence[float]) -> None:
        super().__init__()
        gl = _gl()
        values = list(vertices)
        data = (gl.GLfloat * len(values))(*values)
        self.renderer_id = _create_buffer()
        gl.glBindBuffer(GL_ARRAY_BUFFER, self.renderer_id)
        gl.glBufferData(GL_ARRAY_BUFFER, len(values) * _SCALAR_BYTES, data, GL_STATIC_DRAW)

    def bind(self) -> None:
        _gl().glBindBuffer(GL_ARRAY_BUFFER, self.renderer_id)

    def unbind(self) -> None:
        _gl().glBindBuffer(GL_ARRAY_BUFFER, 0)

    def delete(self) -> None:
        """Release the OpenGL buffer."""
        _delete_buffer(self.renderer_id)


class OpenGLIndexBuffer(IndexBuffer, _Resource):
    """Unsigned 32-bit indices uploaded once to a static OpenGL buffer."""

    def __init__(self, indices: Sequence[int]) -> None:
        gl = _gl()
        values = list(indices)
        self._count = len(values)
        data = (gl.GLuint * self._count)(*values)
        self.renderer_id = _create_buffer()
        gl.glBindBuffer(GL_ELEMENT_ARRAY_BUFFER, self.renderer_id)
        gl.glBufferData(
            GL_ELEMENT_ARRAY_BUFFER, self._count * _SCALAR_BYTES, data, GL_STATIC_DRAW
        )

    @property
    def count(self) -> int:
        return self._count

    def bind(self) -> None:
        _gl().glBindBuffer(GL_ELEMENT_ARRAY_BUFFER, self.renderer_id)

    def unbind(self) -> None:
        _gl().glBindBuffer(GL_ELEMENT_ARRAY_BUFFER, 0)

    def delete(self) -> None:
        """Release the OpenGL buffer."""
        _delete_buffer(self.renderer_id)


class OpenGLVertexArray(VertexArray, _Resource):
    """An OpenGL vertex array object."""

    def __init__(self) -> None:
        gl = _gl()
        ids = (gl.GLuint * 1)()
        gl.glCreateVertexArrays(1, ids)
        self.renderer_id = int(ids[0])
        self._vertex_buffers: List[VertexBuffer] = []
        self._index_buffer: Optional[IndexBuffer] = None

    def bind(self) -> None:
        _gl().glBindVertexArray(self.renderer_id)

    def unbind(self) -> None:
        _gl().glBindVertexArray(0)

    def add_vertex_buffer(self, vertex_buffer: VertexBuffer) -> None:
        layout = vertex_buffer.layout
        core_assert(len(layout) > 0, "vertex buffer added without a layout")
        gl = _gl()
        gl.glBindVertexArray(self.renderer_id)
        vertex_buffer.bind()
        for index, element in enumerate(layout):
            gl.glEnableVertexAttribArray(index)
            gl.glVertexAttribPointer(
                index,
                element.component_count,
                shader_data_type_to_gl_base_type(element.data_type),
                GL_TRUE if element.normalized else GL_FALSE,
                layout.stride,
                element.offset,
            )
        self._vertex_buffers.append(vertex_buffer)

    def set_index_buffer(self, index_buffer: IndexBuffer) -> None:
        _gl().glBindVertexArray(self.renderer_id)
        index_buffer.bind()
        self._index_buffer = index_buffer

    @property
    def vertex_buffers(self) -> Sequence[VertexBuffer]:
        return tuple(self._vertex_buffers)

    @property
    def index_buffer(self) -> Optional[IndexBuffer]:
        return self._index_buffer

    def delete(self) -> None:
        """Release the OpenGL vertex array."""
        gl = _gl()
        gl.glDeleteVertexArrays(1, (gl.GLuint * 1)(self.renderer_id))


class OpenGLRendererAPI(RendererAPI):
    """Drawing commands issued through OpenGL."""

    def set_clear_color(self, color: Sequence[float]) -> None:
        red, green, blue, alpha = color
        _gl().glClearColor(red, green, blue, alpha)

    def clear(self) -> None:
        _gl().glClear(GL_COLOR_BUFFER_BIT | GL_DEPTH_BUFFER_BIT)

    def draw_indexed(self, vertex_array: VertexArray) -> None:
        index_buffer = vertex_array.index_buffer
        core_assert(index_buffer is not None, "vertex array has no index buffer")
        _gl().glDrawElements(GL_TRIANGLES, index_buffer.count, GL_UNSIGNED_INT, None)


class OpenGLContext(GraphicsContext):
    """The OpenGL context owned by a window with ``switch_to`` and ``flip``."""

    def __init__(self, window: Any) -> None:
        core_assert(window is not None, "window must not be None")
        self._window = window

    def init(self) -> None:
        self._window.switch_to()
        from pyglet.gl import gl_info

        logger = core_logger()
        logger.info("OpenGL context GPU information:")
        logger.info("[+=======================================================")
        logger.info("|+ vendor:   %s", gl_info.get_vendor())
        logger.info("|+ renderer: %s", gl_info.get_renderer())
        logger.info("|+ version:  %s", gl_info.get_version())
        logger.info("[+=======================================================")

    def swap_buffers(self) -> None:
        self._window.flip()


class ShaderError(RuntimeError):
    """Raised when a shader fails to compile or a program fails to link."""


def _fail(message: str, cause: Exception) -> ShaderError:
    core_logger().error("%s", cause)
    return ShaderError(f"{message}: {cause}")


class Shader(_Resource):
    """A linked vertex and fragment shader program."""

    def __init__(self, vertex_src: str, fragment_src: str) -> None:
        api = _shader_api()
        try:
            vertex = api.Shader(vertex_src, "vertex")
        except api.ShaderException as exc:
            raise _fail("vertex shader failed to compile", exc) from exc

        try:
            fragment = api.Shader(fragment_src, "fragment")
        except api.ShaderException as exc:
            vertex.delete()
            raise _fail("fragment shader failed to compile", exc) from exc

        try:
            program = api.ShaderProgram(vertex, fragment)
        except api.ShaderException as exc:
            vertex.delete()
            fragment.delete()
            raise _fail("shader program failed to link", exc) from exc

        self._program = program
        self.renderer_id = program.id

    def bind(self) -> None:
        _gl().glUseProgram(self.renderer_id)

    def unbind(self) -> None:
        _gl().glUseProgram(0)

    def delete(self) -> None:
        """Release the OpenGL program."""
        self._program.delete()