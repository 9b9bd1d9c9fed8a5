"""The application: owns the window and layers and runs the main loop."""

from __future__ import annotations

from typing import Any, Callable, List, Optional

from hazel import log, renderer
from hazel.buffer import BufferElement, BufferLayout, ShaderDataType, VertexArray
from hazel.events import Event, EventDispatcher, WindowCloseEvent
from hazel.input import WindowInput, set_input
from hazel.layer import Layer, LayerStack
from hazel.log import core_assert
from hazel.opengl import Shader
from hazel.renderer_api import GraphicsAPI, get_api
from hazel.window import Window, create_window

_CLEAR_COLOR = (0.2, 0.2, 0.2, 1.0)

_TRIANGLE_VERTICES = (
    -0.5, -0.5, 0.0, 0.8, 0.2, 0.8, 1.0,
    0.5, -0.5, 0.0, 0.2, 0.3, 0.8, 1.0,
    0.0, 0.5, 0.0, 0.8, 0.8, 0.2, 1.0,
)
_TRIANGLE_INDICES = (0, 1, 2)

_SQUARE_VERTICES = (
    -0.75, -0.75, 0.0,
    0.75, -0.75, 0.0,
    0.75, 0.75, 0.0,
    -0.75, 0.75, 0.0,
)
_SQUARE_INDICES = (0, 1, 2, 2, 3, 0)

_COLOURED_VERTEX_SHADER = """
#version 330 core
layout(location = 0) in vec3 a_Position;
layout(location = 1) in vec4 a_Color;
out vec4 v_Color;
void main()
{
    v_Color = a_Color;
    gl_Position = vec4(a_Position, 1.0);
}
"""

_COLOURED_FRAGMENT_SHADER = """
#version 330 core
layout(location = 0) out vec4 color;
in vec4 v_Color;
void main()
{
    color = v_Color;
}
"""

_POSITION_VERTEX_SHADER = """
#version 330 core
layout(location = 0) in vec3 a_Position;
out vec3 v_Position;
void main()
{
    v_Position = a_Position;
    gl_Position = vec4(a_Position, 1.0);
}
"""

_POSITION_FRAGMENT_SHADER = """
#version 330 core
layout(location = 0) out vec4 color;
in vec3 v_Position;
void main()
{
    color = vec4(v_Position * 0.5 + 0.5, 1.0);
}
"""


class _DemoScene:
    """A coloured triangle drawn over a square shaded by position."""

    def __init__(self) -> None:
        self._resources: List[Any] = []
        self.triangle = self._vertex_array(
            _TRIANGLE_VERTICES,
            BufferLayout(
                [
                    BufferElement(ShaderDataType.FLOAT3, "a_Position"),
                    BufferElement(ShaderDataType.FLOAT4, "a_Color"),
                ]
            ),
            _TRIANGLE_INDICES,
        )
        self.triangle_shader = self._keep(
            Shader(_COLOURED_VERTEX_SHADER, _COLOURED_FRAGMENT_SHADER)
        )
        self.square = self._vertex_array(
            _SQUARE_VERTICES,
            BufferLayout([BufferElement(ShaderDataType.FLOAT3, "a_Position")]),
            _SQUARE_INDICES,
        )
        self.square_shader = self._keep(
            Shader(_POSITION_VERTEX_SHADER, _POSITION_FRAGMENT_SHADER)
        )

    def _keep(self, resource: Any) -> Any:
        self._resources.append(resource)
        return resource

    def _vertex_array(self, vertices, layout: BufferLayout, indices) -> VertexArray:
        array = self._keep(renderer.create_vertex_array())
        vertex_buffer = self._keep(renderer.create_vertex_buffer(vertices))
        vertex_buffer.layout = layout
        array.add_vertex_buffer(vertex_buffer)
        array.set_index_buffer(self._keep(renderer.create_index_buffer(indices)))
        return array

    def draw(self) -> None:
        self.square_shader.bind()
        renderer.submit(self.square)
        self.triangle_shader.bind()
        renderer.submit(self.triangle)

    def delete(self) -> None:
        resources, self._resources = self._resources, []
        for resource in reversed(resources):
            resource.delete()


_instance: Optional["Application"] = None


class Application:
    """The single running application. Only one may exist at a time."""

    def __init__(self, window: Optional[Window] = None) -> None:
        global _instance
        core_assert(_instance is None, "application created more than once")
        _instance = self
        try:
            self._running = True
            self._layers = LayerStack()
            self._window = window if window is not None else create_window()
            self._window.set_event_callback(self._handle_window_event)
            self._input = WindowInput(self._window)
            set_input(self._input)
            self._scene = _DemoScene() if get_api() is GraphicsAPI.OPENGL else None
        except BaseException:
            _instance = None
            raise

    @property
    def window(self) -> Window:
        """The application's window."""
        return self._window

    @property
    def layers(self) -> LayerStack:
        """The application's layers, in update order."""
        return self._layers

    def run(self) -> None:
        """Render frames until the window is closed."""
        while self._running:
            renderer.set_clear_color(_CLEAR_COLOR)
            renderer.clear()

            renderer.begin_scene()
            if self._scene is not None:
                self._scene.draw()
            renderer.end_scene()

            for layer in self._layers:
                layer.on_update()
            for layer in self._layers:
                layer.on_imgui_render()

            self._window.on_update()

    def _handle_window_event(self, event: Event) -> None:
        self._input.on_event(event)
        self.on_event(event)

    def on_event(self, event: Event) -> None:
        """Handle window closing, then offer the event to layers from the top."""
        EventDispatcher(event).dispatch(WindowCloseEvent, self._on_window_closed)
        for layer in reversed(self._layers):
            layer.on_event(event)
            if event.handled:
                break

    def _on_window_closed(self, event: WindowCloseEvent) -> bool:
        self._running = False
        return True

    def push_layer(self, layer: Layer) -> None:
        """Add an ordinary layer."""
        self._layers.push_layer(layer)

    def push_overlay(self, overlay: Layer) -> None:
        """Add an overlay, kept above every ordinary layer."""
        self._layers.push_overlay(overlay)

    def pop_layer(self, layer: Layer) -> None:
        """Remove an ordinary layer."""
        self._layers.pop_layer(layer)

    def pop_overlay(self, overlay: Layer) -> None:
        """Remove an overlay."""
        self._layers.pop_overlay(overlay)

    def _shutdown(self) -> None:
        global _instance
        self._layers.close()
        if self._scene is not None:
            self._scene.delete()
            self._scene = None
        self._window.close()
        set_input(None)
        if _instance is self:
            _instance = None

    def __enter__(self) -> Application:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self._shutdown()


def current_application() -> Application:
    """The application that is running."""
    core_assert(_instance is not None, "no application has been created")
    return _instance  # type: ignore[return-value]


def run_application(factory: Callable[[], Application]) -> None:
    """Set up logging, build the application with ``factory`` and run it."""
    log.init()
    log.core_logger().warning("Logger initialised!")
    log.client_logger().info("Hello, world!")
    with factory() as app:
        app.run()