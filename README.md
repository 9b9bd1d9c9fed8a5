# hazel

A small game engine core built on pyglet and OpenGL. It provides:

- `hazel.events`: typed events (window, application, keyboard, mouse) with
  `EventType`, combinable `EventCategory` flags and an `EventDispatcher` that
  calls a handler when the event is of the given class and records whether it
  was handled;
- `hazel.layer`: `Layer` and `LayerStack`. Ordinary layers sit below overlays;
  iterating a stack gives update order, `reversed()` gives event order;
- `hazel.input_codes`: `Key` and `MouseButton` code enums;
- `hazel.input`: polling functions `is_key_pressed`, `is_mouse_button_pressed`,
  `get_mouse_position`, `get_mouse_x` and `get_mouse_y`, answered by whatever
  `Input` was installed with `set_input` (an `Application` installs a
  `WindowInput` that tracks its window's events);
- `hazel.buffer`: `ShaderDataType`, `BufferElement`, `BufferLayout` and the
  `VertexBuffer`, `IndexBuffer` and `VertexArray` interfaces;
- `hazel.renderer_api`: the `RendererAPI` and `GraphicsContext` interfaces and
  `get_api` / `set_api` for choosing a `GraphicsAPI`;
- `hazel.opengl`: OpenGL buffers, vertex arrays, `OpenGLRendererAPI`,
  `OpenGLContext` and `Shader` (which raises `ShaderError` when compiling or
  linking fails). Buffers, vertex arrays and shaders have `delete()` and can be
  used as context managers;
- `hazel.renderer`: `create_vertex_buffer`, `create_index_buffer`,
  `create_vertex_array`, `set_clear_color`, `clear`, `draw_indexed`,
  `begin_scene`, `submit`, `end_scene`, and `set_renderer_api` to route drawing
  commands elsewhere (it returns the previous one);
- `hazel.window`: `WindowProps`, the `Window` interface, `PygletWindow` and
  `create_window`, which turn native input into engine events;
- `hazel.application`: `Application`, `current_application` and
  `run_application`;
- `hazel.log`: loggers named `HAZEL` (`core_logger()`) and `APP`
  (`client_logger()`), `init()` to send both to stdout, and `core_assert` /
  `app_assert`, which log and raise `HazelAssertionError` when a condition is
  false.

## Install

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Try the sandbox

```
hazel-sandbox
```

It opens a window, draws a square shaded by position with a coloured triangle
over it, and logs a running count on the `APP` logger each frame while Enter is
held. Closing the window ends the program.

## Writing your own application

```python
from hazel import log
from hazel.application import Application, run_application
from hazel.input import is_key_pressed
from hazel.input_codes import Key
from hazel.layer import Layer


class GameLayer(Layer):
    def __init__(self):
        super().__init__("Game")

    def on_update(self):
        if is_key_pressed(Key.SPACE):
            log.client_logger().info("jump")

    def on_event(self, event):
        log.client_logger().debug(str(event))


def create():
    app = Application()
    app.push_layer(GameLayer())
    return app


run_application(create)
```

`run_application` sets up the loggers, builds the application from the factory
and runs it until the window is closed; on leaving, every layer is detached,
GPU resources are deleted and the window is closed. Only one `Application` may
exist at a time; `current_application()` returns it.

Each frame the application clears the screen, draws its scene, calls
`on_update` and then `on_imgui_render` on every layer bottom to top, and lets
the window process its events. Events are offered to layers from the top down
until one marks the event handled.

The default `Layer` hooks keep a little bookkeeping: `attached` (set by
`on_attach` / `on_detach`), `last_event` (set by `on_event`) and `ui_frames`
(counted by `on_imgui_render`).

## Events

```python
from hazel.events import EventCategory, EventDispatcher, KeyPressedEvent

event = KeyPressedEvent(65, 0)
assert event.is_in_category(EventCategory.KEYBOARD)
print(event)  # KeyPressedEvent: 65 (0repeats)

dispatcher = EventDispatcher(event)
dispatcher.dispatch(KeyPressedEvent, lambda e: True)
assert event.handled
```

## Buffer layouts

```python
from hazel.buffer import BufferElement, BufferLayout, ShaderDataType

layout = BufferLayout([
    BufferElement(ShaderDataType.FLOAT3, "a_Position"),
    BufferElement(ShaderDataType.FLOAT4, "a_Color"),
])
print(layout.stride)                       # 28
print([e.offset for e in layout])          # [0, 12]
```

## What it does not do

- There is no immediate-mode debug UI. `Layer.on_imgui_render` is only a
  per-frame hook for your own drawing; nothing is drawn by the engine there.
- OpenGL is the only graphics back end. With `set_api(GraphicsAPI.NONE)` the
  `create_*` functions in `hazel.renderer` fail with `HazelAssertionError`, and
  an `Application` skips its demo scene.
- Events are dispatched immediately as they arrive; there is no event queue.