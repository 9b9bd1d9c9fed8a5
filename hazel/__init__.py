"""A small layered game engine core: events, layers, input polling and an OpenGL renderer on pyglet."""

__version__ = "0.1.0"

__all__ = [
    "application",
    "buffer",
    "events",
    "input",
    "input_codes",
    "layer",
    "log",
    "opengl",
    "renderer",
    "renderer_api",
    "sandbox",
    "window",
]