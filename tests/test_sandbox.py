import pytest

from hazel import input as hz_input
from hazel import renderer
from hazel.events import KeyPressedEvent, KeyReleasedEvent, WindowCloseEvent
from hazel.input_codes import Key
from hazel.renderer_api import GraphicsAPI, RendererAPI, get_api, set_api
from hazel.sandbox import ExampleLayer, SandboxApp, main
from hazel.window import Window


class FakeWindow(Window):
    width = 1280
    height = 720
    vsync = True
    native_window = None

    def __init__(self):
        self.callback = None
        self.updates = 0

    def on_update(self):
        self.updates += 1
        self.callback(WindowCloseEvent())

    def set_event_callback(self, callback):
        self.callback = callback


class SilentAPI(RendererAPI):
    def set_clear_color(self, color):
        pass

    def clear(self):
        pass

    def draw_indexed(self, vertex_array):
        pass


@pytest.fixture(autouse=True)
def headless():
    previous_api = get_api()
    set_api(GraphicsAPI.NONE)
    previous_renderer = renderer.set_renderer_api(SilentAPI())
    previous_input = hz_input.set_input(None)
    yield
    hz_input.set_input(previous_input)
    renderer.set_renderer_api(previous_renderer)
    set_api(previous_api)


def test_sandbox_holds_example_layer():
    with SandboxApp(FakeWindow()) as app:
        layers = list(app.layers)
        assert len(layers) == 1
        assert layers[0].debug_name == "Example"


def test_example_layer_counts_enter_while_held():
    window = FakeWindow()
    with SandboxApp(window) as app:
        layer = next(iter(app.layers))
        layer.on_update()
        assert layer.enter_presses == 0
        window.callback(KeyPressedEvent(Key.ENTER, 0))
        layer.on_update()
        layer.on_update()
        assert layer.enter_presses == 2
        window.callback(KeyReleasedEvent(Key.ENTER))
        layer.on_update()
        assert layer.enter_presses == 2


def test_sandbox_runs_until_closed():
    window = FakeWindow()
    with SandboxApp(window) as app:
        app.run()
    assert window.updates == 1


def test_example_layer_starts_at_zero():
    assert ExampleLayer().enter_presses == 0


def test_main_rejects_unknown_arguments():
    with pytest.raises(SystemExit):
        main(["--bogus"])