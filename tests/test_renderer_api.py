import pytest

from hazel import renderer_api
from hazel.renderer_api import GraphicsAPI, GraphicsContext, RendererAPI


@pytest.fixture
def restore_api():
    previous = renderer_api.get_api()
    yield
    renderer_api.set_api(previous)


def test_default_api_is_opengl():
    assert renderer_api.get_api() is GraphicsAPI.OPENGL


def test_set_api_round_trip(restore_api):
    renderer_api.set_api(GraphicsAPI.NONE)
    assert renderer_api.get_api() is GraphicsAPI.NONE
    renderer_api.set_api(GraphicsAPI.OPENGL)
    assert renderer_api.get_api() is GraphicsAPI.OPENGL


def test_set_api_accepts_values(restore_api):
    renderer_api.set_api(GraphicsAPI.NONE.value)
    assert renderer_api.get_api() is GraphicsAPI.NONE


def test_set_api_rejects_unknown(restore_api):
    with pytest.raises(ValueError):
        renderer_api.set_api("vulkan")
    assert renderer_api.get_api() is GraphicsAPI.OPENGL


@pytest.mark.parametrize("interface", [RendererAPI, GraphicsContext])
def test_interfaces_are_abstract(interface):
    with pytest.raises(TypeError):
        interface()