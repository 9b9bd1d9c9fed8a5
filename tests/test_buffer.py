import dataclasses

import pytest

from hazel.buffer import (
    BufferElement,
    BufferLayout,
    IndexBuffer,
    ShaderDataType,
    VertexArray,
    VertexBuffer,
    shader_data_type_component_count,
    shader_data_type_size,
)
from hazel.log import HazelAssertionError

FOUR_BYTE_TYPES = [
    ShaderDataType.FLOAT,
    ShaderDataType.FLOAT2,
    ShaderDataType.FLOAT3,
    ShaderDataType.FLOAT4,
    ShaderDataType.INT,
    ShaderDataType.INT2,
    ShaderDataType.INT3,
    ShaderDataType.INT4,
    ShaderDataType.MAT3,
    ShaderDataType.MAT4,
]


class MemoryVertexBuffer(VertexBuffer):
    def __init__(self):
        super().__init__()
        self.bound = False

    def bind(self):
        self.bound = True

    def unbind(self):
        self.bound = False


@pytest.mark.parametrize("data_type", FOUR_BYTE_TYPES)
def test_size_is_four_bytes_per_component(data_type):
    assert shader_data_type_size(data_type) == 4 * shader_data_type_component_count(data_type)


def test_float4_and_mat4_values():
    assert shader_data_type_size(ShaderDataType.FLOAT4) == 16
    assert shader_data_type_component_count(ShaderDataType.MAT4) == 16


def test_bool_is_single_byte_single_component():
    assert shader_data_type_size(ShaderDataType.BOOL) == 1
    assert shader_data_type_component_count(ShaderDataType.BOOL) == 1


def test_none_type_size_fails():
    with pytest.raises(HazelAssertionError):
        shader_data_type_size(ShaderDataType.NONE)


def test_none_type_component_count_fails():
    with pytest.raises(HazelAssertionError):
        shader_data_type_component_count(ShaderDataType.NONE)


def test_element_properties_follow_type():
    element = BufferElement(ShaderDataType.FLOAT3, "a_Position")
    assert element.size == shader_data_type_size(ShaderDataType.FLOAT3)
    assert element.component_count == shader_data_type_component_count(ShaderDataType.FLOAT3)
    assert element.normalized is False
    assert element.offset == 0


def test_element_is_immutable():
    element = BufferElement(ShaderDataType.FLOAT, "a_Value")
    with pytest.raises(dataclasses.FrozenInstanceError):
        element.name = "other"
    assert element.name == "a_Value"


def test_layout_offsets_are_cumulative():
    layout = BufferLayout(
        [
            BufferElement(ShaderDataType.FLOAT3, "a_Position"),
            BufferElement(ShaderDataType.FLOAT4, "a_Color"),
            BufferElement(ShaderDataType.FLOAT2, "a_TexCoord"),
        ]
    )
    elements = list(layout)
    assert [e.name for e in elements] == ["a_Position", "a_Color", "a_TexCoord"]
    assert elements[0].offset == 0
    for previous, current in zip(elements, elements[1:]):
        assert current.offset == previous.offset + previous.size
    assert layout.stride == sum(e.size for e in elements)
    assert len(layout) == 3
    assert layout.elements == tuple(elements)


def test_layout_recomputes_given_offsets():
    layout = BufferLayout([BufferElement(ShaderDataType.INT, "a_Id", offset=99)])
    assert next(iter(layout)).offset == 0
    assert layout.stride == shader_data_type_size(ShaderDataType.INT)


def test_empty_layout():
    layout = BufferLayout()
    assert len(layout) == 0
    assert layout.stride == 0
    assert list(layout) == []


def test_layout_keeps_normalized_flag():
    layout = BufferLayout([BufferElement(ShaderDataType.FLOAT4, "a_Color", normalized=True)])
    assert next(iter(layout)).normalized is True


def test_vertex_buffer_starts_with_empty_layout():
    buffer = MemoryVertexBuffer()
    assert len(buffer.layout) == 0
    layout = BufferLayout([BufferElement(ShaderDataType.FLOAT3, "a_Position")])
    buffer.layout = layout
    assert buffer.layout is layout
    buffer.bind()
    assert buffer.bound is True


@pytest.mark.parametrize("interface", [VertexBuffer, IndexBuffer, VertexArray])
def test_interfaces_are_abstract(interface):
    with pytest.raises(TypeError):
        interface()