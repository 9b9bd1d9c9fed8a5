"""Vertex buffer layouts and the interfaces of buffers and vertex arrays."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from enum import Enum
from typing import Iterable, Iterator, Optional, Sequence, Tuple

from hazel.log import core_assert


class ShaderDataType(Enum):
    """Data types a shader attribute may have."""

    NONE = 0
    FLOAT = 1
    FLOAT2 = 2
    FLOAT3 = 3
    FLOAT4 = 4
    INT = 5
    INT2 = 6
    INT3 = 7
    INT4 = 8
    MAT3 = 9
    MAT4 = 10
    BOOL = 11


_SIZES = {
    ShaderDataType.FLOAT: 4,
    ShaderDataType.INT: 4,
    ShaderDataType.FLOAT2: 8,
    ShaderDataType.INT2: 8,
    ShaderDataType.FLOAT3: 12,
    ShaderDataType.INT3: 12,
    ShaderDataType.FLOAT4: 16,
    ShaderDataType.INT4: 16,
    ShaderDataType.MAT3: 4 * 3 * 3,
    ShaderDataType.MAT4: 4 * 4 * 4,
    ShaderDataType.BOOL: 1,
}

_COMPONENT_COUNTS = {
    ShaderDataType.FLOAT: 1,
    ShaderDataType.INT: 1,
    ShaderDataType.FLOAT2: 2,
    ShaderDataType.INT2: 2,
    ShaderDataType.FLOAT3: 3,
    ShaderDataType.INT3: 3,
    ShaderDataType.FLOAT4: 4,
    ShaderDataType.INT4: 4,
    ShaderDataType.MAT3: 3 * 3,
    ShaderDataType.MAT4: 4 * 4,
    ShaderDataType.BOOL: 1,
}


def shader_data_type_size(data_type: ShaderDataType) -> int:
    """Size in bytes of one value of ``data_type``."""
    size = _SIZES.get(data_type)
    core_assert(size is not None, f"unknown shader data type: {data_type!r}")
    return size  # type: ignore[return-value]


def shader_data_type_component_count(data_type: ShaderDataType) -> int:
    """Number of scalar components in one value of ``data_type``."""
    count = _COMPONENT_COUNTS.get(data_type)
    core_assert(count is not None, f"unknown shader data type: {data_type!r}")
    return count  # type: ignore[return-value]


@dataclass(frozen=True)
class BufferElement:
    """One named attribute within a vertex buffer layout."""

    data_type: ShaderDataType
    name: str
    normalized: bool = False
    offset: int = 0

    @property
    def size(self) -> int:
        """Size of the attribute in bytes."""
        return shader_data_type_size(self.data_type)

    @property
    def component_count(self) -> int:
        """Number of scalar components of the attribute."""
        return shader_data_type_component_count(self.data_type)


class BufferLayout:
    """An ordered set of attributes with their byte offsets and the total stride."""

    def __init__(self, elements: Iterable[BufferElement] = ()) -> None:
        placed = []
        offset = 0
        for element in elements:
            placed.append(replace(element, offset=offset))
            offset += element.size
        self._elements: Tuple[BufferElement, ...] = tuple(placed)
        self._stride = offset

    @property
    def elements(self) -> Tuple[BufferElement, ...]:
        """The attributes, with offsets filled in."""
        return self._elements

    @property
    def stride(self) -> int:
        """Total size in bytes of one vertex."""
        return self._stride

    def __iter__(self) -> Iterator[BufferElement]:
        return iter(self._elements)

    def __len__(self) -> int:
        return len(self._elements)

    def __repr__(self) -> str:
        return f"BufferLayout({list(self._elements)!r})"


class VertexBuffer(ABC):
    """A buffer of vertex data with the layout that describes it."""

    def __init__(self) -> None:
        self.layout = BufferLayout()

    @abstractmethod
    def bind(self) -> None:
        """Make this buffer current."""

    @abstractmethod
    def unbind(self) -> None:
        """Release this buffer from being current."""


class IndexBuffer(ABC):
    """A buffer of vertex indices."""

    @abstractmethod
    def bind(self) -> None:
        """Make this buffer current."""

    @abstractmethod
    def unbind(self) -> None:
        """Release this buffer from being current."""

    @property
    @abstractmethod
    def count(self) -> int:
        """Number of indices held."""


class VertexArray(ABC):
    """Ties vertex buffers and an index buffer together for drawing."""

    @abstractmethod
    def bind(self) -> None:
        """Make this vertex array current."""

    @abstractmethod
    def unbind(self) -> None:
        """Release this vertex array from being current."""

    @abstractmethod
    def add_vertex_buffer(self, vertex_buffer: VertexBuffer) -> None:
        """Add a vertex buffer; its layout must already be set."""

    @abstractmethod
    def set_index_buffer(self, index_buffer: IndexBuffer) -> None:
        """Use ``index_buffer`` for indexed drawing."""

    @property
    @abstractmethod
    def vertex_buffers(self) -> Sequence[VertexBuffer]:
        """The vertex buffers added so far."""

    @property
    @abstractmethod
    def index_buffer(self) -> Optional[IndexBuffer]:
        """The index buffer in use, if any."""