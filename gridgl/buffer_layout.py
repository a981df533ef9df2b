"""Description of how vertex attributes are packed in a vertex buffer."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable, Iterator, Union

from .shader_types import ShaderDataType


@dataclass(frozen=True)
class BufferAttribute:
    """One named vertex attribute and its byte offset within a vertex."""

    data_type: ShaderDataType
    name: str
    normalized: bool = False
    offset: int = 0

    @property
    def size(self) -> int:
        """Size of the attribute in bytes."""
        return self.data_type.size()

    @property
    def count(self) -> int:
        """Number of scalar components in the attribute."""
        return self.data_type.component_count()


AttributeSpec = Union[BufferAttribute, tuple]


class BufferLayout:
    """Ordered, interleaved vertex attributes with computed offsets and stride.

    Attributes may be given as :class:`BufferAttribute` instances or as
    ``(data_type, name[, normalized])`` tuples.
    """

    def __init__(self, attributes: Iterable[AttributeSpec] = ()) -> None:
        placed: list[BufferAttribute] = []
        offset = 0
        for spec in attributes:
            attribute = spec if isinstance(spec, BufferAttribute) else BufferAttribute(*spec)
            placed.append(replace(attribute, offset=offset))
            offset += attribute.size
        self._attributes = tuple(placed)
        self._stride = offset

    @property
    def attributes(self) -> tuple[BufferAttribute, ...]:
        return self._attributes

    @property
    def stride(self) -> int:
        """Bytes from the start of one vertex to the start of the next."""
        return self._stride

    def __iter__(self) -> Iterator[BufferAttribute]:
        return iter(self._attributes)

    def __len__(self) -> int:
        return len(self._attributes)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BufferLayout):
            return NotImplemented
        return self._attributes == other._attributes

    def __repr__(self) -> str:
        return f"BufferLayout({list(self._attributes)!r})"