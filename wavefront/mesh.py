from __future__ import annotations
import array
import dataclasses
import struct
import sys
import typing

from wavefront import Vertex

# position float3, texcoord float2, normal float3
VERTEX_FORMAT = "<8f"
VERTEX_STRIDE = struct.calcsize(VERTEX_FORMAT)


@dataclasses.dataclass(frozen=True)
class Bounds:
    min: typing.Tuple[float, float, float]
    max: typing.Tuple[float, float, float]


@dataclasses.dataclass(frozen=True)
class Mesh:
    name: str
    vertices: typing.List[Vertex] = dataclasses.field(default_factory=list)
    indices: array.array = dataclasses.field(
        default_factory=lambda: array.array("I")
    )

    @classmethod
    def empty(cls, name: str = "") -> Mesh:
        return cls(name=name)

    @property
    def vertex_count(self) -> int:
        return len(self.vertices)

    @property
    def index_count(self) -> int:
        return len(self.indices)

    @property
    def triangle_count(self) -> int:
        return len(self.indices) // 3

    @property
    def loaded(self) -> bool:
        return bool(self.vertices) and bool(self.indices)

    def triangles(self) -> typing.Iterator[typing.Tuple[int, int, int]]:
        for i in range(0, len(self.indices) - 2, 3):
            yield self.indices[i], self.indices[i + 1], self.indices[i + 2]

    def bounds(self) -> typing.Optional[Bounds]:
        if not self.vertices:
            return None
        xs, ys, zs = zip(*(vertex.position for vertex in self.vertices))
        return Bounds(min=(min(xs), min(ys), min(zs)), max=(max(xs), max(ys), max(zs)))

    def vertex_bytes(self) -> bytes:
        vertex_bytes = bytearray(VERTEX_STRIDE * len(self.vertices))
        for i, vertex in enumerate(self.vertices):
            struct.pack_into(
                VERTEX_FORMAT,
                vertex_bytes,
                i * VERTEX_STRIDE,
                *vertex.position,
                *vertex.texcoord,
                *vertex.normal,
            )
        return bytes(vertex_bytes)

    def index_bytes(self) -> bytes:
        indices = array.array("I", self.indices)
        if sys.byteorder == "big":
            indices.byteswap()
        return indices.tobytes()
