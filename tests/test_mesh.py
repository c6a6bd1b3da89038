import array

import numpy as np
from wavefront import Bounds, Mesh, Vertex
from wavefront.mesh import VERTEX_STRIDE

QUAD = Mesh(
    name="quad",
    vertices=[
        Vertex((0.0, 0.0, 0.0), (0.0, 1.0), (0.0, 0.0, 1.0)),
        Vertex((1.0, 0.0, 0.0), (1.0, 1.0), (0.0, 0.0, 1.0)),
        Vertex((1.0, 2.0, 0.0), (1.0, 0.0), (0.0, 0.0, 1.0)),
        Vertex((0.0, 2.0, -1.0), (0.0, 0.0), (0.0, 0.0, 1.0)),
    ],
    indices=array.array("I", [0, 1, 2, 0, 2, 3]),
)


def test_counts():
    assert QUAD.vertex_count == 4
    assert QUAD.index_count == 6
    assert QUAD.triangle_count == 2
    assert list(QUAD.triangles()) == [(0, 1, 2), (0, 2, 3)]
    assert QUAD.loaded


def test_empty():
    mesh = Mesh.empty("missing.obj")
    assert mesh.name == "missing.obj"
    assert mesh.vertex_count == 0
    assert mesh.index_count == 0
    assert not mesh.loaded
    assert mesh.bounds() is None
    assert mesh.vertex_bytes() == b""
    assert mesh.index_bytes() == b""


def test_bounds():
    assert QUAD.bounds() == Bounds(min=(0.0, 0.0, -1.0), max=(1.0, 2.0, 0.0))


def test_vertex_bytes_interleaved():
    vertex_bytes = QUAD.vertex_bytes()
    assert VERTEX_STRIDE == 32
    assert len(vertex_bytes) == QUAD.vertex_count * VERTEX_STRIDE

    packed = np.frombuffer(vertex_bytes, dtype="<f4").reshape(-1, 8)
    expected = np.array(
        [vertex.position + vertex.texcoord + vertex.normal for vertex in QUAD.vertices],
        dtype=np.float32,
    )
    np.testing.assert_array_equal(packed, expected)


def test_index_bytes():
    unpacked = np.frombuffer(QUAD.index_bytes(), dtype="<u4")
    np.testing.assert_array_equal(unpacked, [0, 1, 2, 0, 2, 3])
