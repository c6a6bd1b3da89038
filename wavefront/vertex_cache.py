import typing

from wavefront import AttributeKind, FaceCorner, Vertex
from wavefront.attributes import AttributeTables
from wavefront.errors import AttributeIndexError, MalformedFaceTokenError


def _parse_index(token: str, slot: str) -> int:
    # ASCII digits only: rejects signs, so relative indices are malformed
    if not (token.isascii() and token.isdigit()):
        raise MalformedFaceTokenError(f"invalid {slot} index {token!r}")
    return int(token)


def parse_face_corner(token: str) -> FaceCorner:
    """Parse ``p``, ``p/t``, ``p//n`` or ``p/t/n``; empty slots become None."""
    parts = token.split("/")
    if len(parts) > 3 or not parts[0]:
        raise MalformedFaceTokenError(f"invalid face corner {token!r}")

    position = _parse_index(parts[0], "position")
    texcoord = None
    normal = None
    if len(parts) > 1 and parts[1]:
        texcoord = _parse_index(parts[1], "texcoord")
    if len(parts) > 2:
        if not parts[2]:
            raise MalformedFaceTokenError(f"invalid face corner {token!r}")
        normal = _parse_index(parts[2], "normal")

    return FaceCorner(position=position, texcoord=texcoord, normal=normal)


class VertexCache:
    """Assigns one output index per distinct face corner."""

    def __init__(self, tables: AttributeTables):
        self.tables = tables
        self.vertices: typing.List[Vertex] = []
        self.corner_to_index: typing.Dict[FaceCorner, int] = {}

    def __len__(self) -> int:
        return len(self.vertices)

    def __contains__(self, corner: FaceCorner) -> bool:
        return corner in self.corner_to_index

    def build_vertex(self, corner: FaceCorner) -> Vertex:
        position = self.tables.resolve(AttributeKind.POSITION, corner.position)
        if position is None:
            raise AttributeIndexError(
                f"position index {corner.position} is out of range "
                f"(1..{self.tables.position_count})"
            )
        texcoord = self.tables.resolve(AttributeKind.TEXCOORD, corner.texcoord)
        normal = self.tables.resolve(AttributeKind.NORMAL, corner.normal)
        return Vertex(
            position=position,
            texcoord=texcoord or (0.0, 0.0),
            normal=normal or (0.0, 0.0, 0.0),
        )

    def resolve(self, corner: FaceCorner) -> int:
        index = self.corner_to_index.get(corner)
        if index is None:
            vertex = self.build_vertex(corner)
            index = len(self.vertices)
            self.vertices.append(vertex)
            self.corner_to_index[corner] = index
        return index
