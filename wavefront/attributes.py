import typing

from wavefront import AttributeKind, Normal, Position, TexCoord
from wavefront.errors import MalformedAttributeError


def _parse_floats(
    keyword: str, tokens: typing.List[str], *, required: int, maximum: int
) -> typing.List[float]:
    if len(tokens) < required:
        raise MalformedAttributeError(
            f"'{keyword}' needs at least {required} components, got {len(tokens)}"
        )
    try:
        return [float(_) for _ in tokens[:maximum]]
    except ValueError as error:
        raise MalformedAttributeError(
            f"'{keyword}' has a non-numeric component: {error}"
        ) from error


class AttributeTables:
    """Positions, texture coordinates and normals in file order."""

    def __init__(self, *, flip_texcoord_v: bool = True):
        self.flip_texcoord_v = flip_texcoord_v
        self.positions: typing.List[Position] = []
        self.texcoords: typing.List[TexCoord] = []
        self.normals: typing.List[Normal] = []

    @property
    def position_count(self) -> int:
        return len(self.positions)

    @property
    def texcoord_count(self) -> int:
        return len(self.texcoords)

    @property
    def normal_count(self) -> int:
        return len(self.normals)

    def append_position(self, x: float, y: float, z: float) -> None:
        self.positions.append((x, y, z))

    def append_texcoord(self, u: float, v: float) -> None:
        if self.flip_texcoord_v:
            v = 1.0 - v
        self.texcoords.append((u, v))

    def append_normal(self, x: float, y: float, z: float) -> None:
        self.normals.append((x, y, z))

    def add(self, keyword: str, tokens: typing.List[str]) -> None:
        if keyword == AttributeKind.POSITION.value:
            x, y, z = _parse_floats(keyword, tokens, required=3, maximum=3)
            self.append_position(x, y, z)
        elif keyword == AttributeKind.TEXCOORD.value:
            components = _parse_floats(keyword, tokens, required=1, maximum=2)
            # v is optional in the format and defaults to 0
            if len(components) == 1:
                components.append(0.0)
            self.append_texcoord(*components)
        elif keyword == AttributeKind.NORMAL.value:
            x, y, z = _parse_floats(keyword, tokens, required=3, maximum=3)
            self.append_normal(x, y, z)
        else:
            raise ValueError(f"not an attribute keyword: {keyword!r}")

    def resolve(
        self, kind: AttributeKind, index: typing.Optional[int]
    ) -> typing.Optional[typing.Tuple[float, ...]]:
        """Look up a 1-based index, returning None when it is absent or out of range."""
        if index is None or index < 1:
            return None
        table = {
            AttributeKind.POSITION: self.positions,
            AttributeKind.TEXCOORD: self.texcoords,
            AttributeKind.NORMAL: self.normals,
        }[kind]
        if index > len(table):
            return None
        return table[index - 1]
