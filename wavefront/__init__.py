import dataclasses
import os
import typing
from enum import Enum

Position = typing.Tuple[float, float, float]
TexCoord = typing.Tuple[float, float]
Normal = typing.Tuple[float, float, float]

DEFAULT_ENCODING = os.environ.get("WAVEFRONT_ENCODING", "utf-8-sig")


class AttributeKind(Enum):
    POSITION = "v"
    TEXCOORD = "vt"
    NORMAL = "vn"


@dataclasses.dataclass(frozen=True)
class FaceCorner:
    position: int
    texcoord: typing.Optional[int] = None
    normal: typing.Optional[int] = None


@dataclasses.dataclass(frozen=True)
class Vertex:
    position: Position
    texcoord: TexCoord = (0.0, 0.0)
    normal: Normal = (0.0, 0.0, 0.0)


@dataclasses.dataclass(frozen=True)
class LoadOptions:
    flip_texcoord_v: bool = True
    strict: bool = False
    encoding: str = DEFAULT_ENCODING


from wavefront.errors import (
    AttributeIndexError,
    DegenerateFaceError,
    EmptyMeshError,
    MalformedAttributeError,
    MalformedFaceTokenError,
    MeshLoadError,
    MeshNotFoundError,
)
from wavefront.mesh import Bounds, Mesh
from wavefront.loader import load, load_or_raise, read_mesh
