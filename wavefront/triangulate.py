"""Fan triangulation of polygonal faces.

Every triangle shares the first corner of the face. The result is correct for
convex planar polygons only; concave or non-planar faces are split the same
way and may overlap or fold.
"""
import typing

from wavefront.errors import DegenerateFaceError

T = typing.TypeVar("T")


def fan_triangulate(
    corners: typing.Sequence[T],
) -> typing.Iterator[typing.Tuple[T, T, T]]:
    if len(corners) < 3:
        raise DegenerateFaceError(
            f"face has {len(corners)} corners, needs at least 3"
        )
    for i in range(1, len(corners) - 1):
        yield corners[0], corners[i], corners[i + 1]
