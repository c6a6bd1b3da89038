import array
import logging
import os
import typing

from wavefront import LoadOptions
from wavefront.attributes import AttributeTables
from wavefront.errors import (
    AttributeIndexError,
    EmptyMeshError,
    MeshLoadError,
    MeshNotFoundError,
)
from wavefront.mesh import Mesh
from wavefront.tokenizer import tokenize
from wavefront.triangulate import fan_triangulate
from wavefront.vertex_cache import VertexCache, parse_face_corner

logger = logging.getLogger(__name__)

PathLike = typing.Union[str, os.PathLike]


def read_mesh(
    file: typing.Iterable[str],
    name: str = "",
    options: typing.Optional[LoadOptions] = None,
) -> Mesh:
    """Build an indexed triangle mesh from the lines of an OBJ file.

    Malformed attribute lines and faces are skipped with a warning unless
    ``options.strict`` is set. A face that references an undeclared position
    always aborts the read with :class:`AttributeIndexError`.
    """
    options = options or LoadOptions()
    tables = AttributeTables(flip_texcoord_v=options.flip_texcoord_v)
    vertex_cache = VertexCache(tables)
    indices = array.array("I")
    skipped_count = 0

    for line_number, line in enumerate(file, start=1):
        if line_number == 1:
            line = line.lstrip("\ufeff")
        tokenized = tokenize(line)
        if tokenized is None:
            continue
        keyword, tokens = tokenized

        try:
            if keyword == "f":
                corners = [parse_face_corner(token) for token in tokens]
                for triangle in list(fan_triangulate(corners)):
                    indices.extend(vertex_cache.resolve(corner) for corner in triangle)
            else:
                tables.add(keyword, tokens)
        except MeshLoadError as error:
            error.at_line(line_number)
            if options.strict or isinstance(error, AttributeIndexError):
                raise
            skipped_count += 1
            logger.warning("%s: skipping '%s' line: %s", name or "<obj>", keyword, error)

    if not vertex_cache.vertices or not indices:
        raise EmptyMeshError(
            f"no triangles produced ({tables.position_count} positions read)"
        )

    logger.debug(
        "%s: %d positions, %d texcoords, %d normals -> %d vertices, %d indices, %d lines skipped",
        name or "<obj>",
        tables.position_count,
        tables.texcoord_count,
        tables.normal_count,
        len(vertex_cache.vertices),
        len(indices),
        skipped_count,
    )
    return Mesh(name=name, vertices=vertex_cache.vertices, indices=indices)


def load_or_raise(path: PathLike, options: typing.Optional[LoadOptions] = None) -> Mesh:
    options = options or LoadOptions()
    name = os.fspath(path)
    try:
        file = open(path, encoding=options.encoding)
    except (OSError, ValueError) as error:
        raise MeshNotFoundError(f"cannot open {name!r}: {error}") from error

    with file:
        try:
            return read_mesh(file, name=name, options=options)
        except UnicodeDecodeError as error:
            raise MeshLoadError(f"{name!r} is not {options.encoding} text") from error


def load(path: PathLike, options: typing.Optional[LoadOptions] = None) -> Mesh:
    """Load an OBJ file, returning an empty mesh named after ``path`` on failure."""
    try:
        return load_or_raise(path, options)
    except MeshLoadError as error:
        logger.error("could not load %s: %s", os.fspath(path), error)
        return Mesh.empty(os.fspath(path))
