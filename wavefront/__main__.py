import logging
import sys
from argparse import ArgumentParser

from wavefront import LoadOptions
from wavefront.loader import load


def _main(argv=None) -> int:
    parser = ArgumentParser(
        prog="wavefront", description="Load an OBJ file into an indexed mesh."
    )
    parser.add_argument("path", help="OBJ file to load")
    parser.add_argument(
        "--strict", action="store_true", help="fail on malformed lines instead of skipping them"
    )
    parser.add_argument(
        "--keep-v", action="store_true", help="do not flip texture V to 1 - V"
    )
    parser.add_argument(
        "-o", "--output", help="write vertex and index buffers to this file"
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    mesh = load(
        args.path, LoadOptions(flip_texcoord_v=not args.keep_v, strict=args.strict)
    )
    if not mesh.loaded:
        return 1

    print(f"name: {mesh.name}")
    print(f"vertices: {mesh.vertex_count}")
    print(f"indices: {mesh.index_count}")
    print(f"triangles: {mesh.triangle_count}")
    bounds = mesh.bounds()
    print(f"bounds: {bounds.min} {bounds.max}")

    if args.output:
        with open(args.output, "wb") as file:
            file.write(mesh.vertex_count.to_bytes(4, "little"))
            file.write(mesh.index_count.to_bytes(4, "little"))
            file.write(mesh.vertex_bytes())
            file.write(mesh.index_bytes())

    return 0


if __name__ == "__main__":
    sys.exit(_main())
