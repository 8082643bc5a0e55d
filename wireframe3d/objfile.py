"""Loading triangle meshes from Wavefront OBJ files."""

from __future__ import annotations

from os import PathLike
from typing import Iterable, Union

from .geometry import Mesh, Triangle, Vec3d


class ObjFormatError(ValueError):
    """Raised when OBJ data cannot be turned into a mesh."""


def _parse_vertex(tokens: list[str], line_number: int) -> tuple[float, float, float]:
    if len(tokens) < 3:
        raise ObjFormatError(f"line {line_number}: a vertex needs three coordinates")
    try:
        x, y, z = (float(token) for token in tokens[:3])
    except ValueError as error:
        raise ObjFormatError(f"line {line_number}: bad vertex coordinate") from error
    return x, y, z


def _parse_face(tokens: list[str], line_number: int) -> tuple[int, int, int]:
    if len(tokens) < 3:
        raise ObjFormatError(f"line {line_number}: a face needs three vertices")
    try:
        a, b, c = (int(token.split("/", 1)[0]) for token in tokens[:3])
    except ValueError as error:
        raise ObjFormatError(f"line {line_number}: bad face index") from error
    return a, b, c


def parse_obj(lines: Iterable[str]) -> Mesh:
    """Build a mesh from the ``v`` and ``f`` lines of OBJ text.

    Only the first three values of each line are used, so polygons with more
    corners contribute their first triangle. Face indices are 1-based and may
    be followed by ``/texture/normal`` parts, which are ignored.
    """
    vertices: list[Vec3d] = []
    faces: list[tuple[int, tuple[int, int, int]]] = []

    for line_number, line in enumerate(lines, start=1):
        tokens = line.split()
        if not tokens:
            continue
        keyword, values = tokens[0], tokens[1:]
        if keyword == "v":
            vertices.append(Vec3d(*_parse_vertex(values, line_number)))
        elif keyword == "f":
            faces.append((line_number, _parse_face(values, line_number)))

    triangles = []
    for line_number, indices in faces:
        for index in indices:
            if not 1 <= index <= len(vertices):
                raise ObjFormatError(
                    f"line {line_number}: vertex index {index} is out of range"
                )
        triangles.append(Triangle(*(vertices[index - 1] for index in indices)))
    return Mesh(triangles)


def load_obj(path: Union[str, PathLike]) -> Mesh:
    """Read an OBJ file from ``path`` into a mesh."""
    with open(path, encoding="utf-8") as handle:
        return parse_obj(handle)