"""Vectors, matrices, triangles and plane clipping for the 3D pipeline."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterator, Tuple

Row = Tuple[float, float, float, float]


@dataclass(frozen=True)
class Vec3d:
    """A homogeneous 3D vector; ``w`` defaults to 1."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

    def __add__(self, other: Vec3d) -> Vec3d:
        if not isinstance(other, Vec3d):
            return NotImplemented
        return Vec3d(self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w)

    def __sub__(self, other: Vec3d) -> Vec3d:
        if not isinstance(other, Vec3d):
            return NotImplemented
        return Vec3d(self.x - other.x, self.y - other.y, self.z - other.z, self.w - other.w)

    def __mul__(self, factor: float) -> Vec3d:
        return Vec3d(self.x * factor, self.y * factor, self.z * factor, self.w * factor)

    def __truediv__(self, divisor: float) -> Vec3d:
        return Vec3d(self.x / divisor, self.y / divisor, self.z / divisor, self.w / divisor)

    def dot(self, other: Vec3d) -> float:
        """Dot product of the x, y and z components."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vec3d) -> Vec3d:
        """Cross product of the x, y and z components, with ``w`` set to 1."""
        return Vec3d(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
            1.0,
        )

    def length(self) -> float:
        return math.sqrt(self.dot(self))

    def normalized(self) -> Vec3d:
        """Scale x, y and z to unit length, keeping ``w`` as it is."""
        size = self.length()
        if size == 0:
            raise ZeroDivisionError("cannot normalize a zero-length vector")
        return Vec3d(self.x / size, self.y / size, self.z / size, self.w)


def _zero_rows() -> tuple[Row, Row, Row, Row]:
    return tuple((0.0, 0.0, 0.0, 0.0) for _ in range(4))  # type: ignore[return-value]


@dataclass(frozen=True)
class Matrix:
    """A 4x4 matrix applied to row vectors (``v @ M``)."""

    rows: tuple[Row, Row, Row, Row] = field(default_factory=_zero_rows)

    def __post_init__(self) -> None:
        rows = tuple(tuple(float(value) for value in row) for row in self.rows)
        if len(rows) != 4 or any(len(row) != 4 for row in rows):
            raise ValueError("a matrix needs exactly 4 rows of 4 values")
        object.__setattr__(self, "rows", rows)

    @classmethod
    def identity(cls) -> Matrix:
        return cls(tuple(tuple(1.0 if i == j else 0.0 for j in range(4)) for i in range(4)))

    def __matmul__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        columns = list(zip(*other.rows))
        return Matrix(
            tuple(
                tuple(sum(a * b for a, b in zip(row, column)) for column in columns)
                for row in self.rows
            )
        )

    def transform(self, vector: Vec3d) -> Vec3d:
        """Multiply ``vector`` by this matrix, treating its ``w`` as 1."""
        m = self.rows
        return Vec3d(
            *(
                vector.x * m[0][j] + vector.y * m[1][j] + vector.z * m[2][j] + m[3][j]
                for j in range(4)
            )
        )

    def quick_inverse(self) -> Matrix:
        """Invert a rotation-plus-translation matrix."""
        m = self.rows
        return Matrix(
            (
                (m[0][0], m[1][0], m[2][0], 0.0),
                (m[0][1], m[1][1], m[2][1], 0.0),
                (m[0][2], m[1][2], m[2][2], 0.0),
                (
                    -(m[3][0] * m[0][0] + m[3][1] * m[0][1] + m[3][2] * m[0][2]),
                    -(m[3][0] * m[1][0] + m[3][1] * m[1][1] + m[3][2] * m[1][2]),
                    -(m[3][0] * m[2][0] + m[3][1] * m[2][1] + m[3][2] * m[2][2]),
                    1.0,
                ),
            )
        )


@dataclass(frozen=True)
class Triangle:
    """Three points in space."""

    a: Vec3d = field(default_factory=Vec3d)
    b: Vec3d = field(default_factory=Vec3d)
    c: Vec3d = field(default_factory=Vec3d)

    @property
    def points(self) -> tuple[Vec3d, Vec3d, Vec3d]:
        return (self.a, self.b, self.c)

    def __iter__(self) -> Iterator[Vec3d]:
        return iter(self.points)

    def transformed(self, matrix: Matrix) -> Triangle:
        return Triangle(*(matrix.transform(point) for point in self.points))

    def translated_z(self, offset: float) -> Triangle:
        return Triangle(
            *(Vec3d(p.x, p.y, p.z + offset, p.w) for p in self.points)
        )

    def normal(self) -> Vec3d:
        """The (unnormalized) normal from the cross product of two edges."""
        return (self.b - self.a).cross(self.c - self.a)

    def depth(self) -> float:
        """Sum of the three z coordinates, used to order triangles."""
        return self.a.z + self.b.z + self.c.z


@dataclass
class Mesh:
    """A collection of triangles."""

    triangles: list[Triangle] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.triangles)

    def __iter__(self) -> Iterator[Triangle]:
        return iter(self.triangles)


_CUBE_FACES = (
    # South
    ((0, 0, 0), (0, 1, 0), (1, 1, 0)),
    ((0, 0, 0), (1, 1, 0), (1, 0, 0)),
    # East
    ((1, 0, 0), (1, 1, 0), (1, 1, 1)),
    ((1, 0, 0), (1, 1, 1), (1, 0, 1)),
    # North
    ((1, 0, 1), (1, 1, 1), (0, 1, 1)),
    ((1, 0, 1), (0, 1, 1), (0, 0, 1)),
    # West
    ((0, 0, 1), (0, 1, 1), (0, 1, 0)),
    ((0, 0, 1), (0, 1, 0), (0, 0, 0)),
    # Top
    ((0, 1, 0), (0, 1, 1), (1, 1, 1)),
    ((0, 1, 0), (1, 1, 1), (1, 1, 0)),
    # Bottom
    ((0, 0, 1), (0, 0, 0), (1, 0, 0)),
    ((0, 0, 1), (1, 0, 0), (1, 0, 1)),
)


def example_cube() -> Mesh:
    """A unit cube made of twelve triangles."""
    return Mesh(
        [
            Triangle(*(Vec3d(float(x), float(y), float(z)) for x, y, z in face))
            for face in _CUBE_FACES
        ]
    )


def rotation_x(theta: float) -> Matrix:
    """Rotation about the x axis by half of ``theta``."""
    half = theta * 0.5
    c, s = math.cos(half), math.sin(half)
    return Matrix(((1, 0, 0, 0), (0, c, s, 0), (0, -s, c, 0), (0, 0, 0, 1)))


def rotation_y(theta: float) -> Matrix:
    c, s = math.cos(theta), math.sin(theta)
    return Matrix(((c, 0, -s, 0), (0, 1, 0, 0), (s, 0, c, 0), (0, 0, 0, 1)))


def rotation_z(theta: float) -> Matrix:
    c, s = math.cos(theta), math.sin(theta)
    return Matrix(((c, s, 0, 0), (-s, c, 0, 0), (0, 0, 1, 0), (0, 0, 0, 1)))


def projection(aspect_ratio: float, fov: float, near: float, far: float) -> Matrix:
    """Perspective projection; ``fov`` is taken as an angle in radians."""
    scale = 1.0 / math.tan(fov * 0.5)
    depth = far / (far - near)
    return Matrix(
        (
            (aspect_ratio * scale, 0, 0, 0),
            (0, scale, 0, 0),
            (0, 0, depth, 1),
            (0, 0, -near * depth, 0),
        )
    )


def point_at(position: Vec3d, target: Vec3d, up: Vec3d) -> Matrix:
    """Camera matrix placed at ``position`` and facing ``target``."""
    forward = (target - position).normalized()
    new_up = (up - forward * up.dot(forward)).normalized()
    right = new_up.cross(forward)
    return Matrix(
        (
            (right.x, right.y, right.z, 0),
            (new_up.x, new_up.y, new_up.z, 0),
            (forward.x, forward.y, forward.z, 0),
            (position.x, position.y, position.z, 1),
        )
    )


def intersect_plane(
    plane_point: Vec3d, plane_normal: Vec3d, line_start: Vec3d, line_end: Vec3d
) -> Vec3d:
    """Point where the line from ``line_start`` to ``line_end`` meets the plane."""
    normal = plane_normal.normalized()
    plane_d = -normal.dot(plane_point)
    ad = line_start.dot(normal)
    bd = line_end.dot(normal)
    t = (-plane_d - ad) / (bd - ad)
    return line_start + (line_end - line_start) * t


def plane_distance(point: Vec3d, plane_point: Vec3d, plane_normal: Vec3d) -> float:
    """Signed distance of ``point`` from the plane, measured along its normal."""
    return plane_normal.dot(point) - plane_normal.dot(plane_point)


def clip_against_plane(
    plane_point: Vec3d, plane_normal: Vec3d, triangle: Triangle
) -> tuple[Triangle, ...]:
    """Clip ``triangle`` to the side the normal points to; yields 0, 1 or 2 triangles."""
    normal = plane_normal.normalized()
    inside: list[Vec3d] = []
    outside: list[Vec3d] = []
    for point in triangle:
        side = inside if plane_distance(point, plane_point, normal) >= 0 else outside
        side.append(point)

    if not inside:
        return ()
    if len(inside) == 3:
        return (triangle,)
    if len(inside) == 1:
        return (
            Triangle(
                inside[0],
                intersect_plane(plane_point, normal, inside[0], outside[0]),
                intersect_plane(plane_point, normal, inside[0], outside[1]),
            ),
        )
    shared = intersect_plane(plane_point, normal, inside[0], outside[0])
    first = Triangle(inside[0], inside[1], shared)
    second = Triangle(
        inside[1],
        intersect_plane(plane_point, normal, inside[1], outside[0]),
        shared,
    )
    return (first, second)