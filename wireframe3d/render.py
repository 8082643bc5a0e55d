"""Camera, projection and the per-frame triangle pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Collection

from .geometry import (
    Matrix,
    Mesh,
    Triangle,
    Vec3d,
    clip_against_plane,
    point_at,
    projection,
    rotation_y,
)

MIN_LIGHT = 50
MOVE_SPEED = 0.01
TURN_SPEED = 0.001
CLIMB_STEP = 0.02


@dataclass
class Camera:
    """A camera at ``position`` turned by ``yaw`` around the vertical axis."""

    position: Vec3d = field(default_factory=lambda: Vec3d(0.0, 0.0, 0.0))
    yaw: float = 0.0
    up: Vec3d = field(default_factory=lambda: Vec3d(0.0, 1.0, 0.0))

    @property
    def look_direction(self) -> Vec3d:
        return rotation_y(self.yaw).transform(Vec3d(0.0, 0.0, 1.0))

    def view_matrix(self) -> Matrix:
        """Matrix that takes world space into this camera's view space."""
        target = self.position + self.look_direction
        return point_at(self.position, target, self.up).quick_inverse()

    def move(self, keys: Collection[str], delta: float) -> None:
        """Apply the held keys (``w``, ``s``, ``a``, ``d``, ``q``, ``e``) for ``delta`` ms."""
        forward = self.look_direction * (delta * MOVE_SPEED)
        if "w" in keys:
            self.position = self.position + forward
        if "s" in keys:
            self.position = self.position - forward
        if "e" in keys:
            self.position = replace(self.position, y=self.position.y - CLIMB_STEP)
        if "q" in keys:
            self.position = replace(self.position, y=self.position.y + CLIMB_STEP)
        if "a" in keys:
            self.yaw -= delta * TURN_SPEED
        if "d" in keys:
            self.yaw += delta * TURN_SPEED


@dataclass
class RenderSettings:
    """Screen size, projection and lighting parameters."""

    width: int = 1920
    height: int = 1080
    near: float = 0.1
    far: float = 1000.0
    fov: float = 90.0
    light: Vec3d = field(default_factory=lambda: Vec3d(0.0, 0.0, 1.0, 1.0))
    z_offset: float = 10.0
    near_clip_z: float = 2.0

    def projection_matrix(self) -> Matrix:
        return projection(self.height / self.width, self.fov, self.near, self.far)


@dataclass(frozen=True)
class ScreenTriangle:
    """A triangle in pixel coordinates with its grey level."""

    triangle: Triangle
    shade: int


def light_level(triangle: Triangle, light: Vec3d) -> int:
    """Grey level of a face lit from ``light``, never below the ambient minimum."""
    normal = triangle.normal().normalized()
    level = int(-normal.dot(light) * 255.0)
    return max(level, MIN_LIGHT)


def clip_to_screen(triangle: Triangle, width: int, height: int) -> list[Triangle]:
    """Clip a screen-space triangle against the four screen edges."""
    edges = (
        (Vec3d(0.0, 0.0, 0.0), Vec3d(0.0, 1.0, 0.0)),
        (Vec3d(0.0, height - 1.0, 0.0), Vec3d(0.0, -1.0, 0.0)),
        (Vec3d(0.0, 0.0, 0.0), Vec3d(1.0, 0.0, 0.0)),
        (Vec3d(width - 1.0, 0.0, 0.0), Vec3d(-1.0, 0.0, 0.0)),
    )
    pending = [triangle]
    for plane_point, plane_normal in edges:
        pending = [
            piece
            for current in pending
            for piece in clip_against_plane(plane_point, plane_normal, current)
        ]
    return pending


def _facing_camera(triangle: Triangle, camera_position: Vec3d) -> bool:
    try:
        normal = triangle.normal().normalized()
        look = (triangle.a - camera_position).normalized()
    except ZeroDivisionError:
        return False
    return normal.dot(look) < 0


def _to_screen(triangle: Triangle, projection_matrix: Matrix, width: int, height: int) -> Triangle:
    projected = triangle.transformed(projection_matrix)
    points = []
    for point in projected:
        point = point / point.w
        points.append(
            replace(
                point,
                x=(point.x + 1.0) * (0.5 * width),
                y=(point.y + 1.0) * (0.5 * height),
            )
        )
    return Triangle(*points)


def render_mesh(
    mesh: Mesh, camera: Camera, settings: RenderSettings, world: Matrix
) -> list[ScreenTriangle]:
    """Turn a mesh into shaded, clipped screen triangles, farthest first."""
    visible = []
    for triangle in mesh:
        placed = triangle.transformed(world).translated_z(settings.z_offset)
        if _facing_camera(placed, camera.position):
            visible.append(placed)
    visible.sort(key=Triangle.depth, reverse=True)

    view = camera.view_matrix()
    projection_matrix = settings.projection_matrix()
    near_point = Vec3d(0.0, 0.0, settings.near_clip_z)
    near_normal = Vec3d(0.0, 0.0, 1.0)

    result = []
    for triangle in visible:
        shade = light_level(triangle, settings.light)
        viewed = triangle.transformed(view)
        for clipped in clip_against_plane(near_point, near_normal, viewed):
            on_screen = _to_screen(clipped, projection_matrix, settings.width, settings.height)
            result.extend(
                ScreenTriangle(piece, shade)
                for piece in clip_to_screen(on_screen, settings.width, settings.height)
            )
    return result