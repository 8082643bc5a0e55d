import math

import pytest

from wireframe3d.geometry import Matrix, Triangle, Vec3d, example_cube, projection
from wireframe3d.render import (
    Camera,
    RenderSettings,
    ScreenTriangle,
    clip_to_screen,
    light_level,
    render_mesh,
)

LIGHT = Vec3d(0.0, 0.0, 1.0, 1.0)


def test_face_toward_light_source_is_fully_lit():
    south = example_cube().triangles[0]
    assert light_level(south, LIGHT) == 255


def test_face_away_gets_ambient_minimum():
    a, b, c = example_cube().triangles[0]
    assert light_level(Triangle(c, b, a), LIGHT) == 50


def test_clip_to_screen_keeps_inside_triangle():
    tri = Triangle(Vec3d(10, 10, 0), Vec3d(50, 10, 0), Vec3d(30, 40, 0))
    assert clip_to_screen(tri, 200, 100) == [tri]


def test_clip_to_screen_drops_offscreen_triangle():
    tri = Triangle(Vec3d(-50, 10, 0), Vec3d(-10, 10, 0), Vec3d(-30, 40, 0))
    assert clip_to_screen(tri, 200, 100) == []


def test_clip_to_screen_pieces_stay_within_bounds():
    tri = Triangle(Vec3d(-100, 10, 0), Vec3d(100, 10, 0), Vec3d(100, 150, 0))
    pieces = clip_to_screen(tri, 200, 100)
    assert pieces
    for piece in pieces:
        for point in piece:
            assert -1e-9 <= point.x <= 199 + 1e-9
            assert -1e-9 <= point.y <= 99 + 1e-9


def test_projection_matrix_uses_settings():
    settings = RenderSettings(width=800, height=600)
    assert settings.projection_matrix() == projection(600 / 800, 90.0, 0.1, 1000.0)


def test_view_matrix_maps_camera_position_to_origin():
    camera = Camera(position=Vec3d(1.0, 2.0, 3.0), yaw=0.7)
    moved = camera.view_matrix().transform(Vec3d(1.0, 2.0, 3.0))
    assert (moved.x, moved.y, moved.z) == pytest.approx((0.0, 0.0, 0.0), abs=1e-9)


def test_view_matrix_at_origin_looks_down_z():
    moved = Camera().view_matrix().transform(Vec3d(0.0, 0.0, 5.0))
    assert (moved.x, moved.y, moved.z) == pytest.approx((0.0, 0.0, 5.0))


def test_forward_then_back_returns_to_start():
    camera = Camera()
    camera.move({"w"}, 100)
    assert camera.position.z > 0
    assert camera.position.x == pytest.approx(0.0)
    camera.move({"s"}, 100)
    assert camera.position.z == pytest.approx(0.0)


def test_climb_keys_step_vertically():
    camera = Camera()
    camera.move({"q"}, 16)
    assert camera.position.y == pytest.approx(0.02)
    camera.move({"e"}, 16)
    camera.move({"e"}, 16)
    assert camera.position.y == pytest.approx(-0.02)


def test_turning_left_and_right_cancels():
    camera = Camera()
    camera.move({"a"}, 50)
    assert camera.yaw < 0
    camera.move({"d"}, 50)
    assert camera.yaw == pytest.approx(0.0)


def test_render_cube_produces_shaded_triangles_on_screen():
    settings = RenderSettings()
    result = render_mesh(example_cube(), Camera(), settings, Matrix.identity())
    assert result
    for item in result:
        assert isinstance(item, ScreenTriangle)
        assert 50 <= item.shade <= 255
        for point in item.triangle:
            assert -1e-6 <= point.x <= settings.width - 1 + 1e-6
            assert -1e-6 <= point.y <= settings.height - 1 + 1e-6


def test_camera_facing_away_sees_nothing():
    result = render_mesh(
        example_cube(), Camera(yaw=math.pi), RenderSettings(), Matrix.identity()
    )
    assert result == []