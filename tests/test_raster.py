import pytest

from wireframe3d.raster import Span, fill_triangle

TRIANGLES = [
    (0, 0, 4, 0, 0, 4),
    (0, 0, 6, 1, 0, 2),
    (2, 0, 3, 9, 0, 5),
]


def test_single_point():
    assert list(fill_triangle(3, 4, 3, 4, 3, 4)) == [Span(4, 3, 3)]


def test_horizontal_line_covers_all_x():
    assert list(fill_triangle(0, 5, 10, 5, 5, 5)) == [Span(5, 0, 10)]


def test_right_triangle_worked_example():
    spans = list(fill_triangle(0, 0, 4, 0, 0, 4))
    assert spans == [Span(0, 0, 4), Span(1, 0, 3), Span(2, 0, 2), Span(3, 0, 1), Span(4, 0, 0)]


@pytest.mark.parametrize("coords", TRIANGLES)
def test_rows_are_consecutive_and_cover_height(coords):
    spans = list(fill_triangle(*coords))
    ys = [coords[1], coords[3], coords[5]]
    assert [s.y for s in spans] == list(range(min(ys), max(ys) + 1))


@pytest.mark.parametrize("coords", TRIANGLES)
def test_spans_stay_in_bounding_box(coords):
    xs = [coords[0], coords[2], coords[4]]
    for span in fill_triangle(*coords):
        assert min(xs) <= span.x_start <= span.x_end <= max(xs)


@pytest.mark.parametrize("coords", [(0, 0, 6, 1, 0, 2), (2, 0, 3, 9, 0, 5)])
def test_vertex_order_does_not_matter(coords):
    x1, y1, x2, y2, x3, y3 = coords
    expected = list(fill_triangle(*coords))
    assert list(fill_triangle(x3, y3, x1, y1, x2, y2)) == expected
    assert list(fill_triangle(x2, y2, x3, y3, x1, y1)) == expected
    assert list(fill_triangle(x3, y3, x2, y2, x1, y1)) == expected


def test_float_coordinates_are_truncated():
    assert list(fill_triangle(2.9, 0.5, 3.7, 9.2, 0.1, 5.9)) == list(
        fill_triangle(2, 0, 3, 9, 0, 5)
    )