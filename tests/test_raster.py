import pytest

from wirefdf.geometry import Point
from wirefdf.raster import HEIGHT, WIDTH, View, grid_pixels, line_pixels


def test_project_origin_is_window_centre():
    assert View().project(Point(0, 0, 0)) == (WIDTH // 2, HEIGHT // 2)


def test_project_applies_pan_then_scale():
    view = View(scale=3, right=2, up=-1)
    cx, cy = View(scale=3).project(Point(0, 0, 0))
    assert view.project(Point(0, 0, 5)) == (cx + 2 * 3, cy - 1 * 3)


def test_horizontal_line_is_flat_and_contiguous():
    view = View()
    pixels = list(line_pixels(view, Point(0, 0, 0), Point(1, 0, 0)))
    sx, sy = view.project(Point(0, 0, 0))
    assert len(pixels) == view.scale
    assert {y for _, y in pixels} == {int(sy)}
    xs = [x for x, _ in pixels]
    assert all(b - a == 1 for a, b in zip(xs, xs[1:]))


@pytest.mark.parametrize(
    "start,end",
    [
        (Point(0, 0, 0), Point(2, 1, 0)),
        (Point(0, 0, 0), Point(3, -1, 0)),
        (Point(-1, 2, 0), Point(4, 0, 0)),
    ],
)
def test_gentle_line_is_symmetric(start, end):
    view = View()
    forward = list(line_pixels(view, start, end))
    assert forward
    assert forward == list(line_pixels(view, end, start))


def test_diagonal_line_steps_both_axes():
    view = View()
    pixels = list(line_pixels(view, Point(0, 0, 0), Point(1, 1, 0)))
    sx, sy = view.project(Point(0, 0, 0))
    assert len(pixels) == view.scale
    assert pixels[0] == (int(sx), int(sy))
    assert all(x - y == int(sx) - int(sy) for x, y in pixels)


def test_steep_line_covers_each_row_once():
    view = View()
    start, end = Point(0, 0, 0), Point(1, 3, 0)
    sx, sy = view.project(start)
    ex, ey = view.project(end)
    pixels = list(line_pixels(view, start, end))
    ys = [y for _, y in pixels]
    assert ys == list(range(int(sy) + 1, int(ey) + 1))
    assert all(sx <= x <= ex for x, _ in pixels)


def test_steep_negative_line_runs_upwards_from_end():
    view = View()
    start, end = Point(0, 0, 0), Point(1, -3, 0)
    sx, sy = view.project(start)
    ex, ey = view.project(end)
    pixels = list(line_pixels(view, start, end))
    assert [y for _, y in pixels] == list(range(int(ey) + 1, int(sy) + 1))
    assert all(sx <= x <= ex for x, _ in pixels)


def test_vertical_line_stays_in_one_column():
    view = View()
    start, end = Point(0, 0, 0), Point(0, 1, 0)
    sx, _ = view.project(start)
    _, ey = view.project(end)
    pixels = list(line_pixels(view, start, end))
    assert pixels
    assert {x for x, _ in pixels} == {int(sx)}
    assert max(y for _, y in pixels) == int(ey) + 1


def test_grid_pixels_single_point_draws_nothing():
    assert list(grid_pixels(View(), [[Point(0, 0, 0)]])) == []


def test_grid_pixels_single_row_is_its_edges():
    view = View()
    row = [Point(-1, 0, 0), Point(0, 0, 0), Point(1, 0, 0)]
    expected = list(line_pixels(view, row[0], row[1])) + list(
        line_pixels(view, row[1], row[2])
    )
    assert list(grid_pixels(view, [row])) == expected


def test_grid_pixels_square_edge_order():
    view = View()
    a, b = Point(0, 0, 0), Point(1, 0, 0)
    c, d = Point(0, 1, 0), Point(1, 1, 0)
    expected = (
        list(line_pixels(view, a, b))
        + list(line_pixels(view, a, c))
        + list(line_pixels(view, b, d))
        + list(line_pixels(view, c, d))
    )
    assert list(grid_pixels(view, [[a, b], [c, d]])) == expected