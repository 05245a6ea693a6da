import pytest

from wirefdf.geometry import ANGLE_STEP, Axis, Point, rotate_grid
from wirefdf.mapfile import parse_map
from wirefdf.raster import COLOUR, MOVE, View, grid_pixels
from wirefdf.viewer import (
    KEY_A,
    KEY_C,
    KEY_D,
    KEY_DOWN,
    KEY_E,
    KEY_ESCAPE,
    KEY_LEFT,
    KEY_Q,
    KEY_RIGHT,
    KEY_S,
    KEY_UP,
    KEY_W,
    Surface,
    Viewer,
    main,
)


@pytest.fixture
def grid():
    return parse_map("0 0 0\n0 5 0\n0 0 0\n")


@pytest.fixture
def viewer(grid):
    return Viewer(grid, Surface())


def _expected_pixels(view, grid, surface):
    return {
        (x, y)
        for x, y in grid_pixels(view, grid)
        if 0 <= x < surface.width and 0 <= y < surface.height
    }


def test_render_draws_grid_in_colour(viewer, grid):
    viewer.render()
    assert set(viewer.surface.pixels) == _expected_pixels(View(), grid, viewer.surface)
    assert set(viewer.surface.pixels.values()) == {COLOUR}


def test_render_without_axis_keeps_grid(viewer, grid):
    viewer.render()
    assert viewer.grid == grid


@pytest.mark.parametrize(
    "key, right, up",
    [
        (KEY_LEFT, -MOVE, 0),
        (KEY_RIGHT, MOVE, 0),
        (KEY_DOWN, 0, MOVE),
        (KEY_UP, 0, -MOVE),
    ],
)
def test_arrow_keys_pan(viewer, key, right, up):
    viewer.on_key(key)
    assert (viewer.view.right, viewer.view.up) == (right, up)
    assert viewer.axis is None


def test_pan_redraws_shifted(viewer, grid):
    viewer.on_key(KEY_RIGHT)
    view = View(right=MOVE)
    assert set(viewer.surface.pixels) == _expected_pixels(view, grid, viewer.surface)


@pytest.mark.parametrize(
    "key, axis, angle",
    [
        (KEY_W, Axis.X, -1.0),
        (KEY_S, Axis.X, 1.0),
        (KEY_A, Axis.Y, -1.0),
        (KEY_D, Axis.Y, 1.0),
        (KEY_Q, Axis.Z, -1.0),
        (KEY_E, Axis.Z, 1.0),
    ],
)
def test_rotation_keys(viewer, grid, key, axis, angle):
    viewer.on_key(key)
    assert viewer.axis is axis
    assert viewer.angle == angle
    assert viewer.grid == rotate_grid(grid, axis, angle * ANGLE_STEP)


def test_rotations_accumulate(viewer, grid):
    viewer.on_key(KEY_D)
    viewer.on_key(KEY_D)
    once = rotate_grid(grid, Axis.Y, ANGLE_STEP)
    assert viewer.grid == rotate_grid(once, Axis.Y, ANGLE_STEP)


def test_move_after_rotation_does_not_rotate(viewer):
    viewer.on_key(KEY_E)
    rotated = viewer.grid
    viewer.on_key(KEY_LEFT)
    assert viewer.grid == rotated
    assert viewer.axis is None


@pytest.mark.parametrize("button, scale", [(4, 10 + MOVE), (5, 10 - MOVE)])
def test_scroll_zooms(viewer, grid, button, scale):
    viewer.on_mouse(button, 3, 7)
    assert viewer.view.scale == scale
    view = View(scale=scale)
    assert set(viewer.surface.pixels) == _expected_pixels(view, grid, viewer.surface)


def test_other_buttons_ignored(viewer):
    viewer.on_mouse(1, 10, 10)
    assert viewer.view == View()
    assert viewer.surface.pixels == {}


def test_escape_closes(viewer):
    viewer.on_key(KEY_ESCAPE)
    assert viewer.surface.closed is True


def test_c_clears(viewer):
    viewer.render()
    assert viewer.surface.pixels
    viewer.on_key(KEY_C)
    assert viewer.surface.pixels == {}


def test_unknown_key_changes_nothing(viewer, grid):
    viewer.render()
    before = dict(viewer.surface.pixels)
    viewer.on_key(99)
    assert viewer.surface.pixels == before
    assert viewer.view == View()
    assert viewer.grid == grid


def test_surface_clips_pixels():
    surface = Surface(4, 3)
    assert surface.put_pixel(3, 2, 7) is True
    assert surface.put_pixel(4, 0, 7) is False
    assert surface.put_pixel(0, -1, 7) is False
    assert surface.pixels == {(3, 2): 7}


def test_viewer_copies_grid():
    rows = [[Point(0.0, 0.0, 0.0)]]
    viewer = Viewer(rows, Surface())
    rows[0].append(Point(1.0, 0.0, 0.0))
    assert len(viewer.grid[0]) == 1


def test_main_missing_map_fails(tmp_path, capsys):
    assert main([str(tmp_path / "absent.fdf")]) == 1
    assert "absent.fdf" in capsys.readouterr().err


def test_main_rejects_extra_arguments():
    with pytest.raises(SystemExit) as info:
        main(["a.fdf", "b.fdf"])
    assert info.value.code == 2