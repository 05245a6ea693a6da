"""Interactive wireframe viewer: key and mouse handling, rendering and the command."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from wirefdf.geometry import ANGLE_STEP, Axis, Grid, Point, rotate_grid
from wirefdf.mapfile import MapError, read_map
from wirefdf.raster import COLOUR, HEIGHT, MOVE, WIDTH, View, grid_pixels

TITLE = "fdf_test"

KEY_A = 0
KEY_S = 1
KEY_D = 2
KEY_C = 8
KEY_Q = 12
KEY_W = 13
KEY_E = 14
KEY_ESCAPE = 53
KEY_LEFT = 123
KEY_RIGHT = 124
KEY_DOWN = 125
KEY_UP = 126

BUTTON_SCROLL_UP = 4
BUTTON_SCROLL_DOWN = 5

_ROTATION_KEYS = {
    KEY_W: (Axis.X, -1.0),
    KEY_S: (Axis.X, 1.0),
    KEY_A: (Axis.Y, -1.0),
    KEY_D: (Axis.Y, 1.0),
    KEY_Q: (Axis.Z, -1.0),
    KEY_E: (Axis.Z, 1.0),
}

_TK_KEYS = {
    "a": KEY_A,
    "s": KEY_S,
    "d": KEY_D,
    "c": KEY_C,
    "q": KEY_Q,
    "w": KEY_W,
    "e": KEY_E,
    "escape": KEY_ESCAPE,
    "left": KEY_LEFT,
    "right": KEY_RIGHT,
    "down": KEY_DOWN,
    "up": KEY_UP,
}


class Surface:
    """An in-memory drawing target that clips pixels to its size."""

    def __init__(self, width: int = WIDTH, height: int = HEIGHT) -> None:
        self.width = width
        self.height = height
        self.pixels: dict[tuple[int, int], int] = {}
        self.closed = False

    def clear(self) -> None:
        """Remove every pixel."""
        self.pixels.clear()

    def put_pixel(self, x: int, y: int, colour: int) -> bool:
        """Set one pixel; return whether it lay inside the surface."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            return False
        self.pixels[(x, y)] = colour
        return True

    def close(self) -> None:
        """Mark the surface as closed."""
        self.closed = True


class Viewer:
    """Holds the map and view state and reacts to input events."""

    def __init__(self, grid: Sequence[Sequence[Point]], surface: Surface) -> None:
        self.grid: Grid = [list(row) for row in grid]
        self.surface = surface
        self.view = View(width=surface.width, height=surface.height)
        self.angle = 0.0
        self.axis: Optional[Axis] = None

    def render(self) -> None:
        """Clear the surface, apply the pending rotation and draw the grid."""
        self.surface.clear()
        self.grid = rotate_grid(self.grid, self.axis, self.angle * ANGLE_STEP)
        for x, y in grid_pixels(self.view, self.grid):
            self.surface.put_pixel(x, y, COLOUR)

    def _move(self, key: int) -> None:
        if key <= KEY_RIGHT:
            self.view.right += -MOVE if key == KEY_LEFT else MOVE
        if key >= KEY_DOWN:
            self.view.up += MOVE if key == KEY_DOWN else -MOVE
        self.axis = None
        self.render()

    def on_key(self, key: int) -> None:
        """Handle a released key given by its key code."""
        if key in (KEY_LEFT, KEY_RIGHT, KEY_DOWN, KEY_UP):
            self._move(key)
        rotation = _ROTATION_KEYS.get(key)
        if rotation is not None:
            self.axis, self.angle = rotation
            self.render()
        if key == KEY_ESCAPE:
            self.surface.close()
        if key == KEY_C:
            self.surface.clear()

    def on_mouse(self, button: int, x: int, y: int) -> None:
        """Handle a mouse button press; the scroll buttons zoom."""
        if button in (BUTTON_SCROLL_UP, BUTTON_SCROLL_DOWN):
            self.view.scale += MOVE if button == BUTTON_SCROLL_UP else -MOVE
            self.surface.clear()
            self.axis = None
            self.render()


class TkSurface(Surface):
    """A surface that also draws onto a Tk canvas."""

    def __init__(self, root, width: int, height: int) -> None:
        import tkinter

        super().__init__(width, height)
        self.root = root
        self.canvas = tkinter.Canvas(
            root, width=width, height=height, background="black", highlightthickness=0
        )
        self.canvas.pack()

    def clear(self) -> None:
        super().clear()
        self.canvas.delete("all")

    def put_pixel(self, x: int, y: int, colour: int) -> bool:
        if not super().put_pixel(x, y, colour):
            return False
        fill = f"#{colour & 0xFFFFFF:06x}"
        self.canvas.create_line(x, y, x + 1, y, fill=fill)
        return True

    def close(self) -> None:
        if not self.closed:
            super().close()
            self.root.destroy()


def _bind_events(root, viewer: Viewer) -> None:
    def key_released(event) -> None:
        key = _TK_KEYS.get(event.keysym.lower())
        if key is not None:
            viewer.on_key(key)

    def button_pressed(event) -> None:
        viewer.on_mouse(event.num, event.x, event.y)

    def wheel(event) -> None:
        button = BUTTON_SCROLL_UP if event.delta > 0 else BUTTON_SCROLL_DOWN
        viewer.on_mouse(button, event.x, event.y)

    root.bind("<KeyRelease>", key_released)
    root.bind("<ButtonPress>", button_pressed)
    root.bind("<MouseWheel>", wheel)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open a window showing the map named on the command line."""
    parser = argparse.ArgumentParser(prog="wirefdf", description="Wireframe map viewer.")
    parser.add_argument("map", nargs="?", help="height map file")
    args = parser.parse_args(argv)

    grid: Grid = []
    if args.map is not None:
        try:
            grid = read_map(args.map)
        except MapError as exc:
            print(f"wirefdf: {exc}", file=sys.stderr)
            return 1

    import tkinter

    try:
        root = tkinter.Tk()
    except tkinter.TclError as exc:
        print(f"wirefdf: cannot open window: {exc}", file=sys.stderr)
        return 1
    root.title(TITLE)
    root.resizable(False, False)
    surface = TkSurface(root, WIDTH, HEIGHT)
    viewer = Viewer(grid, surface)
    _bind_events(root, viewer)
    root.mainloop()
    return 0