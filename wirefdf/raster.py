"""Turning grid edges into window pixels."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Sequence

from wirefdf.geometry import Point

WIDTH = 1200
HEIGHT = 800
MOVE = 2
COLOUR = 50000

Pixel = tuple[int, int]


@dataclass
class View:
    """Zoom and panning applied when projecting points onto the window."""

    scale: int = 10
    right: int = 0
    up: int = 0
    width: int = WIDTH
    height: int = HEIGHT

    def project(self, point: Point) -> tuple[float, float]:
        """Return the window position of ``point``."""
        x = (point.x + self.right) * self.scale + self.width // 2
        y = (point.y + self.up) * self.scale + self.height // 2
        return x, y


def _slope(dy: float, dx: float) -> float:
    if dx == 0:
        if dy > 0:
            return math.inf
        if dy < 0:
            return -math.inf
        return math.nan
    return dy / dx


def _down(sx: float, sy: float, ey: float) -> Iterator[Pixel]:
    y = sy
    while y <= ey:
        y += 1
        yield int(sx), int(y)


def _diagonal(sx: float, sy: float, ex: float) -> Iterator[Pixel]:
    x, y = sx, sy
    while x < ex:
        yield int(x), int(y)
        x += 1
        y += 1


def _gentle(sx: float, sy: float, ex: float, slope: float) -> Iterator[Pixel]:
    x = sx
    while x < ex:
        x += 1
        yield int(x), int(slope * (x - sx) + sy)


def _steep(sx: float, sy: float, ey: float, slope: float) -> Iterator[Pixel]:
    inverse = 1 / slope
    y, stop = sy, ey
    if inverse < 0:
        y, stop = ey, sy
    while y < stop:
        y += 1
        yield int(inverse * (y - sy) + sx), int(y)


def line_pixels(view: View, start: Point, end: Point) -> Iterator[Pixel]:
    """Yield the pixels plotted for the edge from ``start`` to ``end``."""
    sx, sy = view.project(start)
    ex, ey = view.project(end)
    slope = _slope(ey - sy, ex - sx)
    if ex - sx < 0:
        sx, sy, ex, ey = ex, ey, sx, sy
    if ex == sx:
        yield from _down(sx, sy, ey)
    if -1 < slope < 1:
        yield from _gentle(sx, sy, ex, slope)
    elif slope == 1 or slope == -1:
        yield from _diagonal(sx, sy, ex)
    elif slope > 1 or slope < -1:
        yield from _steep(sx, sy, ey, slope)


def grid_pixels(view: View, grid: Sequence[Sequence[Point]]) -> Iterator[Pixel]:
    """Yield the pixels of every edge joining neighbouring grid points."""
    rows = len(grid)
    for i, row in enumerate(grid):
        for j, point in enumerate(row):
            if j + 1 < len(row):
                yield from line_pixels(view, point, row[j + 1])
            if i + 1 < rows:
                yield from line_pixels(view, point, grid[i + 1][j])