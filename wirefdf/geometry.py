"""Grid points and the rotations applied to them."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass, replace
from typing import Optional, Sequence

ANGLE_STEP = 0.05
"""Rotation applied by a single key press, in radians."""

Grid = list[list["Point"]]


@dataclass(frozen=True)
class Point:
    """A vertex of the wireframe in model space."""

    x: float
    y: float
    z: float
    colour: int = 0


class Axis(enum.Enum):
    """The axis a rotation turns about."""

    X = "x"
    Y = "y"
    Z = "z"


def rotate_pair(a: float, b: float, angle: float) -> tuple[float, float]:
    """Rotate the coordinate pair (a, b) by ``angle`` radians."""
    cos, sin = math.cos(angle), math.sin(angle)
    return a * cos - b * sin, b * cos + a * sin


def _rotate_point(point: Point, axis: Axis, angle: float) -> Point:
    if axis is Axis.X:
        y, z = rotate_pair(point.y, point.z, angle)
        return replace(point, y=y, z=z)
    if axis is Axis.Y:
        x, z = rotate_pair(point.x, point.z, angle)
        return replace(point, x=x, z=z)
    x, y = rotate_pair(point.x, point.y, angle)
    return replace(point, x=x, y=y)


def rotate_grid(
    grid: Sequence[Sequence[Point]], axis: Optional[Axis], angle: float
) -> Grid:
    """Return a new grid with every point rotated about ``axis``.

    With no axis the points are returned unchanged.
    """
    if axis is None:
        return [list(row) for row in grid]
    return [[_rotate_point(point, axis, angle) for point in row] for row in grid]