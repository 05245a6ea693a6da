"""Reading height maps into grids of points."""

from __future__ import annotations

import os
import re
from typing import Union

from wirefdf.geometry import Grid, Point

_LEADING_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?\d+)")


class MapError(ValueError):
    """Raised when a map cannot be read or is malformed."""


def _atoi(word: str) -> int:
    match = _LEADING_INT.match(word)
    return int(match.group(1)) if match else 0


def _lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def _words(line: str) -> list[str]:
    return [word for word in line.split(" ") if word]


def parse_map(text: str) -> Grid:
    """Parse map text into rows of points centred on the origin.

    The number of columns is taken from the first line; each value gives
    the negated height of its point.
    """
    lines = _lines(text)
    if not lines:
        return []
    rows = len(lines)
    columns = len(_words(lines[0]))
    grid: Grid = []
    for row, line in enumerate(lines):
        words = _words(line)
        if len(words) < columns:
            raise MapError(
                f"line {row + 1} has {len(words)} values, expected {columns}"
            )
        grid.append(
            [
                Point(
                    x=float(column - columns // 2),
                    y=float(row - rows // 2),
                    z=float(-_atoi(word)),
                )
                for column, word in enumerate(words[:columns])
            ]
        )
    return grid


def read_map(path: Union[str, os.PathLike]) -> Grid:
    """Read and parse the map file at ``path``."""
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            text = handle.read()
    except OSError as exc:
        raise MapError(f"cannot read map {os.fspath(path)!r}: {exc}") from exc
    return parse_map(text)