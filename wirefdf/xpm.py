"""Reading XPM images into rows of colour values."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from typing import Iterable, Optional, Union

from wirefdf.colors import NONE_COLOR, lookup_color

_LEADING_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?\d+)")
_LEADING_HEX = re.compile(
    r"[ \t\n\v\f\r]*([+-]?)(?:0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]*)"
)
_WORD_SEPARATORS = re.compile(r"[ \t]+")
_QUOTED = re.compile(r'"([^"]*)"')


class XpmError(ValueError):
    """Raised when XPM data cannot be read or is malformed."""


@dataclass
class XpmImage:
    """A decoded image; each pixel is 0xRRGGBB, or None where transparent."""

    width: int
    height: int
    pixels: list[list[Optional[int]]]

    @property
    def has_transparency(self) -> bool:
        """Whether any pixel is transparent."""
        return any(pixel is None for row in self.pixels for pixel in row)


def _atoi(word: str) -> int:
    match = _LEADING_INT.match(word)
    return int(match.group(1)) if match else 0


def split_words(text: str) -> list[str]:
    """Split ``text`` into words separated by spaces and tabs."""
    return [word for word in _WORD_SEPARATORS.split(text) if word]


def find_unquoted(text: str, pattern: str) -> int:
    """Return the first index of ``pattern`` outside double quotes, or -1."""
    if not pattern:
        raise ValueError("pattern must not be empty")
    quoted = False
    for index in range(len(text) - len(pattern) + 1):
        if text[index] == '"':
            quoted = not quoted
        if not quoted and text.startswith(pattern, index):
            return index
    return -1


def strip_comments(text: str) -> str:
    """Blank out C-style comments that lie outside quoted strings.

    Comments are replaced by spaces so that the text keeps its length.
    """
    while (begin := find_unquoted(text, "/*")) != -1:
        end = text.find("*/", begin + 2)
        if end == -1:
            raise XpmError(f"unterminated comment at offset {begin}")
        stop = end + 2
        text = text[:begin] + " " * (stop - begin) + text[stop:]
    while (begin := find_unquoted(text, "//")) != -1:
        end = text.find("\n", begin + 2)
        stop = len(text) if end == -1 else end + 1
        text = text[:begin] + " " * (stop - begin) + text[stop:]
    return text


def text_to_rgb(name: str, extra: Optional[str] = None) -> int:
    """Turn an XPM colour value into 0xRRGGBB.

    ``#hex`` values are read as hexadecimal; otherwise ``name`` (joined
    with ``extra`` by a space when given) is looked up among the named
    colours. ``none`` gives the transparent marker; unknown names give 0.
    """
    if name.startswith("#"):
        match = _LEADING_HEX.match(name, 1)
        digits = match.group(2) if match else ""
        if not digits:
            return 0
        value = int(digits, 16)
        return -value if match.group(1) == "-" else value
    if extra:
        name = f"{name} {extra}"
    try:
        return lookup_color(name)
    except KeyError:
        return 0


def parse_xpm(lines: Iterable[str]) -> XpmImage:
    """Decode an XPM image given as its quoted strings, in order."""
    source = iter(lines)

    def next_line(what: str) -> str:
        try:
            return next(source)
        except StopIteration:
            raise XpmError(f"missing {what}") from None

    header = split_words(next_line("header"))
    if len(header) < 4:
        raise XpmError("header needs width, height, colours and characters per pixel")
    width, height, ncolors, cpp = (_atoi(word) for word in header[:4])
    if min(width, height, ncolors, cpp) <= 0:
        raise XpmError(f"invalid header values: {' '.join(header[:4])}")

    # One or two characters per pixel: a later definition replaces an
    # earlier one. Longer keys: the first definition is kept.
    later_wins = cpp <= 2
    palette: dict[str, Optional[int]] = {}
    for _ in range(ncolors):
        line = next_line("colour definition")
        key = line[:cpp]
        if len(key) < cpp:
            raise XpmError(f"colour definition too short: {line!r}")
        words = split_words(line[cpp:])
        try:
            index = words.index("c")
        except ValueError:
            raise XpmError(f"no colour given in definition: {line!r}") from None
        if index + 1 >= len(words):
            raise XpmError(f"no colour given in definition: {line!r}")
        extra = words[index + 2] if index + 2 < len(words) else None
        rgb = text_to_rgb(words[index + 1], extra)
        colour = None if rgb == NONE_COLOR else rgb
        if later_wins:
            palette[key] = colour
        else:
            palette.setdefault(key, colour)

    rows: list[list[Optional[int]]] = []
    for _ in range(height):
        line = next_line("pixel row")
        if len(line) < width * cpp:
            raise XpmError(f"pixel row too short: {line!r}")
        rows.append(
            [palette.get(line[start:start + cpp], 0) for start in range(0, width * cpp, cpp)]
        )
    return XpmImage(width=width, height=height, pixels=rows)


def parse_xpm_text(text: str) -> XpmImage:
    """Decode the contents of an XPM file."""
    return parse_xpm(_QUOTED.findall(strip_comments(text)))


def read_xpm(path: Union[str, os.PathLike]) -> XpmImage:
    """Read and decode the XPM file at ``path``."""
    try:
        with open(path, encoding="latin-1") as handle:
            text = handle.read()
    except OSError as exc:
        raise XpmError(f"cannot read image {os.fspath(path)!r}: {exc}") from exc
    return parse_xpm_text(text)