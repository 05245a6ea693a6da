"""Converting 0xRRGGBB colours into pixel values for a display visual."""

from __future__ import annotations

from typing import NamedTuple


class RgbShifts(NamedTuple):
    """Position and width, in bits, of each channel inside a pixel value."""

    red_shift: int
    red_bits: int
    green_shift: int
    green_bits: int
    blue_shift: int
    blue_bits: int


def _shift_and_width(mask: int, channel: str) -> tuple[int, int]:
    if mask <= 0:
        raise ValueError(f"{channel} mask must be a positive bit mask, got {mask!r}")
    shift = (mask & -mask).bit_length() - 1
    remaining = mask >> shift
    width = 0
    while remaining & 1:
        remaining >>= 1
        width += 1
    return shift, width


def rgb_shifts(red_mask: int, green_mask: int, blue_mask: int) -> RgbShifts:
    """Work out where each channel lives from the visual's channel masks."""
    red = _shift_and_width(red_mask, "red")
    green = _shift_and_width(green_mask, "green")
    blue = _shift_and_width(blue_mask, "blue")
    return RgbShifts(*red, *green, *blue)


def convert_color(color: int, depth: int, shifts: RgbShifts) -> int:
    """Return the pixel value for ``color`` on a visual of the given depth.

    Visuals of 24 bits or more take the colour unchanged; shallower ones
    keep the top bits of each channel and place them as ``shifts`` says.
    """
    if depth >= 24:
        return color
    red = (color >> 8) & 0xFF00
    green = color & 0xFF00
    blue = (color << 8) & 0xFF00
    channels = (
        (red, shifts.red_shift, shifts.red_bits),
        (green, shifts.green_shift, shifts.green_bits),
        (blue, shifts.blue_shift, shifts.blue_bits),
    )
    pixel = 0
    for value, shift, bits in channels:
        if bits > 16:
            raise ValueError(f"channel of {bits} bits does not fit a 16-bit value")
        pixel += (value >> (16 - bits)) << shift
    return pixel