"""Colour conversion for the pixel format of a true-colour visual."""

from __future__ import annotations

Shifts = tuple[int, int, int, int, int, int]


def _mask_layout(mask: int) -> tuple[int, int]:
    """Return (offset, width) of the run of set bits in a channel mask."""
    if mask <= 0:
        raise ValueError(f"channel mask must be a positive integer, got {mask!r}")
    offset = (mask & -mask).bit_length() - 1
    shifted = mask >> offset
    width = (~shifted & (shifted + 1)).bit_length() - 1
    return offset, width


def rgb_shifts(red_mask: int, green_mask: int, blue_mask: int) -> Shifts:
    """Return (red offset, red bits, green offset, green bits, blue offset, blue bits).

    Each offset is the number of zero bits below the channel and each bit
    count the width of the run of ones that follows.
    """
    red = _mask_layout(red_mask)
    green = _mask_layout(green_mask)
    blue = _mask_layout(blue_mask)
    return (*red, *green, *blue)


def good_color(color: int, depth: int, shifts: Shifts) -> int:
    """Convert a 0xRRGGBB colour to a pixel value for a visual.

    Visuals of depth 24 or more take the colour unchanged; shallower ones
    pack the top bits of each channel at the offsets given by ``shifts``.
    """
    if depth >= 24:
        return color
    red_offset, red_bits, green_offset, green_bits, blue_offset, blue_bits = shifts
    red = (color >> 8) & 0xFF00
    green = color & 0xFF00
    blue = (color << 8) & 0xFF00
    return (
        ((red >> (16 - red_bits)) << red_offset)
        + ((green >> (16 - green_bits)) << green_offset)
        + ((blue >> (16 - blue_bits)) << blue_offset)
    )