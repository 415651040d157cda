"""Conversion of 0xRRGGBB colours to pixel values for a display visual."""

from __future__ import annotations

_CHANNEL_BITS = 16


def _mask_shift(mask: int) -> tuple[int, int]:
    """Return the offset of the lowest set bit and the width of that run of bits."""
    if mask <= 0:
        raise ValueError(f"colour mask must be a positive integer, got {mask!r}")
    offset = (mask & -mask).bit_length() - 1
    mask >>= offset
    width = 0
    while mask & 1:
        mask >>= 1
        width += 1
    return offset, width


def rgb_shifts(red_mask: int, green_mask: int, blue_mask: int) -> tuple[int, ...]:
    """Return (red offset, red width, green offset, green width, blue offset, blue width)."""
    shifts: list[int] = []
    for mask in (red_mask, green_mask, blue_mask):
        shifts.extend(_mask_shift(mask))
    return tuple(shifts)


def _scale(channel: int, width: int, offset: int) -> int:
    drop = _CHANNEL_BITS - width
    value = channel >> drop if drop >= 0 else channel << -drop
    return value << offset


def _to_c_int(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value & 0x80000000 else value


def get_good_color(color: int, depth: int, shifts: tuple[int, ...]) -> int:
    """Return the pixel value of ``color`` for a visual of ``depth`` bits.

    Visuals of 24 bits or more take the colour unchanged; shallower ones pack
    each channel into the bit field described by ``shifts``.
    """
    if depth >= 24:
        return color
    if len(shifts) != 6:
        raise ValueError("shifts must hold six values")
    red = (color >> 8) & 0xFF00
    green = color & 0xFF00
    blue = (color << 8) & 0xFF00
    red_off, red_width, green_off, green_width, blue_off, blue_width = shifts
    pixel = (
        _scale(red, red_width, red_off)
        + _scale(green, green_width, green_off)
        + _scale(blue, blue_width, blue_off)
    )
    return _to_c_int(pixel)