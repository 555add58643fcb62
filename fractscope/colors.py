"""Palette lookup for escape-time iteration counts."""

from __future__ import annotations

PALETTE: tuple[int, ...] = (
    0x000000,
    0x0000FF,
    0x00FFFF,
    0x8000FF,
    0xFF00FF,
    0xFFFFFF,
)

INSIDE_COLOR = 0x000000


def _channels(color: int) -> tuple[int, int, int]:
    return (color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF


def color_shift(color1: int, color2: int, local_ratio: float) -> int:
    """Blend two 0xRRGGBB colours; ``local_ratio`` 0 gives color1, 1 gives color2."""
    blended = (
        int((1.0 - local_ratio) * first + local_ratio * second) & 0xFF
        for first, second in zip(_channels(color1), _channels(color2))
    )
    red, green, blue = blended
    return (red << 16) | (green << 8) | blue


def get_color(iteration: int, max_iteration: int) -> int:
    """Return the colour for a point that escaped after ``iteration`` steps."""
    if iteration >= max_iteration:
        return INSIDE_COLOR
    steps = len(PALETTE) - 1
    position = iteration / max_iteration * steps
    index = int(position) & 0xFF
    return color_shift(PALETTE[index], PALETTE[index + 1], position - index)