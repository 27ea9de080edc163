"""Layout of the on-screen move counter drawn in the top wall row."""

from __future__ import annotations

from heistgrid.digits import (
    COUNTER_SPACING,
    COUNTER_WIDTH,
    COUNTER_X_OFFSET,
    COUNTER_Y_OFFSET,
    Pixel,
    digit_pixels,
)
from heistgrid.gamemap import SPRITE_SIZE


def counter_positions(moves: int, map_width: int) -> list[tuple[int, int, int]]:
    """Return (digit, x, y) for each digit of ``moves``, most significant first.

    The last digit is right-aligned against the right edge of the window,
    the others follow to its left.
    """
    if moves < 0:
        raise ValueError(f"move count cannot be negative: {moves}")
    digits = str(moves)
    right = map_width * SPRITE_SIZE - COUNTER_X_OFFSET - COUNTER_WIDTH
    step = COUNTER_SPACING + COUNTER_WIDTH
    last = len(digits) - 1
    return [
        (int(digit), right - step * (last - place), COUNTER_Y_OFFSET)
        for place, digit in enumerate(digits)
    ]


def counter_pixels(moves: int, map_width: int) -> frozenset[Pixel]:
    """Return every pixel the counter for ``moves`` lights up."""
    pixels: set[Pixel] = set()
    for digit, x, y in counter_positions(moves, map_width):
        pixels |= digit_pixels(digit, x, y)
    return frozenset(pixels)