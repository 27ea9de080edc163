"""Pixel shapes of the digits used by the on-screen move counter."""

from __future__ import annotations

from collections.abc import Callable, Iterator

# Look of the counter, all values in pixels.
COUNTER_COLOR = 10075334
COUNTER_WIDTH = 21
COUNTER_HEIGHT = 48
COUNTER_Y_OFFSET = 8
COUNTER_X_OFFSET = 8
COUNTER_SPACING = 10
# Thickness of vertical strokes.
COUNTER_WIDE_DEPTH = 6
# Thickness of horizontal strokes.
COUNTER_HIGH_DEPTH = 3

Pixel = tuple[int, int]


def _hor_line(x: int, y: int, length: int) -> Iterator[Pixel]:
    for i in range(length):
        yield x + i, y


def _ver_line(x: int, y: int, length: int) -> Iterator[Pixel]:
    for i in range(length):
        yield x, y + i


def _top_bar(x: int, y: int) -> Iterator[Pixel]:
    for i in range(COUNTER_HIGH_DEPTH):
        yield from _hor_line(x, y + i, COUNTER_WIDTH)


def _middle_bar(x: int, y: int, start: int = 0) -> Iterator[Pixel]:
    top = y + COUNTER_HEIGHT // 2 - COUNTER_HIGH_DEPTH // 2
    for i in range(COUNTER_HIGH_DEPTH):
        yield from _hor_line(x + start, top + i, COUNTER_WIDTH - start)


def _bottom_bar(x: int, y: int) -> Iterator[Pixel]:
    for i in range(COUNTER_HIGH_DEPTH):
        yield from _hor_line(x, y + COUNTER_HEIGHT - i - 1, COUNTER_WIDTH)


def _left(x: int, y: int, part: str) -> Iterator[Pixel]:
    top, length = _span(y, part)
    for i in range(COUNTER_WIDE_DEPTH):
        yield from _ver_line(x + i, top, length)


def _right(x: int, y: int, part: str) -> Iterator[Pixel]:
    top, length = _span(y, part)
    for i in range(COUNTER_WIDE_DEPTH):
        yield from _ver_line(x + COUNTER_WIDTH - 1 - i, top, length)


def _span(y: int, part: str) -> tuple[int, int]:
    half = COUNTER_HEIGHT // 2
    if part == "full":
        return y, COUNTER_HEIGHT
    if part == "upper":
        return y, half
    return y + half, half


def _zero(x: int, y: int) -> Iterator[Pixel]:
    yield from _top_bar(x, y)
    yield from _bottom_bar(x, y)
    yield from _left(x, y, "full")
    yield from _right(x, y, "full")


def _one(x: int, y: int) -> Iterator[Pixel]:
    half = COUNTER_WIDTH // 2
    for i in range(COUNTER_HIGH_DEPTH):
        yield from _hor_line(x + half, y + i, half)
    for i in range(COUNTER_WIDE_DEPTH):
        yield from _ver_line(x + half * 2 - i - 1, y, COUNTER_HEIGHT)


def _two(x: int, y: int) -> Iterator[Pixel]:
    yield from _top_bar(x, y)
    yield from _middle_bar(x, y)
    yield from _bottom_bar(x, y)
    yield from _right(x, y, "upper")
    yield from _left(x, y, "lower")


def _three(x: int, y: int) -> Iterator[Pixel]:
    yield from _top_bar(x, y)
    yield from _middle_bar(x, y)
    yield from _bottom_bar(x, y)
    yield from _right(x, y, "full")


def _four(x: int, y: int) -> Iterator[Pixel]:
    yield from _middle_bar(x, y)
    yield from _right(x, y, "full")
    yield from _left(x, y, "upper")


def _five(x: int, y: int) -> Iterator[Pixel]:
    yield from _top_bar(x, y)
    yield from _middle_bar(x, y)
    yield from _bottom_bar(x, y)
    yield from _left(x, y, "upper")
    yield from _right(x, y, "lower")


def _six(x: int, y: int) -> Iterator[Pixel]:
    yield from _top_bar(x, y)
    yield from _middle_bar(x, y)
    yield from _bottom_bar(x, y)
    yield from _left(x, y, "full")
    yield from _right(x, y, "lower")


def _seven(x: int, y: int) -> Iterator[Pixel]:
    yield from _top_bar(x, y)
    yield from _middle_bar(x, y, start=COUNTER_WIDTH // 2)
    yield from _right(x, y, "full")


def _eight(x: int, y: int) -> Iterator[Pixel]:
    yield from _top_bar(x, y)
    yield from _middle_bar(x, y)
    yield from _bottom_bar(x, y)
    yield from _left(x, y, "full")
    yield from _right(x, y, "full")


def _nine(x: int, y: int) -> Iterator[Pixel]:
    yield from _top_bar(x, y)
    yield from _middle_bar(x, y)
    yield from _bottom_bar(x, y)
    yield from _left(x, y, "upper")
    yield from _right(x, y, "full")


_SHAPES: tuple[Callable[[int, int], Iterator[Pixel]], ...] = (
    _zero,
    _one,
    _two,
    _three,
    _four,
    _five,
    _six,
    _seven,
    _eight,
    _nine,
)


def digit_pixels(digit: int, x: int, y: int) -> frozenset[Pixel]:
    """Return the pixels that draw ``digit`` with its top left corner at (x, y)."""
    if isinstance(digit, bool) or not isinstance(digit, int) or not 0 <= digit <= 9:
        raise ValueError(f"not a single decimal digit: {digit!r}")
    return frozenset(_SHAPES[digit](x, y))