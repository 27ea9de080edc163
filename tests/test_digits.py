import pytest

from heistgrid.digits import (
    COUNTER_HEIGHT,
    COUNTER_WIDTH,
    digit_pixels,
)

ALL_DIGITS = range(10)


@pytest.mark.parametrize("digit", ALL_DIGITS)
def test_translation_moves_every_pixel(digit):
    origin = digit_pixels(digit, 0, 0)
    moved = digit_pixels(digit, 37, 11)
    assert moved == {(px + 37, py + 11) for px, py in origin}


@pytest.mark.parametrize("digit", ALL_DIGITS)
def test_pixels_stay_inside_the_cell(digit):
    pixels = digit_pixels(digit, 100, 200)
    assert pixels
    assert all(100 <= px < 100 + COUNTER_WIDTH for px, _ in pixels)
    assert all(200 <= py < 200 + COUNTER_HEIGHT for _, py in pixels)


def test_all_digits_have_distinct_shapes():
    shapes = {digit_pixels(d, 0, 0) for d in ALL_DIGITS}
    assert len(shapes) == 10


def test_eight_fills_the_whole_cell_extent():
    pixels = digit_pixels(8, 0, 0)
    xs = [px for px, _ in pixels]
    ys = [py for _, py in pixels]
    assert max(xs) - min(xs) + 1 == COUNTER_WIDTH
    assert max(ys) - min(ys) + 1 == COUNTER_HEIGHT


@pytest.mark.parametrize("digit", [0, 2, 3, 4, 5, 6, 7, 9])
def test_eight_covers_other_digits(digit):
    assert digit_pixels(digit, 0, 0) <= digit_pixels(8, 0, 0)


def test_one_is_not_covered_by_eight():
    assert not digit_pixels(1, 0, 0) <= digit_pixels(8, 0, 0)


@pytest.mark.parametrize("pair", [(0, 3), (6, 9), (5, 2)])
def test_pairs_combine_to_eight(pair):
    a, b = pair
    assert digit_pixels(a, 0, 0) | digit_pixels(b, 0, 0) == digit_pixels(8, 0, 0)


def test_zero_has_hollow_centre_eight_does_not():
    centre = (COUNTER_WIDTH // 2, COUNTER_HEIGHT // 2)
    assert centre not in digit_pixels(0, 0, 0)
    assert centre in digit_pixels(8, 0, 0)


def test_one_lacks_top_left_corner():
    assert (0, 0) not in digit_pixels(1, 0, 0)
    assert (0, 0) in digit_pixels(4, 0, 0)


@pytest.mark.parametrize("bad", [-1, 10, 42, True, "3", 2.0])
def test_invalid_digit_raises(bad):
    with pytest.raises(ValueError):
        digit_pixels(bad, 0, 0)