import dataclasses

import pytest

from pixelinvaders.numerals_low import (
    get_four,
    get_one,
    get_three,
    get_two,
    get_zero,
)
from pixelinvaders.sprites import Drawing


def test_digit_is_fourteen_square():
    drawings = [get_zero(), get_one(), get_two(), get_three(), get_four()]
    for drawing in drawings:
        assert (drawing.width, drawing.height) == (14, 14)
        assert len(drawing.pixels) == drawing.width * drawing.height


def test_pixels_are_24_bit_colours():
    drawings = [get_zero(), get_one(), get_two(), get_three(), get_four()]
    for drawing in drawings:
        assert all(0 <= pixel <= 0xFFFFFF for pixel in drawing.pixels)


@pytest.mark.parametrize(
    "factory, prefix",
    [
        (get_zero, (0, 986636, 8682856)),
        (get_one, (0, 0, 6249034)),
        (get_two, (15720631, 15325356, 15325356)),
        (get_three, (15589300, 15325356, 15325356)),
        (get_four, (8879459, 15523250, 15325356)),
    ],
)
def test_repeated_calls_keep_source_pixels(factory, prefix):
    for _ in range(3):
        drawing = factory()
        assert tuple(drawing.pixels[:3]) == prefix
        assert len(drawing.pixels) == 196


def test_digit_is_immutable():
    drawings = [get_zero(), get_one(), get_two(), get_three(), get_four()]
    for drawing in drawings:
        with pytest.raises(dataclasses.FrozenInstanceError):
            drawing.width = 3
        assert drawing.width == 14


def test_digits_are_all_different():
    images = [
        get_zero().pixels,
        get_one().pixels,
        get_two().pixels,
        get_three().pixels,
        get_four().pixels,
    ]
    assert len(set(images)) == len(images)


def test_zero_corners():
    pixels = get_zero().pixels
    assert pixels[0] == 0
    assert pixels[-1] == 526086


def test_one_ends_with_source_values():
    pixels = get_one().pixels
    assert pixels[2] == 6249034
    assert pixels[-1] == 5061919


def test_two_first_pixel():
    assert get_two().pixels[0] == 15720631


def test_three_bottom_row_mostly_fill():
    drawing = get_three()
    bottom = drawing.pixels[-drawing.width:]
    assert bottom[0] == 6378296
    assert bottom[1:12] == (9073478,) * 11


def test_four_bottom_right_is_blank():
    drawing = get_four()
    assert drawing.pixels[-2:] == (0, 0)
    assert drawing.pixels[0] == 8879459


def test_digit_matches_rebuilt_drawing():
    zero = get_zero()
    rebuilt = Drawing(width=zero.width, height=zero.height, pixels=list(zero.pixels))
    assert rebuilt == zero