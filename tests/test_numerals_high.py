import dataclasses

import pytest

from pixelinvaders.numerals_high import (
    get_eight,
    get_five,
    get_nine,
    get_number,
    get_seven,
    get_six,
)
from pixelinvaders.numerals_low import (
    DIGIT_SIZE,
    get_four,
    get_one,
    get_three,
    get_two,
    get_zero,
)


def test_digit_is_square_of_digit_size():
    drawings = [get_five(), get_six(), get_seven(), get_eight(), get_nine()]
    for drawing in drawings:
        assert (drawing.width, drawing.height) == (DIGIT_SIZE, DIGIT_SIZE)
        assert len(drawing.pixels) == DIGIT_SIZE * DIGIT_SIZE


def test_pixels_are_24_bit_colours():
    drawings = [get_five(), get_six(), get_seven(), get_eight(), get_nine()]
    for drawing in drawings:
        assert all(0 <= pixel <= 0xFFFFFF for pixel in drawing.pixels)


@pytest.mark.parametrize(
    "factory, prefix",
    [
        (get_five, (10590074, 15457200)),
        (get_six, (12366224, 15391406)),
        (get_seven, (14207911, 15325356)),
        (get_eight, (15852731, 15325356)),
        (get_nine, (15786681, 15325356)),
    ],
)
def test_repeated_calls_keep_source_pixels(factory, prefix):
    for _ in range(3):
        drawing = factory()
        assert tuple(drawing.pixels[:2]) == prefix
        assert len(drawing.pixels) == DIGIT_SIZE * DIGIT_SIZE


def test_drawing_is_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        get_five().width = 3
    assert get_five().width == DIGIT_SIZE


def test_pinned_corner_pixels():
    assert get_five().pixels[0] == 10590074
    assert get_six().pixels[0] == 12366224
    assert get_seven().pixels[0] == 14207911
    assert get_eight().pixels[-1] == 5324574
    assert get_nine().pixels[-1] == 4141077


def test_seven_has_blank_lower_right_area():
    seven = get_seven()
    row = seven.pixels[12 * DIGIT_SIZE:13 * DIGIT_SIZE]
    assert row[8:] == (0,) * 6


def test_get_number_maps_each_digit():
    expected = [
        get_zero(),
        get_one(),
        get_two(),
        get_three(),
        get_four(),
        get_five(),
        get_six(),
        get_seven(),
        get_eight(),
        get_nine(),
    ]
    for index, drawing in enumerate(expected):
        assert get_number(str(index)) == drawing


@pytest.mark.parametrize("char", ["x", "-", " ", ""])
def test_get_number_falls_back_to_zero(char):
    assert get_number(char) == get_zero()


def test_all_digits_are_distinct():
    drawings = [get_number(str(d)).pixels for d in range(10)]
    assert len(set(drawings)) == 10


def test_digits_of_a_score_have_common_width():
    widths = {get_number(c).width for c in str(1234567890)}
    assert widths == {DIGIT_SIZE}