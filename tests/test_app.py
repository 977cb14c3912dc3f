import pytest

from pixelinvaders.app import buffer_to_bytes, main


def test_single_pixel_bytes():
    assert buffer_to_bytes([0xFF0000]) == b"\xff\x00\x00"
    assert buffer_to_bytes([65280]) == b"\x00\xff\x00"


def test_round_trip():
    pixels = [0, 16777215, 65280, 4783951, 2339136]
    data = buffer_to_bytes(pixels)
    assert len(data) == 3 * len(pixels)
    restored = [int.from_bytes(data[i:i + 3], "big") for i in range(0, len(data), 3)]
    assert restored == pixels


def test_pixel_out_of_range_raises():
    with pytest.raises(OverflowError):
        buffer_to_bytes([-1])


def test_help_exits_cleanly():
    with pytest.raises(SystemExit) as info:
        main(["--help"])
    assert info.value.code == 0