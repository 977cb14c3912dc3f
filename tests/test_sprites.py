import dataclasses

import pytest

from pixelinvaders.sprites import Drawing, get_bullet, get_invader, get_player

WHITE = 16777215
GREEN = 65280
EDGE = 2339136
BODY = 4783951


def _rows(drawing):
    return [
        drawing.pixels[row * drawing.width:(row + 1) * drawing.width]
        for row in range(drawing.height)
    ]


def test_bullet_dimensions():
    bullet = get_bullet()
    assert (bullet.width, bullet.height) == (2, 12)
    assert len(bullet.pixels) == bullet.width * bullet.height


def test_bullet_is_all_white():
    assert set(get_bullet().pixels) == {WHITE}


def test_player_dimensions():
    player = get_player()
    assert (player.width, player.height) == (24, 18)
    assert len(player.pixels) == player.width * player.height


def test_player_colours():
    assert set(get_player().pixels) == {0, GREEN}


def test_player_is_mirror_symmetric():
    for row in _rows(get_player()):
        assert row == row[::-1]


def test_player_top_and_bottom():
    rows = _rows(get_player())
    assert rows[0][0] == 0
    assert rows[0][11] == GREEN
    assert rows[0][12] == GREEN
    assert set(rows[-1]) == {GREEN}


def test_player_widens_towards_the_bottom():
    counts = [sum(1 for p in row if p == GREEN) for row in _rows(get_player())]
    assert counts == sorted(counts)


def test_invader_dimensions():
    invader = get_invader()
    assert (invader.width, invader.height) == (22, 16)
    assert len(invader.pixels) == invader.width * invader.height


def test_invader_colours():
    assert set(get_invader().pixels) == {0, EDGE, BODY}


def test_invader_is_mirror_symmetric():
    for row in _rows(get_invader()):
        assert row == row[::-1]


def test_invader_rows_come_in_pairs():
    rows = _rows(get_invader())
    for first, second in zip(rows[::2], rows[1::2]):
        assert first == second


def test_invader_antenna_and_feet_use_edge_colour():
    rows = _rows(get_invader())
    assert rows[0][4] == EDGE
    assert rows[0][5] == EDGE
    assert rows[0][0] == 0
    assert set(rows[-1]) == {0, EDGE}
    assert all(BODY not in row for row in (rows[0], rows[1], rows[-2], rows[-1]))


def test_invader_body_row_is_full():
    rows = _rows(get_invader())
    assert set(rows[8]) == {BODY}


def test_sprites_are_stable_between_calls():
    first_player = get_player()
    second_player = get_player()
    assert (second_player.width, second_player.height) == (24, 18)
    assert second_player.pixels == first_player.pixels
    assert second_player.pixels[11] == GREEN

    first_invader = get_invader()
    second_invader = get_invader()
    assert (second_invader.width, second_invader.height) == (22, 16)
    assert second_invader.pixels == first_invader.pixels
    assert second_invader.pixels[4] == EDGE

    first_bullet = get_bullet()
    second_bullet = get_bullet()
    assert second_bullet.pixels == first_bullet.pixels
    assert second_bullet.pixels == (WHITE,) * 24


def test_drawing_accepts_list_pixels():
    drawing = Drawing(width=2, height=1, pixels=[1, 2])
    assert drawing.pixels == (1, 2)


def test_drawing_rejects_wrong_pixel_count():
    with pytest.raises(ValueError):
        Drawing(width=2, height=2, pixels=[0, 0, 0])


def test_drawing_rejects_negative_size():
    with pytest.raises(ValueError):
        Drawing(width=-1, height=2, pixels=[])


def test_drawing_is_immutable():
    drawing = get_bullet()
    with pytest.raises(dataclasses.FrozenInstanceError):
        drawing.width = 5
    assert drawing.width == 2