"""Pixel sprites for the bullet, the player's cannon and the invaders."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from functools import lru_cache

_BLANK = 0x000000
_WHITE = 0xFFFFFF
_GREEN = 0x00FF00
_INVADER_EDGE = 0x23B140
_INVADER_BODY = 0x48FF4F


@dataclass(frozen=True)
class Drawing:
    """A rectangular image stored row by row as 0xRRGGBB integers."""

    width: int
    height: int
    pixels: tuple[int, ...]

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("drawing dimensions must not be negative")
        object.__setattr__(self, "pixels", tuple(self.pixels))
        if len(self.pixels) != self.width * self.height:
            raise ValueError(
                f"expected {self.width * self.height} pixels, got {len(self.pixels)}"
            )


def _from_art(rows: Iterable[str], palette: Mapping[str, int]) -> Drawing:
    """Build a drawing from rows of characters mapped through ``palette``."""
    rows = list(rows)
    width = len(rows[0]) if rows else 0
    if any(len(row) != width for row in rows):
        raise ValueError("all rows of a drawing must have the same width")
    pixels = tuple(palette[char] for row in rows for char in row)
    return Drawing(width=width, height=len(rows), pixels=pixels)


_PLAYER_ART = (
    ["...........##..........."] * 2
    + [".........######........."] * 6
    + ["..####################.."] * 2
    + ["########################"] * 8
)

_INVADER_ART = (
    ["....aa..........aa...."] * 2
    + ["......bb......bb......"] * 2
    + ["....bbbbbbbbbbbbbb...."] * 2
    + ["..bbbb..bbbbbb..bbbb.."] * 2
    + ["bbbbbbbbbbbbbbbbbbbbbb"] * 2
    + ["bb..bbbbbbbbbbbbbb..bb"] * 2
    + ["bb..bb..........bb..bb"] * 2
    + ["......aaaa..aaaa......"] * 2
)


@lru_cache(maxsize=None)
def get_bullet() -> Drawing:
    """Return the white 2x12 bullet."""
    return Drawing(width=2, height=12, pixels=(_WHITE,) * (2 * 12))


@lru_cache(maxsize=None)
def get_player() -> Drawing:
    """Return the green 24x18 player cannon."""
    return _from_art(_PLAYER_ART, {".": _BLANK, "#": _GREEN})


@lru_cache(maxsize=None)
def get_invader() -> Drawing:
    """Return the 22x16 invader."""
    return _from_art(
        _INVADER_ART, {".": _BLANK, "a": _INVADER_EDGE, "b": _INVADER_BODY}
    )