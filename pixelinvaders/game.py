"""Game state and per-frame rules for the invaders game."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Optional, Protocol

from pixelinvaders.numerals_high import get_number
from pixelinvaders.sprites import Drawing, get_bullet, get_invader, get_player

WIDTH = 480
HEIGHT = 450

PLAYER_SPEED = 4
BULLET_SPEED = 8
TIME_TO_SHOOT = 60
START_LIVES = 3

COLUMNS = 12
ROWS = 4
INVADER_SPACING = 30
INVADER_HITBOX = 24
PLAYER_HITBOX = 24
INVADER_START = (30, 30)
INVADER_MIN_X = 10
INVADER_STEP_DOWN = 10


class RandomSource(Protocol):
    """Anything that can pick an integer from a range, like ``random.Random``."""

    def randrange(self, stop: int) -> int: ...


def from_rgb(r: int, g: int, b: int) -> int:
    """Pack three 8-bit channels into one 0xRRGGBB integer."""
    for channel in (r, g, b):
        if not 0 <= channel <= 255:
            raise ValueError(f"colour channel {channel} is outside 0..255")
    return (r << 16) | (g << 8) | b


def insert_drawing(buffer: list[int], x: int, y: int, drawing: Drawing) -> None:
    """Copy ``drawing`` into a WIDTH-wide ``buffer`` with its top-left at (x, y).

    Pixels that fall outside the buffer are dropped.
    """
    size = len(buffer)
    for row in range(drawing.height):
        start = (y + row) * WIDTH + x
        line = drawing.pixels[row * drawing.width:(row + 1) * drawing.width]
        for offset, pixel in enumerate(line):
            index = start + offset
            if 0 <= index < size:
                buffer[index] = pixel


@dataclass(frozen=True)
class Controls:
    """The player's input for one frame."""

    fire: bool = False
    left: bool = False
    right: bool = False


def _blank() -> list[int]:
    return [0] * (WIDTH * HEIGHT)


class Game:
    """One running game; call :meth:`step` once per frame."""

    def __init__(self, rng: Optional[RandomSource] = None) -> None:
        self.rng: RandomSource = rng if rng is not None else random.Random()
        self.buffer = _blank()
        self.invader_speed = 1
        self.time = 0
        self.lives = START_LIVES
        self.iteration = 1
        self.score = 0
        self.invader_pos: tuple[int, int] = INVADER_START
        self.player_pos: tuple[int, int] = (WIDTH // 2, HEIGHT - 50)
        self.bullets: list[tuple[int, int]] = []
        self.invader_bullets: list[tuple[int, int]] = []
        self.invaders = self._full_fleet()
        self.finished = False

    @staticmethod
    def _full_fleet() -> list[list[bool]]:
        return [[True] * ROWS for _ in range(COLUMNS)]

    def _invader_origin(self, column: int, row: int) -> tuple[int, int]:
        x, y = self.invader_pos
        return x + column * INVADER_SPACING, y + row * INVADER_SPACING

    def _draw_number(self, text: str, x: int, y: int) -> None:
        digit_width = get_number("0").width
        for position, char in enumerate(text):
            insert_drawing(self.buffer, x + position * digit_width, y, get_number(char))

    def _draw_game_over(self) -> None:
        self.buffer = _blank()
        text = str(self.score)
        digit_width = get_number("0").width
        x = WIDTH // 2 - digit_width * len(text) // 2
        self._draw_number(text, x, WIDTH // 2)
        self.finished = True

    def _move_invaders(self) -> None:
        x, y = self.invader_pos
        x = max(x + self.invader_speed, INVADER_MIN_X)
        if x > WIDTH - COLUMNS * INVADER_SPACING or x == INVADER_MIN_X:
            self.invader_speed = -self.invader_speed
            y += INVADER_STEP_DOWN
        self.invader_pos = (x, y)

    def _invaders_shoot(self) -> None:
        if self.time % (TIME_TO_SHOOT // self.iteration) != 0:
            return
        column = self.rng.randrange(256) % COLUMNS
        for row in reversed(range(ROWS)):
            if self.invaders[column][row]:
                self.invader_bullets.append(self._invader_origin(column, row))
                break

    def _bullet_hits_invader(self, bullet: tuple[int, int]) -> bool:
        bx, by = bullet
        for column in range(COLUMNS):
            for row in range(ROWS):
                ix, iy = self._invader_origin(column, row)
                if (
                    self.invaders[column][row]
                    and ix <= bx <= ix + INVADER_HITBOX
                    and iy <= by <= iy + INVADER_HITBOX
                ):
                    self.invaders[column][row] = False
                    self.score += self.iteration * 10
                    return True
        return False

    def _hits_player(self, bullet: tuple[int, int]) -> bool:
        bx, by = bullet
        px, py = self.player_pos
        return px <= bx <= px + PLAYER_HITBOX and py <= by <= py + PLAYER_HITBOX

    def step(self, controls: Controls) -> list[int]:
        """Advance the game by one frame and return the frame's pixels."""
        if self.lives == 0:
            if not self.finished:
                self._draw_game_over()
            return self.buffer

        self.buffer = _blank()
        bullet = get_bullet()
        player = get_player()

        self.bullets = [(x, y - BULLET_SPEED) for x, y in self.bullets if y - BULLET_SPEED > 0]
        for x, y in self.bullets:
            insert_drawing(self.buffer, x + player.width // 2, y, bullet)

        for x, y in self.invader_bullets:
            insert_drawing(self.buffer, x, y, bullet)
        self.invader_bullets = [
            (x, y + BULLET_SPEED) for x, y in self.invader_bullets if y + BULLET_SPEED < HEIGHT
        ]

        insert_drawing(self.buffer, *self.player_pos, player)

        self._move_invaders()
        self._invaders_shoot()

        invader = get_invader()
        for column in range(COLUMNS):
            for row in range(ROWS):
                if self.invaders[column][row]:
                    insert_drawing(self.buffer, *self._invader_origin(column, row), invader)

        self.bullets = [b for b in self.bullets if not self._bullet_hits_invader(b)]

        for i in range(self.lives):
            insert_drawing(self.buffer, WIDTH - (40 + i * 30), 10, player)

        self._draw_number(str(self.score), 10, 10)

        remaining = []
        for shot in self.invader_bullets:
            if self._hits_player(shot):
                self.lives = max(self.lives - 1, 0)
            else:
                remaining.append(shot)
        self.invader_bullets = remaining

        if not any(alive for column in self.invaders for alive in column):
            self.invaders = self._full_fleet()
            self.invader_pos = INVADER_START
            self.bullets = []
            self.iteration += 1

        px, py = self.player_pos
        if controls.fire:
            self.bullets.append((px, py))
        if controls.left and px > 0:
            px -= PLAYER_SPEED
        if controls.right and px < WIDTH - player.width:
            px += PLAYER_SPEED
        self.player_pos = (px, py)

        self.time += 1
        return self.buffer