# pixelinvaders

A small arcade shooter in a 480×450 window titled "Space Invaders".
Forty-eight invaders, in twelve columns of four, march from side to side and
step down each time they turn. At regular intervals the lowest living
invader in a randomly chosen column drops a bullet. You steer a ship along
the bottom and shoot back.

Clearing a wave brings back a full fleet at its starting position. Each new
wave fires more often than the last, and every invader you hit is worth
10 points times the wave number.

## Installing

```
pip install .
```

This also installs pygame, which provides the window and keyboard input.

## Playing

```
pixelinvaders
```

Use `pixelinvaders --seed N` to fix the random choice of the columns the
invaders shoot from, so a game plays the same way each time.

| Key                | Action        |
|--------------------|---------------|
| Left / A           | move left     |
| Right / D          | move right    |
| Space / W          | fire          |
| Escape             | quit          |

The game runs at 60 frames per second. You start with three lives, shown as
ships in the top right corner, and your score is in the top left. When the
last life is gone, the final score is shown on an otherwise blank screen
until you close the window or press Escape.

## Using the game logic directly

The rules are kept apart from the window, so you can drive the game without
a display:

```python
import random

from pixelinvaders.game import Controls, Game

game = Game(random.Random(0))
frame = game.step(Controls(fire=True))
frame = game.step(Controls(right=True))
print(game.score, game.lives)
```

`Game` takes any object with a `randrange` method, such as
`random.Random`; without one it makes its own. Each call to `Game.step`
moves the game on by one frame and returns the frame as a list of
`0xRRGGBB` integers, one for each pixel, row by row. `Controls` holds the
input for that frame: `fire`, `left` and `right`.

Other pieces you can use on their own:

- `pixelinvaders.game.from_rgb(r, g, b)` packs three channels of 0 to 255
  into one `0xRRGGBB` integer, and raises `ValueError` for a channel out of
  range.
- `pixelinvaders.game.insert_drawing(buffer, x, y, drawing)` copies a
  sprite into a 480-pixel-wide buffer, dropping pixels that fall outside it.
- `pixelinvaders.sprites` has the `Drawing` class and `get_player`,
  `get_invader` and `get_bullet`.
- `pixelinvaders.numerals_high.get_number(c)` returns the 14×14 image of a
  digit character; any other character is drawn as 0. The single digits are
  also available as `get_zero` to `get_four` in
  `pixelinvaders.numerals_low` and `get_five` to `get_nine` in
  `pixelinvaders.numerals_high`.
- `pixelinvaders.app.buffer_to_bytes(buffer)` turns a frame into packed RGB
  bytes.

## What it does not do

There is no sound, no pause, no restart after the game is over, and no
high-score table: scores are not saved anywhere.

## Running the tests

```
pip install ".[test]"
pytest
```