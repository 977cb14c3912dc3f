"""Window and input loop that runs the game."""

from __future__ import annotations

import argparse
import os
import random
from collections.abc import Iterable, Sequence
from typing import Optional

from pixelinvaders.game import HEIGHT, WIDTH, Controls, Game

TITLE = "Space Invaders"
FPS = 60


def buffer_to_bytes(buffer: Iterable[int]) -> bytes:
    """Turn 0xRRGGBB pixels into packed RGB bytes."""
    return b"".join(pixel.to_bytes(3, "big") for pixel in buffer)


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="pixelinvaders", description="Play space invaders.")
    parser.add_argument("--seed", type=int, default=None, help="seed for the invaders' aim")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open the game window and play until it is closed or Escape is pressed."""
    args = _parse_args(argv)
    os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
    import pygame

    pygame.init()
    try:
        screen = pygame.display.set_mode((WIDTH, HEIGHT))
        pygame.display.set_caption(TITLE)
        clock = pygame.time.Clock()
        game = Game(random.Random(args.seed))
        running = True
        while running:
            fire = False
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key in (pygame.K_SPACE, pygame.K_w):
                    fire = True
            keys = pygame.key.get_pressed()
            if not running or keys[pygame.K_ESCAPE]:
                break
            controls = Controls(
                fire=fire,
                left=bool(keys[pygame.K_LEFT] or keys[pygame.K_a]),
                right=bool(keys[pygame.K_RIGHT] or keys[pygame.K_d]),
            )
            frame = game.step(controls)
            surface = pygame.image.frombuffer(buffer_to_bytes(frame), (WIDTH, HEIGHT), "RGB")
            screen.blit(surface, (0, 0))
            pygame.display.flip()
            clock.tick(FPS)
    finally:
        pygame.quit()
    return 0