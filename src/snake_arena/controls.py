from __future__ import annotations

import pygame

from .state import Direction, InputFrame

# Checked in this order; the first held key wins.
DIRECTION_KEYS = (
    (Direction.LEFT, (pygame.K_LEFT, pygame.K_a)),
    (Direction.DOWN, (pygame.K_DOWN, pygame.K_s)),
    (Direction.UP, (pygame.K_UP, pygame.K_w)),
    (Direction.RIGHT, (pygame.K_RIGHT, pygame.K_d)),
)
PAUSE_KEYS = (pygame.K_p,)
RESTART_KEYS = (pygame.K_SPACE,)
QUIT_KEYS = (pygame.K_ESCAPE, pygame.K_q)


def held_direction(pressed) -> Direction | None:
    for direction, keys in DIRECTION_KEYS:
        if any(pressed[k] for k in keys):
            return direction
    return None


def read_input(events, pressed) -> InputFrame:
    """Build one frame of input from this frame's events and the held keys.

    ``pressed`` is anything indexable by key code, normally the result of
    ``pygame.key.get_pressed()``.
    """
    pause = False
    restart = False
    for event in events:
        if event.type != pygame.KEYDOWN:
            continue
        if event.key in PAUSE_KEYS:
            pause = True
        elif event.key in RESTART_KEYS:
            restart = True
    return InputFrame(direction=held_direction(pressed), pause=pause, restart=restart)


def wants_quit(events) -> bool:
    for event in events:
        if event.type == pygame.QUIT:
            return True
        if event.type == pygame.KEYDOWN and event.key in QUIT_KEYS:
            return True
    return False
