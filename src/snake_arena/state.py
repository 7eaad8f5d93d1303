from __future__ import annotations

import enum
from collections import namedtuple

Cell = namedtuple("Cell", ["x", "y"])
# Grid coordinates, y grows upwards.


def add_cells(a: tuple[int, int], b: tuple[int, int]) -> Cell:
    return Cell(a[0] + b[0], a[1] + b[1])


class Direction(enum.Enum):
    """Cardinal directions; the value is the (dx, dy) step of one move."""

    LEFT = (-1, 0)
    UP = (0, 1)
    RIGHT = (1, 0)
    DOWN = (0, -1)

    @property
    def delta(self) -> Cell:
        return Cell(*self.value)

    def opposite(self) -> Direction:
        return _OPPOSITES[self]

    @classmethod
    def parse(cls, name: str) -> Direction:
        try:
            return cls[name.upper()]
        except KeyError:
            raise ValueError(f"unknown direction: {name}") from None


_OPPOSITES = {
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
}


class Phase(enum.Enum):
    PLAYING = "playing"
    PAUSED = "paused"
    GAME_OVER = "game_over"


class Role(enum.Enum):
    HEAD = "head"
    BODY = "body"


InputFrame = namedtuple("InputFrame", ["direction", "pause", "restart"], defaults=(None, False, False))
# direction: Direction | None, the direction currently held down.
# pause: bool, pause key went down this frame.
# restart: bool, restart key went down this frame.

Snapshot = namedtuple("Snapshot", ["segments", "food", "score", "phase"])
# segments: tuple[(Cell, Role), ...], head first.
# food: Cell | None
# score: int
# phase: Phase


class Functor:
    """Tiny helper for chaining state transforms."""

    def __init__(self, value):
        self.value = value

    def map(self, func):
        return Functor(func(self.value))

    def get(self):
        return self.value
