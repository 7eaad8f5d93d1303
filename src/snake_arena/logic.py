from __future__ import annotations

import enum
from collections import namedtuple
from collections.abc import Collection

from .grid import Grid
from .state import Cell, Functor


class Outcome(enum.Enum):
    NONE = "none"
    GREW = "grew"
    ATE = "ate"
    GAME_OVER = "game_over"


TickResult = namedtuple("TickResult", ["outcome", "food", "reason"], defaults=(None, None))
# outcome: Outcome
# food: Cell | None, the cell that was eaten (ATE only).
# reason: str | None, "wall" or "self" (GAME_OVER only).


def check_wall(result: TickResult, head: Cell, grid: Grid) -> TickResult:
    if result.outcome is Outcome.GAME_OVER or grid.contains(head):
        return result
    return TickResult(Outcome.GAME_OVER, reason="wall")


def check_self(result: TickResult, head: Cell, body: Collection[Cell]) -> TickResult:
    if result.outcome is Outcome.GAME_OVER or head not in body:
        return result
    return TickResult(Outcome.GAME_OVER, reason="self")


def check_food(result: TickResult, head: Cell, food: Cell | None) -> TickResult:
    if result.outcome is Outcome.GAME_OVER or food is None or head != food:
        return result
    return TickResult(Outcome.ATE, food=food)


def resolve_move(
    head: Cell,
    body: Collection[Cell],
    grid: Grid,
    food: Cell | None,
    grew: bool = False,
) -> TickResult:
    """Classify a completed move.

    ``body`` is every cell the snake still occupies besides ``head``, so a
    tail that has just moved away is not in it. A fatal collision wins over
    eating; eating wins over reporting growth.
    """
    start = TickResult(Outcome.GREW if grew else Outcome.NONE)
    return (
        Functor(start)
        .map(lambda r: check_wall(r, head, grid))
        .map(lambda r: check_self(r, head, body))
        .map(lambda r: check_food(r, head, food))
        .get()
    )
