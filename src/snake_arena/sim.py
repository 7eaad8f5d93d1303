from __future__ import annotations

import logging

import numpy as np

from . import config
from .food import FoodSpawner
from .grid import Grid
from .logic import Outcome, TickResult, resolve_move
from .scoreboard import Scoreboard
from .snake import Snake
from .state import Cell, Direction, InputFrame, Phase, Role, Snapshot

logger = logging.getLogger(__name__)


class MoveTimer:
    """Repeating timer that fires once every ``interval`` seconds."""

    def __init__(self, interval: float = config.MOVE_INTERVAL):
        if interval <= 0:
            raise ValueError(f"move interval must be positive, got {interval}")
        self.interval = interval
        self.elapsed = 0.0

    def tick(self, dt: float) -> bool:
        """Add ``dt`` seconds; True if at least one interval completed.

        Several completed intervals still count as a single firing, the
        leftover time carries over to the next call.
        """
        self.elapsed += dt
        if self.elapsed < self.interval:
            return False
        self.elapsed %= self.interval
        return True

    def reset(self) -> None:
        self.elapsed = 0.0


class Simulation:
    """The whole game: one snake, one food, a score and the current phase.

    Call :meth:`step` once per frame with that frame's input and the seconds
    since the previous frame. The snake moves only when the move timer fires
    and only while playing.
    """

    def __init__(
        self,
        width: int = config.ARENA_WIDTH,
        height: int = config.ARENA_HEIGHT,
        move_interval: float = config.MOVE_INTERVAL,
        initial_head: tuple[int, int] = config.INITIAL_HEAD,
        initial_direction: Direction | str = config.INITIAL_DIRECTION,
        initial_length: int = config.INITIAL_LENGTH,
        seed: int | None = None,
    ):
        self.grid = Grid(width, height)
        if isinstance(initial_direction, str):
            initial_direction = Direction.parse(initial_direction)
        self.initial_head = Cell(*initial_head)
        self.initial_direction = initial_direction
        self.initial_length = initial_length
        self.spawner = FoodSpawner(self.grid, rng=np.random.default_rng(seed))
        self.scoreboard = Scoreboard()
        self.timer = MoveTimer(move_interval)
        self.phase = Phase.PLAYING
        self.snake = self._new_snake()
        self.food = self.spawner.spawn(self.snake.cells())

    def _new_snake(self) -> Snake:
        snake = Snake(self.initial_head, self.initial_direction, self.initial_length)
        if not all(self.grid.contains(c) for c in snake.body):
            raise ValueError(f"initial snake {list(snake.body)} does not fit in {self.grid!r}")
        return snake

    @property
    def score(self) -> int:
        return self.scoreboard.score

    def reset(self) -> None:
        """Start over: fresh snake, food, score and timer, phase Playing."""
        self.snake = self._new_snake()
        self.scoreboard.reset()
        self.timer.reset()
        self.food = self.spawner.spawn(self.snake.cells())
        self.phase = Phase.PLAYING

    def toggle_pause(self) -> None:
        if self.phase is Phase.PLAYING:
            self.phase = Phase.PAUSED
            logger.info("Paused.")
        elif self.phase is Phase.PAUSED:
            self.phase = Phase.PLAYING
            logger.info("Resumed.")

    def restart(self) -> bool:
        if self.phase is not Phase.GAME_OVER:
            return False
        self.reset()
        logger.info("Restarted.")
        return True

    def tick(self) -> TickResult:
        """Move the snake one cell and apply the rules for that move."""
        before = len(self.snake)
        new_head, _ = self.snake.advance()
        result = resolve_move(
            new_head,
            self.snake.segments(),
            self.grid,
            self.food,
            grew=len(self.snake) > before,
        )

        if result.outcome is Outcome.GAME_OVER:
            self.phase = Phase.GAME_OVER
            logger.info("Game over (%s) at %s with score %d.", result.reason, new_head, self.score)
        elif result.outcome is Outcome.ATE:
            self.scoreboard.increment()
            self.snake.grow()
            self.food = self.spawner.spawn(self.snake.cells())
        else:
            assert len(self.snake.cells()) == len(self.snake)
        return result

    def step(self, frame: InputFrame, elapsed: float) -> Snapshot:
        if frame.restart and self.restart():
            return self.snapshot()
        if frame.pause:
            self.toggle_pause()
        if self.phase is not Phase.PLAYING:
            return self.snapshot()

        if frame.direction is not None:
            self.snake.apply_direction(frame.direction)
        if self.timer.tick(elapsed):
            self.tick()
        return self.snapshot()

    def snapshot(self) -> Snapshot:
        segments = tuple(
            (cell, Role.HEAD if i == 0 else Role.BODY) for i, cell in enumerate(self.snake.body)
        )
        return Snapshot(segments=segments, food=self.food, score=self.score, phase=self.phase)
