from __future__ import annotations

import logging
from collections.abc import Iterable

import numpy as np

from .grid import Grid
from .state import Cell

logger = logging.getLogger(__name__)


class FoodSpawner:
    """Picks food cells uniformly at random among the free cells of a grid."""

    def __init__(self, grid: Grid, rng: np.random.Generator | None = None, seed: int | None = None):
        self.grid = grid
        self.rng = rng if rng is not None else np.random.default_rng(seed)

    def free_cells(self, exclude: Iterable[tuple[int, int]] = ()) -> list[Cell]:
        blocked = {Cell(*c) for c in exclude}
        return [cell for cell in self.grid.cells() if cell not in blocked]

    def spawn(self, exclude: Iterable[tuple[int, int]] = ()) -> Cell | None:
        """Return a random free cell, or None when every cell is excluded."""
        free = self.free_cells(exclude)
        if not free:
            logger.warning("No free cell left on %r, food not spawned.", self.grid)
            return None
        cell = free[int(self.rng.integers(len(free)))]
        logger.debug("Food spawned at %s.", cell)
        return cell
