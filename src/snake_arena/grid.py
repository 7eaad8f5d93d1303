from __future__ import annotations

from collections.abc import Iterator

from . import config
from .state import Cell


class Grid:
    """Fixed arena centred on the origin.

    Cells run from ``-width // 2`` up to but excluding ``width // 2`` on x,
    and the same on y. World coordinates put the centre of cell (0, 0) at
    the origin, with y pointing up.
    """

    def __init__(
        self,
        width: int = config.ARENA_WIDTH,
        height: int = config.ARENA_HEIGHT,
        cell_size: int = config.CELL_SIZE,
    ):
        if width < 4 or height < 4:
            raise ValueError(f"grid must be at least 4x4, got {width}x{height}")
        if width % 2 or height % 2:
            raise ValueError(f"grid dimensions must be even, got {width}x{height}")
        self.width = width
        self.height = height
        self.cell_size = cell_size
        self.min_x = -width // 2
        self.max_x = width // 2
        self.min_y = -height // 2
        self.max_y = height // 2

    @property
    def capacity(self) -> int:
        return self.width * self.height

    def contains(self, cell: tuple[int, int]) -> bool:
        x, y = cell
        return self.min_x <= x < self.max_x and self.min_y <= y < self.max_y

    def cells(self) -> Iterator[Cell]:
        for y in range(self.min_y, self.max_y):
            for x in range(self.min_x, self.max_x):
                yield Cell(x, y)

    def cell_to_world(self, cell: tuple[int, int]) -> tuple[float, float]:
        return (float(cell[0] * self.cell_size), float(cell[1] * self.cell_size))

    def wall_cells(self) -> Iterator[Cell]:
        # One-cell ring just outside the arena, corners included.
        for x in range(self.min_x - 1, self.max_x + 1):
            yield Cell(x, self.min_y - 1)
            yield Cell(x, self.max_y)
        for y in range(self.min_y, self.max_y):
            yield Cell(self.min_x - 1, y)
            yield Cell(self.max_x, y)

    def __repr__(self):
        return f"Grid({self.width}x{self.height}, cell_size={self.cell_size})"
