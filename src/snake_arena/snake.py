from __future__ import annotations

from collections import deque

from .state import Cell, Direction, add_cells


class Snake:
    """Ordered run of cells, head first, plus heading and pending growth."""

    def __init__(self, head: tuple[int, int], direction: Direction, length: int = 2):
        if length < 2:
            raise ValueError(f"snake needs at least 2 cells, got {length}")
        back = direction.opposite().delta
        self.body: deque[Cell] = deque(
            Cell(head[0] + back.x * i, head[1] + back.y * i) for i in range(length)
        )
        self.direction = direction
        # Direction of the last completed move.
        self.heading = direction
        self.pending_growth = 0

    def __len__(self) -> int:
        return len(self.body)

    def head(self) -> Cell:
        return self.body[0]

    def tail(self) -> Cell:
        return self.body[-1]

    def segments(self) -> list[Cell]:
        return list(self.body)[1:]

    def cells(self) -> set[Cell]:
        return set(self.body)

    def apply_direction(self, requested: Direction) -> bool:
        """Turn towards ``requested`` unless that would fold the snake back
        onto itself. Returns whether the direction was taken."""
        if requested == self.direction.opposite() or requested == self.heading.opposite():
            return False
        self.direction = requested
        return True

    def grow(self) -> None:
        self.pending_growth = 1

    def advance(self) -> tuple[Cell, list[Cell]]:
        """Move one cell in the current direction.

        Every segment takes the place of the one in front of it. The old
        tail cell is dropped unless growth is pending, in which case the
        snake ends one cell longer. Returns the new head and the full body
        as it was before the move.
        """
        previous = list(self.body)
        new_head = add_cells(previous[0], self.direction.delta)
        self.body.appendleft(new_head)
        if self.pending_growth:
            self.pending_growth = 0
        else:
            self.body.pop()
        self.heading = self.direction
        assert len(self.body) >= 2
        return new_head, previous

    def __repr__(self):
        return f"Snake(head={self.head()}, length={len(self)}, direction={self.direction.name})"
