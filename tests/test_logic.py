"""
Tests for logic.py - wall, self and food collisions for one move.
"""

import pytest

from snake_arena.grid import Grid
from snake_arena.logic import Outcome, TickResult, check_food, resolve_move
from snake_arena.state import Cell


@pytest.fixture
def grid():
    return Grid(24, 24)


class TestResolveMove:
    def test_plain_move(self, grid):
        result = resolve_move(Cell(0, 1), [Cell(0, 0)], grid, Cell(5, 5))
        assert result == TickResult(Outcome.NONE)

    def test_growth_is_reported(self, grid):
        result = resolve_move(Cell(0, 1), [Cell(0, 0), Cell(0, -1)], grid, Cell(5, 5), grew=True)
        assert result.outcome is Outcome.GREW

    @pytest.mark.parametrize("head", [Cell(12, 0), Cell(-13, 0), Cell(0, 12), Cell(0, -13)])
    def test_wall_collision(self, grid, head):
        result = resolve_move(head, [], grid, None)
        assert result.outcome is Outcome.GAME_OVER
        assert result.reason == "wall"

    def test_last_column_is_not_a_wall(self, grid):
        assert resolve_move(Cell(11, 0), [], grid, None).outcome is Outcome.NONE

    def test_self_collision(self, grid):
        body = [Cell(0, 0), Cell(1, 0), Cell(1, 1)]
        result = resolve_move(Cell(1, 1), body, grid, None)
        assert result.outcome is Outcome.GAME_OVER
        assert result.reason == "self"

    def test_eating(self, grid):
        result = resolve_move(Cell(3, 3), [Cell(3, 2)], grid, Cell(3, 3))
        assert result == TickResult(Outcome.ATE, food=Cell(3, 3))

    def test_eating_beats_growth_report(self, grid):
        result = resolve_move(Cell(3, 3), [Cell(3, 2)], grid, Cell(3, 3), grew=True)
        assert result.outcome is Outcome.ATE

    def test_game_over_beats_eating(self, grid):
        """Food under a body cell never scores on a fatal move."""
        result = resolve_move(Cell(2, 2), [Cell(2, 2)], grid, Cell(2, 2))
        assert result.outcome is Outcome.GAME_OVER

    def test_no_food_on_board(self, grid):
        assert check_food(TickResult(Outcome.NONE), Cell(0, 0), None).outcome is Outcome.NONE
