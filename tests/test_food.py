"""
Tests for food.py - random food placement on free cells.
"""

import logging

import numpy as np

from snake_arena.food import FoodSpawner
from snake_arena.grid import Grid
from snake_arena.state import Cell


class TestSpawn:
    def test_spawn_lands_inside_the_grid(self):
        grid = Grid(8, 8)
        spawner = FoodSpawner(grid, seed=0)
        for _ in range(50):
            assert grid.contains(spawner.spawn())

    def test_spawn_avoids_excluded_cells(self):
        grid = Grid(4, 4)
        spawner = FoodSpawner(grid, seed=0)
        free = Cell(1, 1)
        exclude = [c for c in grid.cells() if c != free]
        for _ in range(10):
            assert spawner.spawn(exclude) == free

    def test_full_grid_returns_none(self, caplog):
        grid = Grid(4, 4)
        spawner = FoodSpawner(grid, seed=0)
        with caplog.at_level(logging.WARNING, logger="snake_arena.food"):
            assert spawner.spawn(grid.cells()) is None
        assert "No free cell" in caplog.text

    def test_same_seed_same_sequence(self):
        grid = Grid(24, 24)
        a = FoodSpawner(grid, seed=42)
        b = FoodSpawner(grid, rng=np.random.default_rng(42))
        assert [a.spawn() for _ in range(20)] == [b.spawn() for _ in range(20)]

    def test_free_cells_accepts_plain_tuples(self):
        grid = Grid(4, 4)
        free = FoodSpawner(grid).free_cells([(0, 0), (1, 1)])
        assert len(free) == grid.capacity - 2
        assert Cell(0, 0) not in free
