import os

# pygame-backed tests draw to off-screen surfaces only.
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest  # noqa: E402

from snake_arena.sim import Simulation  # noqa: E402
from snake_arena.state import Cell  # noqa: E402

FAR_AWAY = Cell(-10, -10)


@pytest.fixture
def sim():
    """Default 24x24 game with the food parked out of the snake's way."""
    game = Simulation(seed=1234)
    game.food = FAR_AWAY
    return game


@pytest.fixture
def make_sim():
    def _make(**kwargs):
        kwargs.setdefault("seed", 1234)
        game = Simulation(**kwargs)
        game.food = FAR_AWAY
        return game

    return _make
