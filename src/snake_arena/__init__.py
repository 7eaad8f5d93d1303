from .grid import Grid
from .logic import Outcome, TickResult, resolve_move
from .scoreboard import Scoreboard
from .sim import MoveTimer, Simulation
from .snake import Snake
from .state import Cell, Direction, InputFrame, Phase, Role, Snapshot

__all__ = [
    "Cell",
    "Direction",
    "Grid",
    "InputFrame",
    "MoveTimer",
    "Outcome",
    "Phase",
    "Role",
    "Scoreboard",
    "Simulation",
    "Snake",
    "Snapshot",
    "TickResult",
    "resolve_move",
]
