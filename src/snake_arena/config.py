from __future__ import annotations

# Arena, in cells. Cells span [-W/2, W/2) x [-H/2, H/2) around the centre.
ARENA_WIDTH = 24
ARENA_HEIGHT = 24
CELL_SIZE = 24

# Seconds between snake moves.
MOVE_INTERVAL = 0.075

INITIAL_LENGTH = 2
INITIAL_HEAD = (0, 0)
INITIAL_DIRECTION = "up"

# Arena plus a one-cell wall and a one-cell margin on every side.
WIDTH = (ARENA_WIDTH + 4) * CELL_SIZE
HEIGHT = (ARENA_HEIGHT + 4) * CELL_SIZE
FPS = 60

SNAKE_HEAD_COLOR = (26, 204, 0)
SNAKE_SEGMENT_COLOR = (51, 178, 76)
FOOD_COLOR = (255, 26, 0)
BACKGROUND_COLOR = (10, 10, 10)
WALL_COLOR = (204, 204, 204)
TEXT_COLOR = (204, 204, 204)

SCORE_FONT_SIZE = 56
MESSAGE_FONT_SIZE = 40
