from __future__ import annotations

import pygame

from . import config
from .grid import Grid
from .state import Phase, Role, Snapshot

_ROLE_COLORS = {
    Role.HEAD: config.SNAKE_HEAD_COLOR,
    Role.BODY: config.SNAKE_SEGMENT_COLOR,
}

_fonts: dict[int, pygame.font.Font] = {}


def _font(size: int) -> pygame.font.Font:
    font = _fonts.get(size)
    if font is None:
        if not pygame.font.get_init():
            pygame.font.init()
        font = pygame.font.SysFont(None, size)
        _fonts[size] = font
    return font


def cell_rect(surface: pygame.Surface, grid: Grid, cell) -> pygame.Rect:
    # World y points up, screen y points down; the arena centre sits at the
    # middle of the surface.
    wx, wy = grid.cell_to_world(cell)
    size = grid.cell_size
    sx = surface.get_width() / 2 + wx - size / 2
    sy = surface.get_height() / 2 - wy - size / 2
    return pygame.Rect(int(sx), int(sy), size, size)


def draw_text_centered(surface: pygame.Surface, text: str, size: int) -> None:
    label = _font(size).render(text, True, config.TEXT_COLOR)
    rect = label.get_rect(center=(surface.get_width() // 2, surface.get_height() // 2))
    surface.blit(label, rect)


def draw_state(surface: pygame.Surface, grid: Grid, snapshot: Snapshot) -> None:
    surface.fill(config.BACKGROUND_COLOR)

    for cell in grid.wall_cells():
        pygame.draw.rect(surface, config.WALL_COLOR, cell_rect(surface, grid, cell))

    if snapshot.food is not None:
        pygame.draw.rect(surface, config.FOOD_COLOR, cell_rect(surface, grid, snapshot.food))

    # Tail first so the head is drawn on top.
    for cell, role in reversed(snapshot.segments):
        pygame.draw.rect(surface, _ROLE_COLORS[role], cell_rect(surface, grid, cell))

    score = _font(config.SCORE_FONT_SIZE).render(f"Score: {snapshot.score}", True, config.TEXT_COLOR)
    surface.blit(score, (grid.cell_size, grid.cell_size))

    if snapshot.phase is Phase.PAUSED:
        draw_text_centered(surface, "Paused", config.MESSAGE_FONT_SIZE)
    elif snapshot.phase is Phase.GAME_OVER:
        draw_text_centered(surface, "Game Over! Press SPACE to restart", config.MESSAGE_FONT_SIZE)
