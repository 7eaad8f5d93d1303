from __future__ import annotations

import pygame

from . import config
from .controls import read_input, wants_quit
from .render import draw_state
from .sim import Simulation


def main(seed: int | None = None) -> None:
    pygame.init()
    pygame.display.set_caption("snake")
    screen = pygame.display.set_mode((config.WIDTH, config.HEIGHT))
    clock = pygame.time.Clock()

    sim = Simulation(seed=seed)

    while True:
        dt = clock.get_time() / 1000.0
        events = pygame.event.get()
        if wants_quit(events):
            break

        snapshot = sim.step(read_input(events, pygame.key.get_pressed()), dt)
        draw_state(screen, sim.grid, snapshot)
        pygame.display.flip()
        clock.tick(config.FPS)

    pygame.quit()
    print("Game Over! Score:", sim.score)
