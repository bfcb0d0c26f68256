from __future__ import annotations

import logging
from typing import Dict, Set

import pygame

from falling_blocks.game import Action, ActionState, FallingBlockGame
from .renderer import Renderer


logger = logging.getLogger(__name__)

KEY_TO_ACTION: Dict[int, Action] = {
    pygame.K_LEFT: Action.LEFT,
    pygame.K_RIGHT: Action.RIGHT,
    pygame.K_DOWN: Action.DOWN,
    pygame.K_UP: Action.ROTATE_CW,
    pygame.K_RSHIFT: Action.ROTATE_CCW,
    pygame.K_z: Action.ROTATE_CCW,
    pygame.K_p: Action.PAUSE,
}


def held_actions(keys) -> Set[Action]:
    """Abstract actions held according to a ``pygame.key.get_pressed()`` style mapping."""
    return {action for key, action in KEY_TO_ACTION.items() if keys[key]}


def run() -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    pygame.init()
    try:
        clock = pygame.time.Clock()
        game = FallingBlockGame()
        renderer = Renderer()
        screen = pygame.display.set_mode(renderer.window_size(game))
        pygame.display.set_caption("Falling Blocks")
        font = pygame.font.SysFont(None, 24)
        actions = ActionState()

        running = True
        while running:
            dt = clock.tick(60) / 1000.0
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_r and game.game_over:
                    logger.info("starting a new game")
                    game = FallingBlockGame()

            actions.update(held_actions(pygame.key.get_pressed()))
            for ev in game.tick(dt, actions):
                logger.debug("%s", ev)
            renderer.draw(screen, game, font)
    finally:
        pygame.quit()


if __name__ == "__main__":  # pragma: no cover
    run()
