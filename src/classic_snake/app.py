"""Window, input and the fixed-rate frame loop."""

from __future__ import annotations

import logging

import pygame

from .config import (
    FPS,
    HUD_HEIGHT,
    KEY_TO_DIRECTION,
    LOG_LEVEL,
    QUIT_KEYS,
    RESTART_KEYS,
    START_KEYS,
)
from .game import ScoreStore, SnakeGame
from .render import BoardRenderer
from .storage import HighScoreStore

logger = logging.getLogger(__name__)


def dispatch_key(game: SnakeGame, key: int) -> bool:
    """Translate a key press into a game command. Returns False to quit."""
    if key in QUIT_KEYS:
        return False
    if key in RESTART_KEYS:
        game.restart()
    elif key in START_KEYS:
        game.start()
    else:
        direction = KEY_TO_DIRECTION.get(key)
        if direction:
            game.request_direction(direction)
    return True


class SnakeApp:
    """Owns the pygame window and pumps events into the game."""

    def __init__(self, store: ScoreStore | None = None) -> None:
        pygame.init()
        self.renderer = BoardRenderer()
        size = (
            self.renderer.board_width,
            self.renderer.board_height + HUD_HEIGHT,
        )
        self.window = pygame.display.set_mode(size, pygame.DOUBLEBUF | pygame.SCALED)
        pygame.display.set_caption("Classic Snake")
        self.game = SnakeGame(self.renderer, store or HighScoreStore())

    def handle_events(self) -> bool:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.KEYDOWN and not dispatch_key(self.game, event.key):
                return False
        return True

    def run(self) -> None:
        """Run the main loop: handle events, feed the tick source, then present."""
        clock = pygame.time.Clock()
        running = True

        while running:
            elapsed_ms = clock.tick(FPS)
            running = self.handle_events()
            self.game.timer.advance(elapsed_ms)

            self.window.blit(self.renderer.surface, (0, 0))
            pygame.display.update()

        logger.info("Quitting (best %d)", self.game.high_score)
        pygame.quit()


def main() -> None:
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )
    SnakeApp().run()


if __name__ == "__main__":
    main()
