"""pygame render sink: draws frames into an offscreen surface."""

from __future__ import annotations

import pygame

from .config import (
    CELL_SIZE,
    FONT_NAME,
    FONT_SIZE,
    GRID_HEIGHT,
    GRID_WIDTH,
    HUD_HEIGHT,
    PALETTE,
    TITLE_FONT_SIZE,
)
from .game import IDLE, Frame


class BoardRenderer:
    """Paints the board and HUD; the app blits ``surface`` every frame."""

    def __init__(
        self,
        grid_width: int = GRID_WIDTH,
        grid_height: int = GRID_HEIGHT,
        cell_size: int = CELL_SIZE,
    ) -> None:
        if not pygame.font.get_init():
            pygame.font.init()
        self.cell_size = cell_size
        self.board_width = grid_width * cell_size
        self.board_height = grid_height * cell_size
        self.surface = pygame.Surface((self.board_width, self.board_height + HUD_HEIGHT))
        self.font = pygame.font.SysFont(FONT_NAME, FONT_SIZE)
        self.title_font = pygame.font.SysFont(FONT_NAME, TITLE_FONT_SIZE, bold=True)
        self.background = self._build_background()

    def _build_background(self) -> pygame.Surface:
        """Create the board background with grid lines once."""
        surface = pygame.Surface((self.board_width, self.board_height))
        surface.fill(PALETTE["background"])
        for x in range(0, self.board_width, self.cell_size):
            pygame.draw.line(surface, PALETTE["grid"], (x, 0), (x, self.board_height), 1)
        for y in range(0, self.board_height, self.cell_size):
            pygame.draw.line(surface, PALETTE["grid"], (0, y), (self.board_width, y), 1)
        return surface

    # --- Frame ---------------------------------------------------------

    def render(self, frame: Frame) -> None:
        self.surface.blit(self.background, (0, 0))

        for idx, (x, y) in enumerate(frame.snake):
            rect = pygame.Rect(x, y, self.cell_size, self.cell_size)
            color = PALETTE["snake_head"] if idx == 0 else PALETTE["snake_body"]
            pygame.draw.rect(self.surface, color, rect)
            pygame.draw.rect(self.surface, PALETTE["snake_border"], rect, width=1)

        if frame.food is not None:
            half = self.cell_size // 2
            center = (frame.food[0] + half, frame.food[1] + half)
            pygame.draw.circle(self.surface, PALETTE["food"], center, half)

        self._draw_hud(frame)
        if frame.state == IDLE:
            self._draw_centered(
                self.font.render("Arrow keys / ENTER to start", True, PALETTE["hint"]),
                self.board_height // 2 + self.cell_size * 2,
            )

    def render_game_over(self, score: int) -> None:
        """Dim the last frame and print the final score over it."""
        overlay = pygame.Surface((self.board_width, self.board_height), pygame.SRCALPHA)
        overlay.fill(PALETTE["overlay"])
        self.surface.blit(overlay, (0, 0))

        middle = self.board_height // 2
        lines = [
            (self.title_font, "Game Over!", middle - 20),
            (self.font, f"Score: {score}", middle + 20),
            (self.font, "R to restart / ENTER to play again", middle + 50),
        ]
        for font, text, y in lines:
            self._draw_centered(font.render(text, True, PALETTE["text"]), y)

    # --- HUD -----------------------------------------------------------

    def _draw_hud(self, frame: Frame) -> None:
        hud_rect = pygame.Rect(0, self.board_height, self.board_width, HUD_HEIGHT)
        self.surface.fill(PALETTE["hud"], hud_rect)

        score_text = self.font.render(f"SCORE {frame.score:04}", True, PALETTE["text"])
        best_text = self.font.render(f"BEST {frame.high_score:04}", True, PALETTE["text"])

        score_rect = score_text.get_rect(midleft=(10, hud_rect.centery))
        best_rect = best_text.get_rect(midright=(self.board_width - 10, hud_rect.centery))
        self.surface.blit(score_text, score_rect)
        self.surface.blit(best_text, best_rect)

    def _draw_centered(self, text: pygame.Surface, center_y: int) -> None:
        rect = text.get_rect(center=(self.board_width // 2, center_y))
        self.surface.blit(text, rect)
