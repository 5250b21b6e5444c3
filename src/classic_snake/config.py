"""Centralized configuration and palette definitions for Classic Snake."""

from __future__ import annotations

import os
import sys
from pathlib import Path

import pygame


def _default_data_dir() -> Path:
    """Return a platform-appropriate user data directory for the high score."""

    if sys.platform.startswith("win"):
        base = Path(os.getenv("LOCALAPPDATA") or Path.home() / "AppData" / "Local")
    elif sys.platform == "darwin":
        base = Path.home() / "Library" / "Application Support"
    else:
        base = Path(os.getenv("XDG_DATA_HOME") or Path.home() / ".local" / "share")
    return base / "classic-snake"


DATA_DIR = Path(os.getenv("CLASSIC_SNAKE_DATA_DIR") or _default_data_dir())
HIGHSCORE_FILE = Path(
    os.getenv("CLASSIC_SNAKE_HIGHSCORE_FILE") or DATA_DIR / "highscore.txt"
)
LOG_LEVEL: str = os.getenv("CLASSIC_SNAKE_LOG_LEVEL", "INFO").upper()

CELL_SIZE: int = 20
GRID_WIDTH: int = 20  # cells
GRID_HEIGHT: int = 20
BOARD_WIDTH: int = CELL_SIZE * GRID_WIDTH  # 400 px
BOARD_HEIGHT: int = CELL_SIZE * GRID_HEIGHT
HUD_HEIGHT: int = 40
FONT_NAME: str = "arial"
FONT_SIZE: int = 20
TITLE_FONT_SIZE: int = 30

FPS: int = 60

FOOD_REWARD: int = 10
SPEED_UP_EVERY: int = 50  # points
START_INTERVAL_MS: int = 100
SPEED_STEP_MS: int = 5
MIN_INTERVAL_MS: int = 50

NONE: str = "NONE"
DIRECTIONS: dict[str, tuple[int, int]] = {
    "UP": (0, -1),
    "DOWN": (0, 1),
    "LEFT": (-1, 0),
    "RIGHT": (1, 0),
}
OPPOSITE: dict[str, str] = {
    "UP": "DOWN",
    "DOWN": "UP",
    "LEFT": "RIGHT",
    "RIGHT": "LEFT",
    NONE: NONE,
}
KEY_TO_DIRECTION = {
    pygame.K_UP: "UP",
    pygame.K_w: "UP",
    pygame.K_DOWN: "DOWN",
    pygame.K_s: "DOWN",
    pygame.K_LEFT: "LEFT",
    pygame.K_a: "LEFT",
    pygame.K_RIGHT: "RIGHT",
    pygame.K_d: "RIGHT",
}
START_KEYS = (pygame.K_RETURN, pygame.K_KP_ENTER, pygame.K_SPACE)
RESTART_KEYS = (pygame.K_r,)
QUIT_KEYS = (pygame.K_ESCAPE, pygame.K_q)

PALETTE = {
    "background": pygame.Color(240, 244, 240),
    "grid": pygame.Color(222, 230, 222),
    "snake_head": pygame.Color(46, 139, 87),
    "snake_body": pygame.Color(60, 179, 113),
    "snake_border": pygame.Color(30, 86, 49),
    "food": pygame.Color(255, 99, 71),
    "hud": pygame.Color(34, 40, 49),
    "text": pygame.Color(255, 255, 255),
    "hint": pygame.Color(90, 100, 110),
    "overlay": pygame.Color(0, 0, 0, 178),
}
