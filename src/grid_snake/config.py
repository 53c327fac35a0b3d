"""Centralized configuration and palette definitions for Grid Snake."""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

import pygame

BASE_DIR = Path(__file__).resolve().parent


def _default_data_dir() -> Path:
    """Return a platform-appropriate user data directory for the best score."""

    if sys.platform.startswith("win"):
        base = Path(os.getenv("LOCALAPPDATA") or Path.home() / "AppData" / "Local")
    elif sys.platform == "darwin":
        base = Path.home() / "Library" / "Application Support"
    else:
        base = Path(os.getenv("XDG_DATA_HOME") or Path.home() / ".local" / "share")
    return base / "grid-snake"


DATA_DIR = Path(os.getenv("GRID_SNAKE_DATA_DIR") or _default_data_dir())
BEST_SCORE_FILE = Path(
    os.getenv("GRID_SNAKE_BEST_SCORE_FILE") or DATA_DIR / "best_score.txt"
)
LOG_LEVEL: str = os.getenv("GRID_SNAKE_LOG_LEVEL", "WARNING").upper()
LOG_FORMAT: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str | None = None) -> None:
    logging.basicConfig(level=level or LOG_LEVEL, format=LOG_FORMAT)


# Board
COLS: int = 20
ROWS: int = 20

# Window (resizable, board is re-laid out on resize)
WINDOW_SIZE: int = 540
MIN_WINDOW_SIZE: int = 240
FONT_NAME: str = "consolas"
FONT_SIZE: int = 20
FPS: int = 60

# Speed slider: higher level => shorter tick interval
SPEED_MIN: int = 5
SPEED_MAX: int = 15
SPEED_DEFAULT: int = 10

# Rejection sampling attempts before falling back to the free-cell list
FOOD_SAMPLE_ATTEMPTS: int = 64

# Pygame user event id driving the step timer
TICK_EVENT: int = pygame.USEREVENT + 1

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
TOGGLE_KEYS = (pygame.K_SPACE,)
RESTART_KEYS = (pygame.K_r,)
MUTE_KEYS = (pygame.K_m,)
SPEED_UP_KEYS = (pygame.K_PLUS, pygame.K_EQUALS, pygame.K_KP_PLUS)
SPEED_DOWN_KEYS = (pygame.K_MINUS, pygame.K_KP_MINUS)
QUIT_KEYS = (pygame.K_q, pygame.K_ESCAPE)

PALETTE = {
    "background": pygame.Color(17, 22, 37),
    "grid": pygame.Color(30, 34, 56),
    "food": pygame.Color(255, 90, 95),
    "snake": pygame.Color(108, 241, 113),
    "snake_head": pygame.Color(160, 255, 164),
    "text": pygame.Color(231, 234, 246),
    "hud": pygame.Color(10, 10, 10, 150),
    "overlay": pygame.Color(0, 0, 0, 115),
}
