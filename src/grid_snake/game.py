"""Grid Snake window: wires the session to pygame input, timer and display."""

from __future__ import annotations

import logging

import pygame

from .audio import ChimeAudio
from .config import FPS, MIN_WINDOW_SIZE, WINDOW_SIZE
from .controls import dispatch_key
from .renderer import Renderer
from .scheduler import PygameScheduler
from .scores import FileScoreStore, ScoreStore
from .session import GameSession

logger = logging.getLogger(__name__)


class GridSnake:
    """Owns the window and event loop; game rules live in ``GameSession``."""

    def __init__(self, store: ScoreStore | None = None) -> None:
        pygame.init()
        self._window_flags = pygame.RESIZABLE
        self.window = pygame.display.set_mode(
            (WINDOW_SIZE, WINDOW_SIZE), self._window_flags
        )
        pygame.display.set_caption("Grid Snake")

        self.renderer = Renderer()
        self.audio = ChimeAudio()
        self.scheduler = PygameScheduler()
        self.dirty = True

        self.session = GameSession(
            self.scheduler,
            store=store or FileScoreStore(),
            feedback=self.audio,
            on_change=self._mark_dirty,
        )
        logger.info("loaded best score %d", self.session.best_score)

    def _mark_dirty(self, _session: GameSession) -> None:
        self.dirty = True

    def _resize(self, width: int, height: int) -> None:
        size = (max(MIN_WINDOW_SIZE, width), max(MIN_WINDOW_SIZE, height))
        self.window = pygame.display.set_mode(size, self._window_flags)
        self.dirty = True

    # --- Input ---------------------------------------------------------

    def handle_events(self) -> bool:
        """Route timer ticks and key presses; False once the window closes."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if self.scheduler.handle(event):
                continue
            if event.type == pygame.VIDEORESIZE:
                self._resize(event.w, event.h)
            elif event.type == pygame.WINDOWEXPOSED:
                self.dirty = True
            elif event.type == pygame.KEYDOWN:
                if not dispatch_key(self.session, event.key, self.audio):
                    return False
        return True

    # --- Main loop -----------------------------------------------------

    def start(self) -> None:
        clock = pygame.time.Clock()
        running = True

        while running:
            clock.tick(FPS)
            running = self.handle_events()
            if self.dirty:
                self.renderer.draw(self.window, self.session)
                pygame.display.flip()
                self.dirty = False

        pygame.quit()
