"""Draws the board, snake, food, HUD and overlays onto a pygame surface."""

from __future__ import annotations

from dataclasses import dataclass

import pygame

from .config import FONT_NAME, FONT_SIZE, PALETTE
from .grid import Cell, Grid
from .session import GameSession, SessionState

HUD_PADDING = 6


@dataclass(frozen=True, slots=True)
class BoardLayout:
    """Pixel placement of the grid inside a surface of arbitrary size."""

    left: int
    top: int
    cell: int
    cols: int
    rows: int

    @classmethod
    def fit(cls, size: tuple[int, int], grid: Grid, hud_height: int) -> BoardLayout:
        width, height = size
        avail_h = max(0, height - hud_height)
        cell = max(1, min(width // grid.cols, avail_h // grid.rows))
        board_w = cell * grid.cols
        board_h = cell * grid.rows
        left = (width - board_w) // 2
        top = hud_height + (avail_h - board_h) // 2
        return cls(left, top, cell, grid.cols, grid.rows)

    @property
    def rect(self) -> pygame.Rect:
        return pygame.Rect(
            self.left, self.top, self.cell * self.cols, self.cell * self.rows
        )

    def cell_rect(self, cell: Cell) -> pygame.Rect:
        return pygame.Rect(
            self.left + cell.x * self.cell,
            self.top + cell.y * self.cell,
            self.cell,
            self.cell,
        )


class Renderer:
    """Repaints a whole frame from session state; holds no game state."""

    def __init__(self, font: pygame.font.Font | None = None) -> None:
        self.font = font or pygame.font.SysFont(FONT_NAME, FONT_SIZE)
        self.hud_height = self.font.get_linesize() + HUD_PADDING * 2

    def layout(self, surface: pygame.Surface, grid: Grid) -> BoardLayout:
        return BoardLayout.fit(surface.get_size(), grid, self.hud_height)

    def draw(self, surface: pygame.Surface, session: GameSession) -> BoardLayout:
        layout = self.layout(surface, session.grid)
        surface.fill(PALETTE["background"])
        self._draw_grid(surface, layout)

        if session.food is not None:
            food_rect = layout.cell_rect(session.food)
            pygame.draw.rect(surface, PALETTE["food"], food_rect)
        for idx, cell in enumerate(session.snake):
            color = PALETTE["snake_head"] if idx == 0 else PALETTE["snake"]
            pygame.draw.rect(surface, color, layout.cell_rect(cell))

        self._draw_hud(surface, session)

        if session.state is SessionState.IDLE:
            self._draw_overlay(surface, layout, ["Press SPACE to start"], dim=False)
        elif session.state is SessionState.PAUSED:
            self._draw_overlay(surface, layout, ["Paused", "SPACE to resume"])
        elif session.state is SessionState.GAME_OVER:
            self._draw_overlay(
                surface,
                layout,
                ["Game Over", "Press SPACE or R to restart"],
            )
        return layout

    def _draw_grid(self, surface: pygame.Surface, layout: BoardLayout) -> None:
        board = layout.rect
        for x in range(layout.cols + 1):
            px = board.left + x * layout.cell
            pygame.draw.line(
                surface, PALETTE["grid"], (px, board.top), (px, board.bottom), 1
            )
        for y in range(layout.rows + 1):
            py = board.top + y * layout.cell
            pygame.draw.line(
                surface, PALETTE["grid"], (board.left, py), (board.right, py), 1
            )

    def _draw_hud(self, surface: pygame.Surface, session: GameSession) -> None:
        hud = pygame.Surface((surface.get_width(), self.hud_height), pygame.SRCALPHA)
        hud.fill(PALETTE["hud"])
        left = self.font.render(
            f"SCORE {session.score}   BEST {session.best_score}", True, PALETTE["text"]
        )
        right = self.font.render(f"SPEED {session.speed}", True, PALETTE["text"])
        hud.blit(left, (HUD_PADDING, HUD_PADDING))
        right_x = hud.get_width() - right.get_width() - HUD_PADDING
        hud.blit(right, (right_x, HUD_PADDING))
        surface.blit(hud, (0, 0))

    def _draw_overlay(
        self,
        surface: pygame.Surface,
        layout: BoardLayout,
        lines: list[str],
        *,
        dim: bool = True,
    ) -> None:
        board = layout.rect
        if dim:
            shade = pygame.Surface(board.size, pygame.SRCALPHA)
            shade.fill(PALETTE["overlay"])
            surface.blit(shade, board.topleft)
        line_h = self.font.get_linesize() + 4
        first_y = board.centery - (len(lines) * line_h) // 2
        for idx, text in enumerate(lines):
            surf = self.font.render(text, True, PALETTE["text"])
            rect = surf.get_rect()
            rect.midtop = (board.centerx, first_y + idx * line_h)
            surface.blit(surf, rect)
