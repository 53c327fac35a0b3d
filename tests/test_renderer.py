from __future__ import annotations

import pygame
import pytest

from grid_snake.config import PALETTE
from grid_snake.grid import Cell, Grid
from grid_snake.renderer import BoardLayout, Renderer
from grid_snake.session import GameSession


@pytest.fixture
def renderer() -> Renderer:
    pygame.font.init()
    return Renderer(pygame.font.Font(None, 20))


def test_layout_fits_and_centres_board() -> None:
    layout = BoardLayout.fit((400, 440), Grid(20, 20), hud_height=40)
    assert layout.cell == 20
    assert (layout.left, layout.top) == (0, 40)

    wide = BoardLayout.fit((600, 440), Grid(20, 20), hud_height=40)
    assert wide.cell == 20
    assert wide.left == 100
    assert wide.cell_rect(Cell(1, 2)) == pygame.Rect(120, 80, 20, 20)


def test_layout_never_collapses_below_one_pixel() -> None:
    layout = BoardLayout.fit((10, 10), Grid(20, 20), hud_height=40)
    assert layout.cell == 1


def test_draws_food_and_snake_cells(renderer: Renderer, session: GameSession) -> None:
    session.food = Cell(2, 15)
    session.start()
    surface = pygame.Surface((480, 480 + renderer.hud_height))
    layout = renderer.draw(surface, session)

    food_px = layout.cell_rect(Cell(2, 15)).center
    head_px = layout.cell_rect(session.snake.head).center
    empty_px = layout.cell_rect(Cell(17, 3)).center
    assert surface.get_at(food_px) == PALETTE["food"]
    assert surface.get_at(head_px) == PALETTE["snake_head"]
    assert surface.get_at(empty_px) == PALETTE["background"]


def test_game_over_overlay_dims_board(renderer: Renderer, session: GameSession) -> None:
    session.food = Cell(0, 0)
    session.start()
    session.scheduler.tick(10)
    surface = pygame.Surface((480, 480 + renderer.hud_height))
    layout = renderer.draw(surface, session)
    assert surface.get_at(layout.cell_rect(Cell(17, 3)).center) != PALETTE["background"]
