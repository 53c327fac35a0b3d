from __future__ import annotations

import pytest

from grid_snake.grid import Cell, Direction, Grid
from grid_snake.snake import Snake


def test_direction_opposites() -> None:
    assert Direction.UP.opposite is Direction.DOWN
    assert Direction.LEFT.opposite is Direction.RIGHT
    assert Direction.RIGHT.is_opposite(Direction.LEFT)
    assert not Direction.RIGHT.is_opposite(Direction.UP)


def test_grid_bounds_and_center() -> None:
    grid = Grid(20, 20)
    assert grid.center == Cell(10, 10)
    assert grid.contains(Cell(0, 0))
    assert grid.contains(Cell(19, 19))
    assert not grid.contains(Cell(20, 5))
    assert not grid.contains(Cell(-1, 5))
    assert not grid.contains(Cell(5, 20))
    assert len(list(grid.cells())) == grid.capacity == 400


def test_grid_rejects_empty_board() -> None:
    with pytest.raises(ValueError):
        Grid(0, 5)


def test_snake_rejects_empty_or_duplicate_body() -> None:
    with pytest.raises(ValueError):
        Snake([])
    with pytest.raises(ValueError):
        Snake([Cell(1, 1), Cell(1, 1)])


def test_reversal_leaves_pending_unchanged() -> None:
    snake = Snake([Cell(5, 5)], Direction.RIGHT)
    assert snake.set_next_direction(Direction.UP) is True
    assert snake.set_next_direction(Direction.LEFT) is False
    assert snake.pending_direction is Direction.UP


def test_reversal_is_checked_against_current_not_pending() -> None:
    snake = Snake([Cell(5, 5)], Direction.RIGHT)
    snake.set_next_direction(Direction.UP)
    # DOWN is opposite of the pending UP but not of the travelled RIGHT
    assert snake.set_next_direction(Direction.DOWN) is True
    assert snake.pending_direction is Direction.DOWN
    assert snake.direction is Direction.RIGHT


def test_last_valid_turn_wins_at_commit() -> None:
    snake = Snake([Cell(5, 5)], Direction.RIGHT)
    snake.set_next_direction(Direction.UP)
    snake.set_next_direction(Direction.DOWN)
    assert snake.commit_direction() is Direction.DOWN
    assert snake.direction is Direction.DOWN


def test_body_helpers() -> None:
    snake = Snake([Cell(3, 1), Cell(2, 1), Cell(1, 1)])
    assert snake.head == Cell(3, 1)
    assert snake.tail == Cell(1, 1)
    assert Cell(2, 1) in snake
    assert snake.occupies(Cell(1, 1))
    assert not snake.occupies(Cell(4, 1))
    assert snake.next_head() == Cell(4, 1)
