"""Discrete board geometry shared by the snake, food and engine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, NamedTuple

from .config import COLS, ROWS


class Cell(NamedTuple):
    x: int
    y: int

    def shifted(self, direction: Direction) -> Cell:
        dx, dy = direction.value
        return Cell(self.x + dx, self.y + dy)


class Direction(Enum):
    """Unit step on the board; y grows downwards like screen space."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def opposite(self) -> Direction:
        dx, dy = self.value
        return Direction((-dx, -dy))

    def is_opposite(self, other: Direction) -> bool:
        return self.opposite is other


class GridSnakeError(Exception):
    """Base class for errors raised by the game core."""


class GridFullError(GridSnakeError):
    """Raised when no free cell is left for the food."""


@dataclass(frozen=True, slots=True)
class Grid:
    cols: int = COLS
    rows: int = ROWS

    def __post_init__(self) -> None:
        if self.cols < 1 or self.rows < 1:
            raise ValueError(f"grid must be at least 1x1, got {self.cols}x{self.rows}")

    @property
    def capacity(self) -> int:
        return self.cols * self.rows

    @property
    def center(self) -> Cell:
        return Cell(self.cols // 2, self.rows // 2)

    def contains(self, cell: Cell) -> bool:
        return 0 <= cell.x < self.cols and 0 <= cell.y < self.rows

    def cells(self) -> Iterator[Cell]:
        for y in range(self.rows):
            for x in range(self.cols):
                yield Cell(x, y)
