"""One discrete tick of snake movement."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable

from .grid import Cell, Grid, GridFullError
from .snake import Snake

FoodSpawner = Callable[[Snake], Cell]


class Outcome(Enum):
    MOVED = "moved"
    ATE = "ate"
    HIT_WALL = "hit_wall"
    HIT_SELF = "hit_self"
    # ate the last food: the body now covers every cell
    FILLED = "filled"

    @property
    def fatal(self) -> bool:
        return self in (Outcome.HIT_WALL, Outcome.HIT_SELF, Outcome.FILLED)

    @property
    def grew(self) -> bool:
        return self in (Outcome.ATE, Outcome.FILLED)


@dataclass(frozen=True, slots=True)
class StepResult:
    outcome: Outcome
    head: Cell
    food: Cell | None


def advance(snake: Snake, food: Cell, grid: Grid, spawn: FoodSpawner) -> StepResult:
    """Advance ``snake`` by exactly one cell.

    The collision test runs against the body before the tail is removed,
    so stepping into the cell the tail is about to vacate is a self hit.
    On a hit the snake is left untouched and the reported head is the
    rejected cell. ``spawn`` is only called when the food is eaten.
    """
    snake.commit_direction()
    new_head = snake.next_head()

    if not grid.contains(new_head):
        return StepResult(Outcome.HIT_WALL, new_head, food)
    if snake.occupies(new_head):
        return StepResult(Outcome.HIT_SELF, new_head, food)

    snake.push_head(new_head)
    if new_head == food:
        try:
            next_food = spawn(snake)
        except GridFullError:
            return StepResult(Outcome.FILLED, new_head, None)
        return StepResult(Outcome.ATE, new_head, next_food)

    snake.pop_tail()
    return StepResult(Outcome.MOVED, new_head, food)
