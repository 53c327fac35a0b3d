"""Food placement on free board cells."""

from __future__ import annotations

import logging
import random
from typing import Container

from .config import FOOD_SAMPLE_ATTEMPTS
from .grid import Cell, Grid, GridFullError

logger = logging.getLogger(__name__)


def spawn_food(
    occupied: Container[Cell],
    grid: Grid,
    rng: random.Random | None = None,
    attempts: int = FOOD_SAMPLE_ATTEMPTS,
) -> Cell:
    """Return a uniformly random cell that is not in ``occupied``.

    Rejection sampling is cheap while the board is mostly empty. After
    ``attempts`` misses the free cells are listed explicitly and one is
    drawn from them, so a nearly full board still terminates.
    """
    rng = rng or random
    for _ in range(attempts):
        cell = Cell(rng.randrange(grid.cols), rng.randrange(grid.rows))
        if cell not in occupied:
            return cell

    free = [cell for cell in grid.cells() if cell not in occupied]
    if not free:
        raise GridFullError(f"no free cell left on a {grid.cols}x{grid.rows} grid")
    logger.debug("food sampling fell back to %d free cells", len(free))
    return rng.choice(free)
