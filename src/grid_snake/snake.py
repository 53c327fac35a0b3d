"""Snake body plus current/pending heading."""

from __future__ import annotations

from collections import deque
from typing import Iterable, Iterator

from .grid import Cell, Direction


class Snake:
    """Ordered body cells, head first, with a one-slot direction buffer."""

    def __init__(
        self, cells: Iterable[Cell], direction: Direction = Direction.RIGHT
    ) -> None:
        body = [Cell(*cell) for cell in cells]
        if not body:
            raise ValueError("snake needs at least one cell")
        if len(set(body)) != len(body):
            raise ValueError("snake cells must be unique")
        self._body: deque[Cell] = deque(body)
        self.direction = direction
        self.pending_direction = direction

    def __len__(self) -> int:
        return len(self._body)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self._body)

    def __contains__(self, cell: object) -> bool:
        return cell in self._body

    @property
    def head(self) -> Cell:
        return self._body[0]

    @property
    def tail(self) -> Cell:
        return self._body[-1]

    @property
    def cells(self) -> tuple[Cell, ...]:
        return tuple(self._body)

    def occupies(self, cell: Cell) -> bool:
        return cell in self._body

    # --- Direction control ---------------------------------------------

    def set_next_direction(self, direction: Direction) -> bool:
        """Queue a turn for the next tick.

        A 180 degree turn relative to the heading actually travelled last
        tick is dropped, otherwise the head would run straight into the
        neck. Later calls before the tick overwrite earlier ones.
        """
        if direction.is_opposite(self.direction):
            return False
        self.pending_direction = direction
        return True

    def commit_direction(self) -> Direction:
        self.direction = self.pending_direction
        return self.direction

    # --- Movement --------------------------------------------------------

    def next_head(self) -> Cell:
        return self.head.shifted(self.direction)

    def push_head(self, cell: Cell) -> None:
        self._body.appendleft(cell)

    def pop_tail(self) -> Cell:
        return self._body.pop()
