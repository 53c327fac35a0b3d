from __future__ import annotations

import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import random  # noqa: E402

import pytest  # noqa: E402

from grid_snake.grid import Grid  # noqa: E402
from grid_snake.scheduler import ManualScheduler  # noqa: E402
from grid_snake.scores import MemoryScoreStore  # noqa: E402
from grid_snake.session import GameSession  # noqa: E402


@pytest.fixture
def scheduler() -> ManualScheduler:
    return ManualScheduler()


@pytest.fixture
def store() -> MemoryScoreStore:
    return MemoryScoreStore()


@pytest.fixture
def session(scheduler: ManualScheduler, store: MemoryScoreStore) -> GameSession:
    return GameSession(scheduler, grid=Grid(20, 20), store=store, rng=random.Random(7))
