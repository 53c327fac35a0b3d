from __future__ import annotations

import random
from unittest.mock import MagicMock

import pygame
import pytest

from grid_snake import scheduler as scheduler_mod
from grid_snake.config import TICK_EVENT
from grid_snake.grid import Cell
from grid_snake.scheduler import ManualScheduler, PygameScheduler
from grid_snake.session import GameSession, SessionState


def test_manual_tick_runs_live_callback() -> None:
    sched = ManualScheduler()
    callback = MagicMock()
    handle = sched.every(100, callback)
    assert sched.tick(3) == 3
    assert callback.call_count == 3
    handle.cancel()
    assert handle.active is False
    assert sched.tick() == 0


def test_new_task_replaces_the_old_one() -> None:
    sched = ManualScheduler()
    first, second = MagicMock(), MagicMock()
    old = sched.every(100, first)
    sched.every(50, second)
    assert old.active is False
    sched.tick()
    first.assert_not_called()
    second.assert_called_once_with()
    assert sched.interval_ms == 50


def test_cancelling_a_stale_handle_keeps_current() -> None:
    sched = ManualScheduler()
    old = sched.every(100, MagicMock())
    sched.every(100, MagicMock())
    old.cancel()
    assert sched.tick() == 1


def test_interval_must_be_positive() -> None:
    with pytest.raises(ValueError):
        ManualScheduler().every(0, MagicMock())


def test_pygame_scheduler_arms_and_disarms_timer(monkeypatch) -> None:
    set_timer = MagicMock()
    clear = MagicMock()
    monkeypatch.setattr(scheduler_mod.pygame.time, "set_timer", set_timer)
    monkeypatch.setattr(scheduler_mod.pygame.event, "clear", clear)

    sched = PygameScheduler()
    callback = MagicMock()
    handle = sched.every(140, callback)
    tick, interval = set_timer.call_args.args
    assert tick.type == TICK_EVENT
    assert tick.generation == handle.generation
    assert interval == 140

    assert sched.handle(tick) is True
    assert sched.handle(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_a)) is False
    callback.assert_called_once_with()

    handle.cancel()
    set_timer.assert_called_with(TICK_EVENT, 0)
    clear.assert_called_once_with(TICK_EVENT)
    assert sched.handle(tick) is False


def test_tick_fetched_before_cancel_is_ignored(monkeypatch) -> None:
    set_timer = MagicMock()
    monkeypatch.setattr(scheduler_mod.pygame.time, "set_timer", set_timer)
    monkeypatch.setattr(scheduler_mod.pygame.event, "clear", MagicMock())

    sched = PygameScheduler()
    first, second = MagicMock(), MagicMock()
    old = sched.every(140, first)
    # already pulled off the queue by the event loop when the pause lands
    stale = pygame.event.Event(TICK_EVENT, generation=old.generation)
    old.cancel()
    new = sched.every(140, second)

    assert sched.handle(stale) is False
    assert sched.handle(pygame.event.Event(TICK_EVENT)) is False
    first.assert_not_called()
    second.assert_not_called()

    assert sched.handle(pygame.event.Event(TICK_EVENT, generation=new.generation))
    second.assert_called_once_with()


def test_pause_resume_in_one_batch_drops_old_tick(monkeypatch) -> None:
    monkeypatch.setattr(scheduler_mod.pygame.time, "set_timer", MagicMock())
    monkeypatch.setattr(scheduler_mod.pygame.event, "clear", MagicMock())

    sched = PygameScheduler()
    session = GameSession(sched, rng=random.Random(1))
    session.food = Cell(0, 0)
    session.start()
    stale = pygame.event.Event(TICK_EVENT, generation=sched.current.generation)

    session.toggle()
    session.toggle()
    assert sched.handle(stale) is False
    assert session.state is SessionState.RUNNING
    assert session.snake.head == Cell(10, 10)
