"""Cancellable repeating timers that drive the session tick."""

from __future__ import annotations

import logging
from typing import Callable, Protocol

import pygame

from .config import TICK_EVENT

logger = logging.getLogger(__name__)

Callback = Callable[[], None]


class TimerHandle(Protocol):
    active: bool

    def cancel(self) -> None: ...


class Scheduler(Protocol):
    def every(self, interval_ms: int, callback: Callback) -> TimerHandle: ...


class _Handle:
    def __init__(
        self,
        owner: _SingleSlotScheduler,
        interval_ms: int,
        callback: Callback,
        generation: int,
    ) -> None:
        self.owner = owner
        self.generation = generation
        self.interval_ms = interval_ms
        self.callback = callback
        self.active = True

    def cancel(self) -> None:
        if not self.active:
            return
        self.active = False
        self.owner._release(self)


class _SingleSlotScheduler:
    """Keeps at most one live repeating task; a new one replaces the old."""

    def __init__(self) -> None:
        self.current: _Handle | None = None
        self._generation = 0

    def every(self, interval_ms: int, callback: Callback) -> _Handle:
        if interval_ms <= 0:
            raise ValueError(f"interval must be positive, got {interval_ms}")
        if self.current is not None:
            self.current.cancel()
        self._generation += 1
        handle = _Handle(self, interval_ms, callback, self._generation)
        self.current = handle
        self._arm(handle)
        return handle

    def _release(self, handle: _Handle) -> None:
        if self.current is handle:
            self.current = None
            self._disarm()

    def _fire(self) -> bool:
        handle = self.current
        if handle is None or not handle.active:
            return False
        handle.callback()
        return True

    def _arm(self, handle: _Handle) -> None:
        pass

    def _disarm(self) -> None:
        pass


class ManualScheduler(_SingleSlotScheduler):
    """Scheduler whose ticks are fired by hand, for tests and replays."""

    def tick(self, times: int = 1) -> int:
        fired = 0
        for _ in range(times):
            if not self._fire():
                break
            fired += 1
        return fired

    @property
    def interval_ms(self) -> int | None:
        return self.current.interval_ms if self.current else None


class PygameScheduler(_SingleSlotScheduler):
    """Repeating task backed by ``pygame.time.set_timer`` on a user event."""

    def __init__(self, event_type: int = TICK_EVENT) -> None:
        super().__init__()
        self.event_type = event_type

    def _arm(self, handle: _Handle) -> None:
        logger.debug(
            "tick timer %d armed at %d ms", handle.generation, handle.interval_ms
        )
        # ticks carry the generation so ones fetched before a cancel are ignored
        tick = pygame.event.Event(self.event_type, generation=handle.generation)
        pygame.time.set_timer(tick, handle.interval_ms)

    def _disarm(self) -> None:
        logger.debug("tick timer cancelled")
        pygame.time.set_timer(self.event_type, 0)
        # drop ticks already queued by the cancelled timer
        pygame.event.clear(self.event_type)

    def handle(self, event: pygame.event.Event) -> bool:
        """Run the live callback if ``event`` is a tick of the current timer."""
        if event.type != self.event_type or self.current is None:
            return False
        generation = getattr(event, "generation", None)
        if generation != self.current.generation:
            logger.debug("dropping stale tick from timer %s", generation)
            return False
        return self._fire()
