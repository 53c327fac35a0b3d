"""Fire-and-forget gameplay notifications (sound cues)."""

from __future__ import annotations

import logging
from typing import Protocol

logger = logging.getLogger(__name__)


class Feedback(Protocol):
    def on_eat(self) -> None: ...

    def on_start(self) -> None: ...

    def on_pause_resume(self, resuming: bool) -> None: ...

    def on_game_over(self) -> None: ...


class NullFeedback:
    def on_eat(self) -> None:
        pass

    def on_start(self) -> None:
        pass

    def on_pause_resume(self, resuming: bool) -> None:
        pass

    def on_game_over(self) -> None:
        pass


class SafeFeedback:
    """Forward notifications while absorbing anything the target raises.

    Game state has already been mutated by the time a cue fires, so a
    broken sound device must never reach back into the session.
    """

    def __init__(self, target: Feedback | None) -> None:
        self.target = target or NullFeedback()

    def _call(self, name: str, *args: object) -> None:
        try:
            getattr(self.target, name)(*args)
        except Exception:
            logger.debug("feedback hook %s failed", name, exc_info=True)

    def on_eat(self) -> None:
        self._call("on_eat")

    def on_start(self) -> None:
        self._call("on_start")

    def on_pause_resume(self, resuming: bool) -> None:
        self._call("on_pause_resume", resuming)

    def on_game_over(self) -> None:
        self._call("on_game_over")
