"""Keyboard bindings translated into session actions."""

from __future__ import annotations

import logging
from typing import Protocol

from .config import (
    KEY_TO_DIRECTION,
    MUTE_KEYS,
    QUIT_KEYS,
    RESTART_KEYS,
    SPEED_DOWN_KEYS,
    SPEED_UP_KEYS,
    TOGGLE_KEYS,
)
from .grid import Direction
from .session import GameSession

logger = logging.getLogger(__name__)


class Mutable(Protocol):
    def toggle_mute(self) -> bool: ...


def dispatch_key(session: GameSession, key: int, audio: Mutable | None = None) -> bool:
    """Apply the intent bound to ``key``; return False when the player quits."""
    name = KEY_TO_DIRECTION.get(key)
    if name is not None:
        session.set_next_direction(Direction[name])
        return True

    if key in TOGGLE_KEYS:
        session.toggle()
    elif key in RESTART_KEYS:
        session.restart()
    elif key in SPEED_UP_KEYS:
        session.set_speed(session.speed + 1)
    elif key in SPEED_DOWN_KEYS:
        session.set_speed(session.speed - 1)
    elif key in MUTE_KEYS:
        if audio is not None:
            muted = audio.toggle_mute()
            logger.debug("audio %s", "muted" if muted else "unmuted")
    elif key in QUIT_KEYS:
        return False
    return True
