"""Best score persistence slot."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol

from .config import BEST_SCORE_FILE

logger = logging.getLogger(__name__)


class ScoreStore(Protocol):
    def load(self) -> int: ...

    def save(self, value: int) -> None: ...


class FileScoreStore:
    """Keeps the best score as plain text in a single file."""

    def __init__(self, path: Path | str = BEST_SCORE_FILE) -> None:
        self.path = Path(path)

    def load(self) -> int:
        try:
            text = self.path.read_text(encoding="utf-8")
            return max(0, int(text.strip() or "0"))
        except FileNotFoundError:
            return 0
        except (OSError, ValueError) as exc:
            logger.warning("ignoring unreadable best score at %s: %s", self.path, exc)
            return 0

    def save(self, value: int) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(str(int(value)), encoding="utf-8")
        except OSError as exc:
            logger.warning("could not save best score to %s: %s", self.path, exc)


class MemoryScoreStore:
    def __init__(self, value: int = 0) -> None:
        self.value = value
        self.saves: list[int] = []

    def load(self) -> int:
        return self.value

    def save(self, value: int) -> None:
        self.value = value
        self.saves.append(value)
