"""Game session: tick loop state machine, score and best score."""

from __future__ import annotations

import logging
import random
from enum import Enum
from typing import Callable

from .config import SPEED_DEFAULT, SPEED_MAX, SPEED_MIN
from .engine import Outcome, StepResult, advance
from .feedback import Feedback, SafeFeedback
from .food import spawn_food
from .grid import Cell, Direction, Grid
from .scheduler import Scheduler, TimerHandle
from .scores import MemoryScoreStore, ScoreStore
from .snake import Snake

logger = logging.getLogger(__name__)


class SessionState(Enum):
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "game_over"


def clamp_speed(level: int) -> int:
    return max(SPEED_MIN, min(SPEED_MAX, int(level)))


def speed_to_interval(level: int) -> int:
    """Map a speed level to a tick interval in ms (5 -> 200, 15 -> 80)."""
    return round(260 - clamp_speed(level) * 12)


class GameSession:
    """Owns the snake, food and scores and decides when ``step`` runs.

    Collaborators are injected: ``scheduler`` provides the repeating tick,
    ``store`` the best score slot, ``feedback`` the sound cues and
    ``on_change`` is called with the session after every state change so a
    renderer can repaint.
    """

    def __init__(
        self,
        scheduler: Scheduler,
        *,
        grid: Grid | None = None,
        store: ScoreStore | None = None,
        feedback: Feedback | None = None,
        on_change: Callable[[GameSession], None] | None = None,
        rng: random.Random | None = None,
        speed: int = SPEED_DEFAULT,
    ) -> None:
        self.grid = grid or Grid()
        if self.grid.capacity < 2:
            raise ValueError("grid needs room for the snake and one food")
        self.scheduler = scheduler
        self.store = store or MemoryScoreStore()
        self.feedback = SafeFeedback(feedback)
        self.on_change = on_change
        self.rng = rng or random.Random()
        self.speed = clamp_speed(speed)

        self.best_score: int = self.store.load()
        self._timer: TimerHandle | None = None
        self._reset()

    # --- State --------------------------------------------------------

    def _reset(self) -> None:
        self.snake = Snake([self.grid.center], Direction.RIGHT)
        self.score = 0
        self.food: Cell | None = self.spawn_food()
        self.state = SessionState.IDLE
        self.last_outcome: Outcome | None = None

    def spawn_food(self) -> Cell:
        return spawn_food(self.snake, self.grid, self.rng)

    @property
    def direction(self) -> Direction:
        return self.snake.direction

    @property
    def pending_direction(self) -> Direction:
        return self.snake.pending_direction

    @property
    def interval_ms(self) -> int:
        return speed_to_interval(self.speed)

    @property
    def fresh(self) -> bool:
        return self.score == 0 and len(self.snake) == 1

    def _notify(self) -> None:
        if self.on_change is not None:
            self.on_change(self)

    # --- Timer --------------------------------------------------------

    def _run_timer(self) -> None:
        self._cancel_timer()
        self._timer = self.scheduler.every(self.interval_ms, self.step)

    def _cancel_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    # --- Actions ------------------------------------------------------

    def set_next_direction(self, direction: Direction) -> bool:
        return self.snake.set_next_direction(direction)

    def start(self) -> bool:
        if self.state is not SessionState.IDLE:
            return False
        self._run_timer()
        self.state = SessionState.RUNNING
        logger.info("session started at %d ms per tick", self.interval_ms)
        self.feedback.on_start()
        self._notify()
        return True

    def pause(self) -> bool:
        if self.state is not SessionState.RUNNING:
            return False
        self._cancel_timer()
        self.state = SessionState.PAUSED
        self.feedback.on_pause_resume(False)
        self._notify()
        return True

    def resume(self) -> bool:
        if self.state is not SessionState.PAUSED:
            return False
        self._run_timer()
        self.state = SessionState.RUNNING
        self.feedback.on_pause_resume(True)
        self._notify()
        return True

    def toggle(self) -> bool:
        """Start, pause or resume depending on where the session is."""
        if self.state is SessionState.IDLE and self.fresh:
            return self.start()
        if self.state is SessionState.RUNNING:
            return self.pause()
        if self.state is SessionState.PAUSED:
            return self.resume()
        if self.state is SessionState.GAME_OVER:
            self.restart()
            return self.start()
        return False

    def restart(self) -> bool:
        self._cancel_timer()
        self._reset()
        logger.info("session reset, best score %d", self.best_score)
        self._notify()
        return True

    def set_speed(self, level: int) -> int:
        """Change the tick rate; a running timer is re-armed in place."""
        self.speed = clamp_speed(level)
        if self.state is SessionState.RUNNING:
            self._run_timer()
        self._notify()
        return self.speed

    # --- Tick ---------------------------------------------------------

    def step(self) -> StepResult | None:
        if self.state is not SessionState.RUNNING:
            return None

        result = advance(
            self.snake,
            self.food,
            self.grid,
            lambda body: spawn_food(body, self.grid, self.rng),
        )
        self.last_outcome = result.outcome
        if result.outcome.grew:
            self.score += 1
            # None once the body covers the board: there is no free cell left
            self.food = result.food
            self.feedback.on_eat()
        if result.outcome.fatal:
            self._game_over()
        self._notify()
        return result

    def _game_over(self) -> None:
        self._cancel_timer()
        self.state = SessionState.GAME_OVER
        logger.info("game over (%s) with score %d", self.last_outcome.value, self.score)
        if self.score > self.best_score:
            self.best_score = self.score
            self.store.save(self.best_score)
        self.feedback.on_game_over()
