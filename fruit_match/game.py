# game.py - MatchGame: owns the live session and the timers that drive it
from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass
from functools import partial
from typing import Callable, Optional, Sequence

from . import engine
from .config import FRUITS, Config
from .engine import SessionState
from .timers import Timer, TimerQueue

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Stats:
    time: str
    score: int
    moves: int
    accuracy: int

    @classmethod
    def of(cls, state: SessionState) -> "Stats":
        return cls(state.formatted_time, state.score, state.move_count, state.accuracy)


class MatchGame:
    """Holds the current SessionState and replaces it wholesale on every event.

    The clock ticker and the pending clear-selection belong to one session;
    `restart()` cancels both before dealing a new deck.
    """

    def __init__(self, alphabet: Sequence[str] = FRUITS, config: Optional[Config] = None,
                 clock: Callable[[], float] = time.monotonic,
                 rng: Optional[random.Random] = None):
        self.alphabet = tuple(alphabet)
        self.config = config or Config()
        self.rng = rng
        self.timers = TimerQueue(clock)
        self.generation = 0
        self.state: Optional[SessionState] = None  # set by restart()
        self._ticker: Optional[Timer] = None
        self.restart()

    # ---------------------- Session lifecycle ----------------------
    def restart(self, state: Optional[SessionState] = None) -> None:
        """Throw the current session away and start a fresh one.

        `state` replaces the shuffled deal, e.g. to replay a known layout.
        """
        self.timers.cancel_all()
        self.generation += 1
        self.state = state if state is not None else engine.new_session(self.alphabet, self.rng)
        self._ticker = None
        if self.state.running:
            self._ticker = self.timers.call_every(
                self.config.tick_interval, self._tick, name=f"tick#{self.generation}")
        logger.info("Session %d started with %d tiles", self.generation, len(self.state.deck))

    def activate(self, index: int) -> bool:
        before = self.state
        after = engine.activate(before, index)
        if after is before:
            return False
        self.state = after
        if after.pair_pending:
            self.timers.call_later(
                self.config.resolve_delay,
                partial(self._resolve, self.generation),
                name=f"resolve#{self.generation}",
            )
        if after.complete:
            self._stop_clock()
            stats = self.stats()
            logger.info("Session %d complete: time=%s score=%d moves=%d accuracy=%d%%",
                        self.generation, stats.time, stats.score, stats.moves, stats.accuracy)
        return True

    # ---------------------- Timer callbacks ----------------------
    def _tick(self) -> None:
        self.state = engine.tick(self.state)
        if not self.state.running:
            self._stop_clock()

    def _resolve(self, generation: int) -> None:
        if generation != self.generation:
            logger.debug("Dropped stale clear from session %d", generation)
            return
        self.state = engine.clear_selection(self.state)

    def _stop_clock(self) -> None:
        if self._ticker is not None:
            self._ticker.cancel()
            self._ticker = None

    # ---------------------- Queries ----------------------
    def pump(self, now: Optional[float] = None) -> int:
        return self.timers.pump(now)

    def seconds_until_next(self, now: Optional[float] = None) -> Optional[float]:
        return self.timers.seconds_until_next(now)

    @property
    def clock_running(self) -> bool:
        return self._ticker is not None

    def stats(self) -> Stats:
        return Stats.of(self.state)
