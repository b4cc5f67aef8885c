# timers.py - deadline-based, cancellable timers driven by the rerun loop
#
# Streamlit has no event loop of its own, so nothing fires in the background.
# Each script run calls `pump()`, which fires every timer whose deadline has
# passed. Between runs the page sleeps until `seconds_until_next()`.

from __future__ import annotations

import heapq
import itertools
import logging
import time
from typing import Callable, List, Optional

logger = logging.getLogger(__name__)


class Timer:
    """Handle for one scheduled callback. Cancelling is idempotent."""

    def __init__(self, deadline: float, callback: Callable[[], None],
                 interval: Optional[float] = None, name: Optional[str] = None):
        self.deadline = deadline
        self.callback = callback
        self.interval = interval
        self.name = name or getattr(callback, "__name__", "timer")
        self.cancelled = False

    @property
    def repeating(self) -> bool:
        return self.interval is not None

    def cancel(self) -> None:
        self.cancelled = True

    def __repr__(self) -> str:
        state = "cancelled" if self.cancelled else f"due={self.deadline:.3f}"
        return f"<Timer {self.name} {state}>"


class TimerQueue:
    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self.clock = clock
        self._heap: List[tuple] = []
        self._seq = itertools.count()

    def _push(self, timer: Timer) -> Timer:
        heapq.heappush(self._heap, (timer.deadline, next(self._seq), timer))
        return timer

    def call_later(self, delay: float, callback: Callable[[], None],
                   name: Optional[str] = None) -> Timer:
        return self._push(Timer(self.clock() + delay, callback, name=name))

    def call_every(self, interval: float, callback: Callable[[], None],
                   name: Optional[str] = None) -> Timer:
        if interval <= 0:
            raise ValueError(f"interval must be positive, got {interval!r}")
        return self._push(Timer(self.clock() + interval, callback, interval, name))

    def cancel_all(self) -> None:
        for _, _, timer in self._heap:
            timer.cancel()
        self._heap.clear()

    def _drop_cancelled(self) -> None:
        while self._heap and self._heap[0][2].cancelled:
            heapq.heappop(self._heap)

    @property
    def pending(self) -> List[Timer]:
        return [t for _, _, t in sorted(self._heap) if not t.cancelled]

    def next_deadline(self) -> Optional[float]:
        self._drop_cancelled()
        return self._heap[0][0] if self._heap else None

    def seconds_until_next(self, now: Optional[float] = None) -> Optional[float]:
        deadline = self.next_deadline()
        if deadline is None:
            return None
        now = self.clock() if now is None else now
        return max(0.0, deadline - now)

    def pump(self, now: Optional[float] = None) -> int:
        """Fire every timer due at `now`, oldest deadline first.

        A repeating timer that fell behind fires once for each interval that
        elapsed, so a slow rerun still counts every second.
        """
        now = self.clock() if now is None else now
        fired = 0
        while True:
            self._drop_cancelled()
            if not self._heap or self._heap[0][0] > now:
                break
            _, _, timer = heapq.heappop(self._heap)
            if timer.repeating:
                timer.deadline += timer.interval
                self._push(timer)
            logger.debug("Firing %r", timer)
            timer.callback()
            fired += 1
        return fired
