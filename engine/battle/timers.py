"""
Deferred actions and the per-snippet countdown.

Scheduler is a cooperative clock: the game loop advances it with the frame
delta, and due callbacks run inline on the main thread. Nothing here uses
threads or wall-clock time, so tests can drive it with advance().
"""

from __future__ import annotations

import heapq
import itertools
import logging
from typing import Callable, List, Optional, Tuple


logger = logging.getLogger("code_knight.timers")


class ScheduledAction:
    """Handle for a deferred callback. cancel() is safe to call repeatedly."""

    def __init__(self, due: float, callback: Callable[[], None]) -> None:
        self.due = due
        self.callback = callback
        self.cancelled = False
        self.fired = False

    @property
    def pending(self) -> bool:
        return not (self.cancelled or self.fired)

    def cancel(self) -> None:
        self.cancelled = True


class Scheduler:
    """
    Min-heap of deferred callbacks keyed by due time.

    Callbacks due at the same instant run in the order they were scheduled.
    A callback may schedule further actions; those run within the same
    advance() if they fall due before its end.
    """

    def __init__(self) -> None:
        self.now: float = 0.0
        self._heap: List[Tuple[float, int, ScheduledAction]] = []
        self._seq = itertools.count()

    def call_later(self, delay: float, callback: Callable[[], None]) -> ScheduledAction:
        action = ScheduledAction(self.now + max(0.0, float(delay)), callback)
        heapq.heappush(self._heap, (action.due, next(self._seq), action))
        return action

    def advance(self, dt: float) -> int:
        """
        Move the clock forward by `dt` seconds and run everything that falls due.

        Returns the number of callbacks that ran.
        """
        target = self.now + max(0.0, float(dt))
        ran = 0
        while self._heap and self._heap[0][0] <= target:
            due, _, action = heapq.heappop(self._heap)
            if not action.pending:
                continue
            self.now = due
            action.fired = True
            action.callback()
            ran += 1
        self.now = target
        return ran

    # The game loop calls update(dt) on everything.
    update = advance

    def pending_count(self) -> int:
        return sum(1 for _, _, a in self._heap if a.pending)

    def clear(self) -> None:
        for _, _, action in self._heap:
            action.cancel()
        self._heap.clear()


class TimerController:
    """
    Owns at most one countdown.

    schedule() always cancels the previous countdown before installing a new
    one. With enabled=False (practice mode) schedule() only cancels.
    """

    def __init__(self, scheduler: Scheduler, enabled: bool = True) -> None:
        self.scheduler = scheduler
        self.enabled = enabled
        self._handle: Optional[ScheduledAction] = None

    @property
    def active(self) -> bool:
        return self._handle is not None and self._handle.pending

    @property
    def remaining(self) -> Optional[float]:
        """Seconds left on the countdown, or None if nothing is running."""
        if not self.active:
            return None
        return max(0.0, self._handle.due - self.scheduler.now)

    def schedule(self, seconds: float, on_expire: Callable[[], None]) -> Optional[ScheduledAction]:
        self.cancel()
        if not self.enabled:
            return None

        def _fire() -> None:
            self._handle = None
            on_expire()

        self._handle = self.scheduler.call_later(seconds, _fire)
        logger.debug("Countdown scheduled: %.1fs", seconds)
        return self._handle

    def cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
