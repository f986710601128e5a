"""Timed race actions and the queue that fires them."""

import heapq
import itertools
import logging
import time
from dataclasses import dataclass, field
from typing import Callable

logger = logging.getLogger(__name__)


@dataclass(order=True)
class ScheduledAction:
    """An action due at a point on the scheduler clock.

    Actions are ordered by due time, then by the order they were scheduled in.
    """

    due: float
    seq: int
    label: str = field(default="", compare=False)
    action: Callable[[], None] = field(default=lambda: None, compare=False, repr=False)


class RaceScheduler:
    """Single-threaded queue of delayed actions on a virtual clock.

    Races push their steps here and one loop fires them in due-time order.
    Several races can share a scheduler; their steps then interleave by due
    time, and actions due at the same instant fire in scheduling order.
    """

    def __init__(
        self,
        realtime: bool = False,
        sleep: Callable[[float], None] = time.sleep,
    ):
        """Initialize the scheduler.

        Args:
            realtime: Sleep for the gap between due times instead of jumping the clock
            sleep: Sleep function used in realtime mode
        """
        self.realtime = realtime
        self._sleep = sleep
        self._queue: list[ScheduledAction] = []
        self._counter = itertools.count()
        self.now = 0.0

    @property
    def pending(self) -> int:
        """Number of actions waiting to fire."""
        return len(self._queue)

    def schedule(self, delay: float, label: str, action: Callable[[], None]) -> ScheduledAction:
        """Queue an action to fire ``delay`` seconds after the current clock time.

        Args:
            delay: Seconds from now, must not be negative
            label: Short description used in logs
            action: Zero-argument callable

        Returns:
            The queued action
        """
        if delay < 0:
            raise ValueError(f"delay must not be negative, got {delay}")

        scheduled = ScheduledAction(
            due=self.now + delay,
            seq=next(self._counter),
            label=label,
            action=action,
        )
        heapq.heappush(self._queue, scheduled)
        logger.debug(f"Scheduled '{label}' at t={scheduled.due:.2f}")
        return scheduled

    def run_until(self, deadline: float) -> int:
        """Fire every action due at or before ``deadline``.

        Returns:
            Number of actions fired
        """
        fired = 0
        while self._queue and self._queue[0].due <= deadline:
            self._fire(heapq.heappop(self._queue))
            fired += 1
        return fired

    def run(self) -> int:
        """Fire actions until the queue is empty.

        Returns:
            Number of actions fired
        """
        fired = 0
        while self._queue:
            self._fire(heapq.heappop(self._queue))
            fired += 1
        logger.debug(f"Scheduler drained after {fired} actions, t={self.now:.2f}")
        return fired

    def _fire(self, scheduled: ScheduledAction) -> None:
        wait = scheduled.due - self.now
        if self.realtime and wait > 0:
            self._sleep(wait)
        self.now = max(self.now, scheduled.due)
        logger.debug(f"Firing '{scheduled.label}' at t={self.now:.2f}")
        scheduled.action()
