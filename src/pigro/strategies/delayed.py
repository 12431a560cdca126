"""Queue scheduler: every call fires on its own, in arrival order."""

import logging
from collections import deque
from collections.abc import Callable
from typing import Any

from pigro.record import Invocation
from pigro.strategies.base import BaseScheduler, Wakeup
from pigro.timers import Timer

logger = logging.getLogger(__name__)


class DelayedScheduler(BaseScheduler):
    """FIFO queue of independently timed calls.

    Every call appends a record and schedules its own timer. All timers share
    the same delay, so whichever timer fires pops the head of the queue; the
    records therefore run in arrival order regardless of how the host timer
    orders equal deadlines.

    Example::

        timeout=100ms

        t=0    call(a)  -> queue [a]
        t=20   call(b)  -> queue [a, b]
        t=40   call(c)  -> queue [a, b, c]
        t=100  expire   -> func(a)
        t=120  expire   -> func(b)
        t=140  expire   -> func(c)

    Complexity:
        Time:   O(1) per call and per firing
        Memory: O(n) outstanding records
    """

    __slots__ = ("_queue",)

    def __init__(
        self,
        func: Callable[..., Any],
        timeout: float,
        context: Any = None,
        timer: Timer | None = None,
    ) -> None:
        super().__init__(func, timeout, context, timer)
        self._queue: deque[Invocation] = deque()

    @property
    def queue_length(self) -> int:
        """Number of queued calls still waiting for their timer."""
        return len(self._queue)

    @property
    def pending(self) -> int:
        return len(self._queue)

    def call_with(self, context: Any, args: tuple[Any, ...], kwargs: dict[str, Any]) -> Any:
        if self.stopped:
            return self.run_now(context, args, kwargs)

        record = self.capture(context, args, kwargs)
        record.handle = self.timer.schedule(self.timeout, self._expire)
        self._queue.append(record)
        logger.debug("%r queued call, %d outstanding", self, len(self._queue))
        return None

    def halt(self, wakeup: Wakeup = False) -> None:
        """Cancel every queued timer.

        With ``wakeup=True`` only the most recently queued call runs before
        the queue is dropped; with ``wakeup="all"`` every queued call runs in
        arrival order.

        The queue is emptied and every timer cancelled before anything runs.
        If a flushed call raises, the exception propagates and the calls
        queued after it are dropped without running.
        """
        records = list(self._queue)
        self._queue.clear()
        for record in records:
            self.timer.cancel(record.handle)
            record.handle = None

        if not records or not wakeup:
            return

        if wakeup == "all":
            logger.debug("%r flushing %d queued calls", self, len(records))
            for record in records:
                self.fire(record)
        else:
            logger.debug("%r flushing last of %d queued calls", self, len(records))
            self.fire(records[-1])

    def clear(self) -> None:
        self.halt(False)

    def _expire(self) -> None:
        if not self._queue:
            logger.debug("%r dropped timer fired after its record was cancelled", self)
            return
        record = self._queue.popleft()
        record.handle = None
        self.fire(record)
