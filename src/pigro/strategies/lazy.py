"""Throttle scheduler: one firing per window, window is never restarted."""

import logging
from collections.abc import Callable
from typing import Any

from pigro.record import Invocation
from pigro.strategies.base import BaseScheduler, Wakeup
from pigro.timers import Timer

logger = logging.getLogger(__name__)


class LazyScheduler(BaseScheduler):
    """Throttle with a single pending slot.

    How it works:
        - The first call opens a window and schedules one timer.
        - Calls inside the window overwrite the pending payload (or keep the
          first one when ``first`` is set) without touching the timer.
        - When the timer expires the window closes and the payload fires.

    Example::

        timeout=100ms

        t=0    call(1)  -> open window, timer at t=100
        t=10   call(2)  -> payload is now (2,)
        t=20   call(3)  -> payload is now (3,)
        t=100  expire   -> func(3)

    A stopped scheduler runs calls synchronously. If it was stopped while a
    window was open and nothing was flushed, the window stays open and calls
    are absorbed into the payload until the scheduler is flushed or resumed.
    """

    __slots__ = ("_record", "first", "waiting")

    def __init__(
        self,
        func: Callable[..., Any],
        timeout: float,
        context: Any = None,
        timer: Timer | None = None,
        *,
        first: bool = False,
    ) -> None:
        super().__init__(func, timeout, context, timer)
        self.first = first
        self.waiting = False
        self._record: Invocation | None = None

    @property
    def pending(self) -> int:
        return int(self.waiting)

    def call_with(self, context: Any, args: tuple[Any, ...], kwargs: dict[str, Any]) -> Any:
        if self.waiting:
            if not self.first and self._record is not None:
                record = self.capture(context, args, kwargs)
                record.handle = self._record.handle
                self._record = record
            return None

        if self.stopped:
            return self.run_now(context, args, kwargs)

        record = self.capture(context, args, kwargs)
        self._record = record
        self.waiting = True
        record.handle = self.timer.schedule(self.timeout, self._expire)
        logger.debug("%r opened a window", self)
        return None

    def halt(self, wakeup: Wakeup = False) -> None:
        record = self._record
        if record is not None and record.handle is not None:
            self.timer.cancel(record.handle)
            record.handle = None

        if wakeup and self.waiting and record is not None:
            self.waiting = False
            self._record = None
            logger.debug("%r flushing pending call", self)
            self.fire(record)

    def clear(self) -> None:
        self.waiting = False
        self._record = None

    def _expire(self) -> None:
        record = self._record
        self.waiting = False
        self._record = None
        if record is not None:
            self.fire(record)
