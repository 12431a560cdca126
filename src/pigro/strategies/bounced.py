"""Debounce scheduler: every call restarts the timer."""

import logging
from collections.abc import Callable
from functools import partial
from typing import Any

from pigro.record import Invocation
from pigro.strategies.base import BaseScheduler, Wakeup
from pigro.timers import Timer

logger = logging.getLogger(__name__)


class BouncedScheduler(BaseScheduler):
    """Debounce with a single pending slot.

    How it works:
        - Every call replaces the pending payload, cancels the live timer and
          schedules a new one.
        - Only the payload of the most recent call ever fires, ``timeout``
          milliseconds after that call.

    Example::

        timeout=100ms

        t=0    call(1)  -> timer at t=100
        t=10   call(2)  -> cancel, timer at t=110
        t=20   call(3)  -> cancel, timer at t=120
        t=120  expire   -> func(3)

    Each timer carries the generation (``run_id``) it was scheduled under and
    does nothing if a newer call has bumped the generation since, so a stale
    timer never fires even if the host timer cancels lazily.
    """

    __slots__ = ("_record", "run_id", "waiting")

    def __init__(
        self,
        func: Callable[..., Any],
        timeout: float,
        context: Any = None,
        timer: Timer | None = None,
    ) -> None:
        super().__init__(func, timeout, context, timer)
        self.waiting = False
        self.run_id = 0
        self._record: Invocation | None = None

    @property
    def pending(self) -> int:
        return int(self.waiting)

    def call_with(self, context: Any, args: tuple[Any, ...], kwargs: dict[str, Any]) -> Any:
        if self.stopped:
            return self.run_now(context, args, kwargs)

        self._cancel()
        self.run_id += 1
        record = self.capture(context, args, kwargs)
        self._record = record
        self.waiting = True
        record.handle = self.timer.schedule(self.timeout, partial(self._expire, self.run_id))
        logger.debug("%r restarted, generation %d", self, self.run_id)
        return None

    def halt(self, wakeup: Wakeup = False) -> None:
        self._cancel()
        self.run_id += 1
        record = self._record
        if wakeup and self.waiting and record is not None:
            self.clear()
            logger.debug("%r flushing pending call", self)
            self.fire(record)
            return
        self.clear()

    def clear(self) -> None:
        self.waiting = False
        self._record = None

    def _cancel(self) -> None:
        record = self._record
        if record is not None and record.handle is not None:
            self.timer.cancel(record.handle)
            record.handle = None

    def _expire(self, run_id: int) -> None:
        if run_id != self.run_id:
            logger.debug("%r dropped stale timer from generation %d", self, run_id)
            return
        record = self._record
        self.clear()
        if record is not None:
            self.fire(record)
