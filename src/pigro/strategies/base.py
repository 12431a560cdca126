"""Abstract base class that all schedulers must implement."""

import inspect
import logging
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any, Literal

from pigro.record import Invocation
from pigro.timers import LoopTimer, Timer

logger = logging.getLogger(__name__)

Wakeup = bool | Literal["all"] | None


def check_wakeup(wakeup: Wakeup) -> Wakeup:
    if wakeup is None or isinstance(wakeup, bool) or wakeup == "all":
        return wakeup
    raise ValueError(f"wakeup must be a bool, None or 'all', got {wakeup!r}")


class BaseScheduler(ABC):
    """Base class for all schedulers.

    A scheduler owns the pending :class:`Invocation` records of one wrapped
    callable and the timer handles that will fire them. Subclasses decide
    how a call is captured (:meth:`call_with`) and how pending work is
    cancelled or flushed (:meth:`halt`).

    While :attr:`stopped` is set no timer is ever created; how a call is
    handled instead is up to the subclass.

    Args:
        func: The callable to defer.
        timeout: Delay in milliseconds. Must be non-negative.
        context: Bound context. When set it overrides any per-call context.
        timer: Timer capability. Defaults to a :class:`LoopTimer`.
    """

    __slots__ = ("context", "func", "stopped", "timeout", "timer")

    def __init__(
        self,
        func: Callable[..., Any],
        timeout: float,
        context: Any = None,
        timer: Timer | None = None,
    ) -> None:
        if not callable(func):
            raise TypeError(f"func must be callable, got {type(func).__name__}")

        if timeout < 0:
            raise ValueError(f"timeout must be non-negative, got {timeout}")

        self.func = func
        self.timeout = timeout
        self.context = context
        self.timer: Timer = timer or LoopTimer()
        self.stopped = False

    @abstractmethod
    def call_with(self, context: Any, args: tuple[Any, ...], kwargs: dict[str, Any]) -> Any:
        """Capture one call. Returns the result only when it ran synchronously."""

    @abstractmethod
    def halt(self, wakeup: Wakeup = False) -> None:
        """Cancel live timers, optionally flushing pending work first."""

    @abstractmethod
    def clear(self) -> None:
        """Drop whatever pending state :meth:`halt` left behind."""

    @property
    @abstractmethod
    def pending(self) -> int:
        """Number of records waiting for their timer."""

    def resolve(self, context: Any) -> Any:
        return context if self.context is None else self.context

    def capture(self, context: Any, args: tuple[Any, ...], kwargs: dict[str, Any]) -> Invocation:
        return Invocation(self.resolve(context), args, kwargs)

    def run_now(self, context: Any, args: tuple[Any, ...], kwargs: dict[str, Any]) -> Any:
        """Run the callable synchronously with the resolved context."""
        return self.capture(context, args, kwargs).fire(self.func)

    def fire(self, record: Invocation) -> None:
        """Run a record from a timer callback.

        Exceptions are left to the timer's callback boundary.
        """
        logger.debug("%r firing", self)
        result = record.fire(self.func)
        if inspect.isawaitable(result):
            self.timer.spawn(result)

    def __repr__(self) -> str:
        name = getattr(self.func, "__qualname__", repr(self.func))
        return f"{type(self).__name__}(func={name}, timeout={self.timeout}, stopped={self.stopped})"
