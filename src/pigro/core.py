"""Wrapper objects returned to callers, one per control protocol."""

from __future__ import annotations

import logging
from collections.abc import Callable
from functools import update_wrapper
from typing import TYPE_CHECKING, Any, Generic, ParamSpec

from pigro.config import ControlProtocol, DeferConfig, Strategy
from pigro.record import Invocation
from pigro.strategies.base import check_wakeup
from pigro.strategies.delayed import DelayedScheduler
from pigro.strategies.registry import build_scheduler

if TYPE_CHECKING:
    from pigro.strategies.base import BaseScheduler, Wakeup
    from pigro.timers import Timer

logger = logging.getLogger(__name__)

P = ParamSpec("P")


class _Wrapper(Generic[P]):
    """Callable front for a scheduler.

    Calling the wrapper hands the call to the scheduler with no per-call
    context; :meth:`call_with` supplies one explicitly. A context bound at
    construction always wins over the per-call one.
    """

    def __init__(self, scheduler: BaseScheduler, config: DeferConfig) -> None:
        update_wrapper(self, scheduler.func)
        self._scheduler = scheduler
        self._config = config
        self._closed = False

    @property
    def config(self) -> DeferConfig:
        return self._config

    @property
    def scheduler(self) -> BaseScheduler:
        return self._scheduler

    @property
    def func(self) -> Callable[P, Any]:
        return self._scheduler.func

    @property
    def bind_context(self) -> Any:
        return self._scheduler.context

    @property
    def strategy(self) -> Strategy:
        return self._config.strategy

    @property
    def timeout(self) -> float:
        return self._scheduler.timeout

    @property
    def pending(self) -> int:
        """Number of calls waiting for a timer."""
        return self._scheduler.pending

    @property
    def queue_length(self) -> int:
        if not isinstance(self._scheduler, DelayedScheduler):
            raise AttributeError(f"queue_length is only available on delayed wrappers, not {self.strategy.value}")
        return self._scheduler.queue_length

    @property
    def closed(self) -> bool:
        return self._closed

    def __call__(self, *args: P.args, **kwargs: P.kwargs) -> Any:
        self._ensure_open()
        return self._scheduler.call_with(None, args, kwargs)

    def call_with(self, context: Any, /, *args: P.args, **kwargs: P.kwargs) -> Any:
        """Call with an explicit per-call context."""
        self._ensure_open()
        return self._scheduler.call_with(context, args, kwargs)

    def close(self) -> None:
        """Discard pending calls without running them. Further use raises."""
        if self._closed:
            return
        self._closed = True
        self._scheduler.halt(False)
        self._scheduler.clear()
        logger.debug("%r closed", self)

    def __enter__(self) -> _Wrapper[P]:
        return self

    def __exit__(self, *_: Any) -> None:
        self.close()

    def _ensure_open(self) -> None:
        if self._closed:
            raise RuntimeError(f"{type(self).__name__} is closed")

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(func={getattr(self._scheduler.func, '__qualname__', self._scheduler.func)!r}, "
            f"timeout={self._scheduler.timeout}, "
            f"strategy={self._config.strategy.value}, "
            f"closed={self._closed})"
        )


class Deferred(_Wrapper[P]):
    """Wrapper with the stop/resume control surface.

    Stopping cancels outstanding timers and stays in effect until resumed;
    while stopped no timer is created and calls run synchronously.
    """

    @property
    def stopped(self) -> bool:
        return self._scheduler.stopped

    def toggle(self, enable: bool | None = None, wakeup: Wakeup = False) -> None:
        """Enable or disable scheduling; flips the current state when *enable* is None.

        When disabling, *wakeup* selects what runs before pending calls are
        dropped: ``True`` runs the pending (or last queued) call, ``"all"``
        runs every queued call in arrival order.
        """
        self._ensure_open()
        check_wakeup(wakeup)
        if enable is None:
            enable = self._scheduler.stopped

        if enable:
            if self._scheduler.stopped:
                self._scheduler.clear()
                self._scheduler.stopped = False
                logger.debug("%r resumed", self)
            return

        # Stopped before flushing: calls made by the flushed callable run
        # synchronously, and a raising callable still leaves us stopped.
        self._scheduler.stopped = True
        logger.debug("%r stopped (wakeup=%r)", self, wakeup)
        self._scheduler.halt(wakeup)

    def stop(self, wakeup: Wakeup = False) -> None:
        self.toggle(False, wakeup)

    def resume(self) -> None:
        self.toggle(True)

    def immediate(self, context: Any = None, /, *args: P.args, **kwargs: P.kwargs) -> Any:
        """Run the callable now, ignoring anything pending.

        The first positional argument is always taken as the context, never
        as an argument: ``immediate("now")`` passes ``"now"`` as the context.
        When a context is bound it takes precedence, so ``"now"`` is dropped
        and the callable receives only the bound context. Pass ``None`` first
        to send arguments, as in ``immediate(None, "now")``.
        """
        self._ensure_open()
        return self._scheduler.run_now(context, args, kwargs)


class Resettable(_Wrapper[P]):
    """Wrapper with the reset/exec control surface.

    Resetting cancels and drops pending calls but scheduling carries on for
    the next call; there is no stopped state.
    """

    def reset(self, wakeup: Wakeup = False) -> None:
        self._ensure_open()
        check_wakeup(wakeup)
        logger.debug("%r reset (wakeup=%r)", self, wakeup)
        self._scheduler.halt(wakeup)
        # A flushing halt has already dropped the pending state; clearing
        # again would discard calls made by the flushed callable.
        if not wakeup:
            self._scheduler.clear()

    def exec(self, *args: P.args, **kwargs: P.kwargs) -> Any:
        """Run the callable now with the bound context."""
        self._ensure_open()
        return self._scheduler.run_now(None, args, kwargs)

    def exec_with(self, context: Any, /, *args: P.args, **kwargs: P.kwargs) -> Any:
        """Run the callable now with *context*, overriding any bound context."""
        self._ensure_open()
        return Invocation(context, args, kwargs).fire(self._scheduler.func)


PROTOCOLS: dict[ControlProtocol, type[_Wrapper[Any]]] = {
    ControlProtocol.STOP_RESUME: Deferred,
    ControlProtocol.RESET_EXEC: Resettable,
}


def defer(
    func: Callable[P, Any],
    config: DeferConfig | None = None,
    context: Any = None,
    *,
    timer: Timer | None = None,
) -> _Wrapper[P]:
    """Wrap *func* according to *config*.

    Returns a :class:`Deferred` or a :class:`Resettable` depending on
    ``config.protocol``.
    """
    config = config or DeferConfig()
    scheduler = build_scheduler(func, config, context, timer)
    return PROTOCOLS[config.protocol](scheduler, config)
