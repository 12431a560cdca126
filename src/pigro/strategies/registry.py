"""Maps each ``Strategy`` enum member to a callable that builds a ``BaseScheduler``.

When you add a new strategy:

1. Add a variant to the ``Strategy`` enum in ``config.py``.
2. Add an entry to ``REGISTRY`` pointing to a factory function or lambda
   that constructs the concrete scheduler from the wrapped callable, a
   :class:`DeferConfig`, the bound context and the timer.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from pigro.config import DeferConfig, Strategy
from pigro.strategies.base import BaseScheduler
from pigro.strategies.bounced import BouncedScheduler
from pigro.strategies.delayed import DelayedScheduler
from pigro.strategies.lazy import LazyScheduler
from pigro.timers import Timer

SchedulerFactory = Callable[[Callable[..., Any], DeferConfig, Any, Timer | None], BaseScheduler]

REGISTRY: dict[Strategy, SchedulerFactory] = {
    Strategy.LAZY: lambda func, cfg, ctx, timer: LazyScheduler(
        func,
        cfg.timeout,
        ctx,
        timer,
        first=cfg.first,
    ),
    Strategy.BOUNCED: lambda func, cfg, ctx, timer: BouncedScheduler(func, cfg.timeout, ctx, timer),
    Strategy.DELAYED: lambda func, cfg, ctx, timer: DelayedScheduler(func, cfg.timeout, ctx, timer),
}


def build_scheduler(
    func: Callable[..., Any],
    config: DeferConfig,
    context: Any = None,
    timer: Timer | None = None,
) -> BaseScheduler:
    """Resolve *config.strategy* to a concrete ``BaseScheduler`` instance."""
    factory = REGISTRY.get(config.strategy)
    if not factory:
        raise ValueError(
            f"Unknown strategy: {config.strategy!r}. Registered: {', '.join(s.value for s in REGISTRY)}"
        )
    return factory(func, config, context, timer)
