"""pigro — lazy, bounced and delayed calls for Python.

Wraps a callable so that calling it schedules the work for later instead of
running it now. Three strategies share one control surface:

* lazy (throttle): one firing per window, the last call's arguments win.
* bounced (debounce): fires once calls stop arriving for the timeout.
* delayed (queue): every call fires, in order, after the timeout.

Basic usage:

    from pigro import make_bounced

    save_later = make_bounced(save, 250)

    save_later(doc)
    save_later(doc)      # restarts the 250 ms timer
    save_later.stop(True)  # run the pending call now and stop scheduling

Decorator usage:

    from pigro import lazy

    @lazy(timeout=100, first=True)
    def redraw(region) -> None:
        ...

Timers run on the current ``asyncio`` event loop unless a custom
:class:`~pigro.timers.Timer` is passed.
"""

import logging

from pigro.config import ControlProtocol, DeferConfig, Strategy
from pigro.core import Deferred, Resettable, defer
from pigro.decorator import bounced, delayed, lazy, make_bounced, make_delayed, make_lazy
from pigro.record import Invocation
from pigro.strategies.base import BaseScheduler
from pigro.strategies.bounced import BouncedScheduler
from pigro.strategies.delayed import DelayedScheduler
from pigro.strategies.lazy import LazyScheduler
from pigro.timers import LoopTimer, Timer

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "BaseScheduler",
    "BouncedScheduler",
    "ControlProtocol",
    "DeferConfig",
    "Deferred",
    "DelayedScheduler",
    "Invocation",
    "LazyScheduler",
    "LoopTimer",
    "Resettable",
    "Strategy",
    "Timer",
    "bounced",
    "defer",
    "delayed",
    "lazy",
    "make_bounced",
    "make_delayed",
    "make_lazy",
]

__version__ = "0.1.0"
