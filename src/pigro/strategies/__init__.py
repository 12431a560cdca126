from pigro.strategies.base import BaseScheduler
from pigro.strategies.bounced import BouncedScheduler
from pigro.strategies.delayed import DelayedScheduler
from pigro.strategies.lazy import LazyScheduler
from pigro.strategies.registry import build_scheduler

__all__ = [
    "BaseScheduler",
    "BouncedScheduler",
    "DelayedScheduler",
    "LazyScheduler",
    "build_scheduler",
]
