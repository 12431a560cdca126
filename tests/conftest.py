"""Shared fixtures for pigro tests."""

import heapq
import itertools
from dataclasses import dataclass, field
from typing import Any

import pytest

from pigro.timers import Timer


@dataclass(order=True)
class _Handle:
    when: float
    seq: int
    callback: Any = field(compare=False)
    cancelled: bool = field(default=False, compare=False)


class ManualTimer(Timer):
    """Timer driven by :meth:`tick` instead of a real clock."""

    def __init__(self) -> None:
        self.now = 0.0
        self.spawned: list[Any] = []
        self._heap: list[_Handle] = []
        self._seq = itertools.count()

    def schedule(self, delay_ms, callback):
        handle = _Handle(self.now + delay_ms, next(self._seq), callback)
        heapq.heappush(self._heap, handle)
        return handle

    def cancel(self, handle):
        handle.cancelled = True

    def spawn(self, awaitable):
        self.spawned.append(awaitable)
        return awaitable

    @property
    def live(self) -> int:
        return sum(1 for h in self._heap if not h.cancelled)

    def tick(self, ms: float) -> None:
        target = self.now + ms
        while self._heap and self._heap[0].when <= target:
            handle = heapq.heappop(self._heap)
            if handle.cancelled:
                continue
            self.now = handle.when
            handle.cancelled = True
            handle.callback()
        self.now = target


class LaggingTimer(ManualTimer):
    """Timer whose cancellation never takes effect."""

    def cancel(self, handle):
        pass


class Spy:
    """Records every call together with the clock time it happened at."""

    def __init__(self, clock: ManualTimer | None = None) -> None:
        self._clock = clock
        self.calls: list[tuple[tuple[Any, ...], dict[str, Any]]] = []
        self.times: list[float] = []

    def __call__(self, *args, **kwargs):
        self.calls.append((args, kwargs))
        if self._clock is not None:
            self.times.append(self._clock.now)
        return len(self.calls)

    @property
    def call_count(self) -> int:
        return len(self.calls)

    @property
    def args(self) -> list[tuple[Any, ...]]:
        return [args for args, _ in self.calls]


@pytest.fixture
def clock():
    return ManualTimer()


@pytest.fixture
def lagging_clock():
    return LaggingTimer()


@pytest.fixture
def spy(clock):
    return Spy(clock)
