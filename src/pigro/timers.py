"""Timer capability used by the schedulers.

A scheduler only needs two things from its host: schedule a callback once
after a delay, and cancel it. :class:`LoopTimer` provides both on top of an
``asyncio`` event loop. Hosts with their own clock can subclass :class:`Timer`.
"""

import asyncio
import logging
from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable
from typing import Any

logger = logging.getLogger(__name__)


class Timer(ABC):
    """Fire-once delayed callbacks with cancellation.

    Callbacks scheduled with equal delays must fire in the order they were
    scheduled. Cancelling a handle whose callback already ran is a no-op.
    """

    @abstractmethod
    def schedule(self, delay_ms: float, callback: Callable[[], Any]) -> Any:
        """Run *callback* once after *delay_ms* milliseconds and return a handle."""

    @abstractmethod
    def cancel(self, handle: Any) -> None:
        """Prevent the callback behind *handle* from running."""

    def spawn(self, awaitable: Awaitable[Any]) -> Any:
        """Drive an awaitable produced by a firing to completion."""
        raise TypeError(f"{type(self).__name__} cannot run awaitable results")


class LoopTimer(Timer):
    """:class:`Timer` backed by ``loop.call_later``.

    Without an explicit loop, every ``schedule`` and ``spawn`` runs on the
    loop that is running at that moment, so a wrapper built at import time
    keeps working across successive ``asyncio.run`` calls.
    """

    __slots__ = ("_loop", "_tasks")

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop
        self._tasks: set[asyncio.Task[Any]] = set()

    def _get_loop(self) -> asyncio.AbstractEventLoop:
        if self._loop is None:
            return asyncio.get_running_loop()
        return self._loop

    def schedule(self, delay_ms: float, callback: Callable[[], Any]) -> asyncio.TimerHandle:
        return self._get_loop().call_later(delay_ms / 1000, callback)

    def cancel(self, handle: asyncio.TimerHandle) -> None:
        handle.cancel()

    def spawn(self, awaitable: Awaitable[Any]) -> asyncio.Task[Any]:
        task = self._get_loop().create_task(_await(awaitable))
        # The loop keeps only weak references to tasks.
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        logger.debug("Spawned task %r for awaitable result", task)
        return task

    def __repr__(self) -> str:
        return f"LoopTimer(loop={self._loop!r})"


async def _await(awaitable: Awaitable[Any]) -> Any:
    return await awaitable
