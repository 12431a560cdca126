"""Factory and decorator API for wrapping callables."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, ParamSpec, TypeVar, overload

from pigro.config import ControlProtocol, DeferConfig, Strategy
from pigro.core import _Wrapper, defer

if TYPE_CHECKING:
    from pigro.timers import Timer

P = ParamSpec("P")
F = TypeVar("F", bound=Callable[..., Any])


def make_lazy(
    func: Callable[P, Any],
    timeout: float,
    context: Any = None,
    *,
    first: bool = False,
    protocol: ControlProtocol = ControlProtocol.STOP_RESUME,
    timer: Timer | None = None,
) -> _Wrapper[P]:
    """Throttle *func*: at most one call per *timeout* milliseconds.

    Args:
        func: The callable to wrap.
        timeout: Window length in milliseconds.
        context: Bound context, passed as the first argument on every call.
        first: Fire with the first call's arguments of each window instead
            of the last one's.
        protocol: Control surface of the returned wrapper.
        timer: Timer capability, defaults to the running ``asyncio`` loop.
    """
    config = DeferConfig(timeout=timeout, strategy=Strategy.LAZY, first=first, protocol=protocol)
    return defer(func, config, context, timer=timer)


def make_bounced(
    func: Callable[P, Any],
    timeout: float,
    context: Any = None,
    *,
    protocol: ControlProtocol = ControlProtocol.STOP_RESUME,
    timer: Timer | None = None,
) -> _Wrapper[P]:
    """Debounce *func*: fire once calls have stopped for *timeout* milliseconds."""
    config = DeferConfig(timeout=timeout, strategy=Strategy.BOUNCED, protocol=protocol)
    return defer(func, config, context, timer=timer)


def make_delayed(
    func: Callable[P, Any],
    timeout: float,
    context: Any = None,
    *,
    protocol: ControlProtocol = ControlProtocol.STOP_RESUME,
    timer: Timer | None = None,
) -> _Wrapper[P]:
    """Queue *func*: every call runs *timeout* milliseconds later, in order."""
    config = DeferConfig(timeout=timeout, strategy=Strategy.DELAYED, protocol=protocol)
    return defer(func, config, context, timer=timer)


@overload
def lazy(func: F, /) -> _Wrapper[Any]: ...


@overload
def lazy(
    *,
    timeout: float = 100,
    context: Any = None,
    first: bool = False,
    protocol: ControlProtocol = ControlProtocol.STOP_RESUME,
    timer: Timer | None = None,
) -> Callable[[F], _Wrapper[Any]]: ...


def lazy(
    func: F | None = None,
    /,
    *,
    timeout: float = 100,
    context: Any = None,
    first: bool = False,
    protocol: ControlProtocol = ControlProtocol.STOP_RESUME,
    timer: Timer | None = None,
) -> _Wrapper[Any] | Callable[[F], _Wrapper[Any]]:
    """Decorator form of :func:`make_lazy`.

    Examples:
    ```python
        @lazy(timeout=250, first=True)
        def save(document) -> None:
            ...

        @lazy
        def redraw() -> None:
            ...
    ```
    """

    def decorator(fn: F) -> _Wrapper[Any]:
        return make_lazy(fn, timeout, context, first=first, protocol=protocol, timer=timer)

    if func is not None:
        return decorator(func)

    return decorator


@overload
def bounced(func: F, /) -> _Wrapper[Any]: ...


@overload
def bounced(
    *,
    timeout: float = 100,
    context: Any = None,
    protocol: ControlProtocol = ControlProtocol.STOP_RESUME,
    timer: Timer | None = None,
) -> Callable[[F], _Wrapper[Any]]: ...


def bounced(
    func: F | None = None,
    /,
    *,
    timeout: float = 100,
    context: Any = None,
    protocol: ControlProtocol = ControlProtocol.STOP_RESUME,
    timer: Timer | None = None,
) -> _Wrapper[Any] | Callable[[F], _Wrapper[Any]]:
    """Decorator form of :func:`make_bounced`."""

    def decorator(fn: F) -> _Wrapper[Any]:
        return make_bounced(fn, timeout, context, protocol=protocol, timer=timer)

    if func is not None:
        return decorator(func)

    return decorator


@overload
def delayed(func: F, /) -> _Wrapper[Any]: ...


@overload
def delayed(
    *,
    timeout: float = 100,
    context: Any = None,
    protocol: ControlProtocol = ControlProtocol.STOP_RESUME,
    timer: Timer | None = None,
) -> Callable[[F], _Wrapper[Any]]: ...


def delayed(
    func: F | None = None,
    /,
    *,
    timeout: float = 100,
    context: Any = None,
    protocol: ControlProtocol = ControlProtocol.STOP_RESUME,
    timer: Timer | None = None,
) -> _Wrapper[Any] | Callable[[F], _Wrapper[Any]]:
    """Decorator form of :func:`make_delayed`."""

    def decorator(fn: F) -> _Wrapper[Any]:
        return make_delayed(fn, timeout, context, protocol=protocol, timer=timer)

    if func is not None:
        return decorator(func)

    return decorator
