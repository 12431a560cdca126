"""The unit of deferred work: a captured call waiting for its timer."""

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any


@dataclass(slots=True)
class Invocation:
    """Context and arguments captured from one call, plus its timer handle.

    ``context`` is passed as the first positional argument when it is not
    ``None``, the same way an unbound method receives ``self``.
    """

    context: Any = None
    args: tuple[Any, ...] = ()
    kwargs: dict[str, Any] = field(default_factory=dict)
    handle: Any = None

    def fire(self, func: Callable[..., Any]) -> Any:
        if self.context is None:
            return func(*self.args, **self.kwargs)
        return func(self.context, *self.args, **self.kwargs)
