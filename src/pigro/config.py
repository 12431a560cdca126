"""Configuration types for the pigro library."""

import math
from dataclasses import dataclass
from enum import StrEnum


class Strategy(StrEnum):
    """Available deferral strategies.

    LAZY:    Throttle. The first call opens a window, calls inside the window
             update the pending payload, one firing when the window closes.
    BOUNCED: Debounce. Every call restarts the timer, only the most recent
             call fires once calls stop arriving.
    DELAYED: Queue. Every call fires on its own, in arrival order.
    """

    LAZY = "lazy"
    BOUNCED = "bounced"
    DELAYED = "delayed"


class ControlProtocol(StrEnum):
    """Control surface exposed by a wrapper.

    STOP_RESUME: ``stop``/``resume``/``toggle``/``immediate``. Stopping is
                 persistent until resumed.
    RESET_EXEC:  ``reset``/``exec``/``exec_with``. Resetting discards pending
                 work but scheduling stays enabled.
    """

    STOP_RESUME = "stop_resume"
    RESET_EXEC = "reset_exec"


@dataclass(frozen=True, slots=True)
class DeferConfig:
    """Configuration for a deferred wrapper.

    Attributes:
        timeout: Delay in milliseconds. Zero still defers to the next
                 event loop iteration.
        strategy: The deferral strategy to use.
        first: Lazy only. Keep the first call's payload for the window
               instead of the most recent one.
        protocol: The control surface the wrapper exposes.
    """

    timeout: float = 100
    strategy: Strategy = Strategy.LAZY
    first: bool = False
    protocol: ControlProtocol = ControlProtocol.STOP_RESUME

    def __post_init__(self) -> None:
        object.__setattr__(self, "strategy", Strategy(self.strategy))
        object.__setattr__(self, "protocol", ControlProtocol(self.protocol))

        if isinstance(self.timeout, bool) or not isinstance(self.timeout, int | float):
            raise TypeError(f"timeout must be a number, got {type(self.timeout).__name__}")

        if not math.isfinite(self.timeout) or self.timeout < 0:
            raise ValueError(f"timeout must be a non-negative number of milliseconds, got {self.timeout}")

        if self.first and self.strategy is not Strategy.LAZY:
            raise ValueError(f"first is only supported by the lazy strategy, got {self.strategy.value}")
