"""Tests for BaseScheduler ABC."""

import pytest

from pigro.strategies.base import BaseScheduler, check_wakeup
from pigro.timers import LoopTimer


class Dummy(BaseScheduler):
    def call_with(self, context, args, kwargs): ...

    def halt(self, wakeup=False): ...

    def clear(self): ...

    @property
    def pending(self):
        return 0


def handler(*args):
    return args


class TestBaseScheduler:
    def test_cannot_instantiate(self):
        with pytest.raises(TypeError):
            BaseScheduler(handler, 1)  # type: ignore[abstract]

    def test_timeout_validation(self):
        with pytest.raises(ValueError, match="timeout must be non-negative"):
            Dummy(handler, -5)

    def test_func_validation(self):
        with pytest.raises(TypeError, match="func must be callable"):
            Dummy("not callable", 5)  # type: ignore[arg-type]

    def test_default_timer(self):
        assert isinstance(Dummy(handler, 5).timer, LoopTimer)

    def test_resolve_prefers_bound_context(self):
        bound = object()
        assert Dummy(handler, 5, bound).resolve("other") is bound
        assert Dummy(handler, 5).resolve("other") == "other"
        assert Dummy(handler, 5).resolve(None) is None

    def test_run_now(self):
        assert Dummy(handler, 5).run_now(None, (1, 2), {}) == (1, 2)
        assert Dummy(handler, 5, "ctx").run_now("other", (1,), {}) == ("ctx", 1)

    def test_repr(self):
        d = Dummy(handler, 1.0)
        assert repr(d) == "Dummy(func=handler, timeout=1.0, stopped=False)"


class TestCheckWakeup:
    @pytest.mark.parametrize("value", [True, False, None, "all"])
    def test_accepted(self, value):
        assert check_wakeup(value) == value

    @pytest.mark.parametrize("value", ["last", 1, 0.5])
    def test_rejected(self, value):
        with pytest.raises(ValueError, match="wakeup must be"):
            check_wakeup(value)
