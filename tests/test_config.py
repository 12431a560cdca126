"""Tests for DeferConfig, Strategy and ControlProtocol."""

import pytest

from pigro.config import ControlProtocol, DeferConfig, Strategy


class TestStrategy:
    def test_values(self):
        assert Strategy.LAZY == "lazy"
        assert Strategy.BOUNCED == "bounced"
        assert Strategy.DELAYED == "delayed"

    def test_all_are_str(self):
        for s in Strategy:
            assert isinstance(s, str)


class TestControlProtocol:
    def test_values(self):
        assert ControlProtocol.STOP_RESUME == "stop_resume"
        assert ControlProtocol.RESET_EXEC == "reset_exec"


class TestDeferConfig:
    def test_defaults(self):
        cfg = DeferConfig()
        assert cfg.timeout == 100
        assert cfg.strategy is Strategy.LAZY
        assert cfg.first is False
        assert cfg.protocol is ControlProtocol.STOP_RESUME

    def test_zero_timeout_allowed(self):
        assert DeferConfig(timeout=0).timeout == 0

    def test_string_values_coerced(self):
        cfg = DeferConfig(strategy="bounced", protocol="reset_exec")  # type: ignore[arg-type]
        assert cfg.strategy is Strategy.BOUNCED
        assert cfg.protocol is ControlProtocol.RESET_EXEC

    def test_unknown_strategy_raises(self):
        with pytest.raises(ValueError):
            DeferConfig(strategy="sideways")  # type: ignore[arg-type]

    def test_negative_timeout_raises(self):
        with pytest.raises(ValueError, match="timeout must be a non-negative"):
            DeferConfig(timeout=-1)

    def test_infinite_timeout_raises(self):
        with pytest.raises(ValueError, match="timeout must be a non-negative"):
            DeferConfig(timeout=float("inf"))

    def test_non_numeric_timeout_raises(self):
        with pytest.raises(TypeError, match="timeout must be a number"):
            DeferConfig(timeout="100")  # type: ignore[arg-type]

    def test_bool_timeout_raises(self):
        with pytest.raises(TypeError, match="timeout must be a number"):
            DeferConfig(timeout=True)

    @pytest.mark.parametrize("strategy", [Strategy.BOUNCED, Strategy.DELAYED])
    def test_first_only_for_lazy(self, strategy):
        with pytest.raises(ValueError, match="first is only supported by the lazy strategy"):
            DeferConfig(strategy=strategy, first=True)

    def test_frozen(self):
        cfg = DeferConfig()
        with pytest.raises(AttributeError):
            cfg.timeout = 5.0  # type: ignore[misc]
