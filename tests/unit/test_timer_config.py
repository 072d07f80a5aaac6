"""Tests for timer configuration."""

import pytest

from smart_timer.errors import InvalidConfiguration
from smart_timer.timer.config import TimerConfig


class TestTimerConfig:
    def test_defaults(self) -> None:
        config = TimerConfig()
        assert config.interval == 200
        assert config.timeout == 2000

    def test_from_dict(self) -> None:
        config = TimerConfig.from_dict({"interval": 50, "timeout": 500})
        assert config.interval == 50
        assert config.timeout == 500

    def test_from_dict_defaults(self) -> None:
        config = TimerConfig.from_dict({"timeout": 500})
        assert config.interval == 200
        assert config.timeout == 500

    def test_from_dict_ignores_unknown_keys(self) -> None:
        config = TimerConfig.from_dict({"timeout": 800, "colour": "blue"})
        assert config == TimerConfig(interval=200, timeout=800)

    def test_interval_equal_to_timeout_is_allowed(self) -> None:
        config = TimerConfig(interval=300, timeout=300)
        assert config.interval == config.timeout

    def test_interval_exceeding_timeout_rejected(self) -> None:
        with pytest.raises(InvalidConfiguration, match="exceeds timeout"):
            TimerConfig.from_dict({"interval": 300, "timeout": 200})

    def test_default_interval_exceeding_small_timeout_rejected(self) -> None:
        with pytest.raises(InvalidConfiguration):
            TimerConfig.from_dict({"timeout": 100})

    @pytest.mark.parametrize("value", [0, -5, "100", None, True])
    def test_invalid_values_rejected(self, value: object) -> None:
        with pytest.raises(InvalidConfiguration):
            TimerConfig.from_dict({"interval": value})

    def test_is_a_value_error(self) -> None:
        with pytest.raises(ValueError):
            TimerConfig(interval=10, timeout=5)


class TestCoerce:
    def test_none_gives_defaults(self) -> None:
        assert TimerConfig.coerce(None) == TimerConfig()

    def test_config_passes_through(self) -> None:
        config = TimerConfig(interval=10, timeout=20)
        assert TimerConfig.coerce(config) is config

    def test_mapping(self) -> None:
        assert TimerConfig.coerce({"timeout": 500}).timeout == 500

    def test_other_types_rejected(self) -> None:
        with pytest.raises(InvalidConfiguration):
            TimerConfig.coerce([200, 2000])  # type: ignore[arg-type]
