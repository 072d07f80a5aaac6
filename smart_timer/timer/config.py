"""Timer configuration."""

from collections.abc import Mapping
from dataclasses import dataclass
from numbers import Real
from typing import Any

from smart_timer.errors import InvalidConfiguration

DEFAULT_INTERVAL_MS = 200
DEFAULT_TIMEOUT_MS = 2000


@dataclass(frozen=True)
class TimerConfig:
    """Configuration for a smart timer."""

    interval: float = DEFAULT_INTERVAL_MS  # ms between activity samples
    timeout: float = DEFAULT_TIMEOUT_MS  # ms of inactivity before firing

    def __post_init__(self) -> None:
        for name in ("interval", "timeout"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, Real) or not value > 0:
                raise InvalidConfiguration(f"timer {name} must be a positive number, got {value!r}")

        if self.interval > self.timeout:
            raise InvalidConfiguration(
                f"timer interval ({self.interval}ms) exceeds timeout ({self.timeout}ms)!"
            )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TimerConfig":
        """Create config from dictionary.

        Unknown keys are ignored.

        Args:
            data: Mapping with optional "interval" and "timeout" keys (ms).

        Returns:
            TimerConfig instance.

        Raises:
            InvalidConfiguration: If the values are unusable.
        """
        return cls(
            interval=data.get("interval", DEFAULT_INTERVAL_MS),
            timeout=data.get("timeout", DEFAULT_TIMEOUT_MS),
        )

    @classmethod
    def coerce(cls, config: "TimerConfig | Mapping[str, Any] | None") -> "TimerConfig":
        """Normalize the accepted config forms into a TimerConfig."""
        if config is None:
            return cls()
        if isinstance(config, cls):
            return config
        if isinstance(config, Mapping):
            return cls.from_dict(config)
        raise InvalidConfiguration(f"timer config is a(n) {type(config).__name__}!")
