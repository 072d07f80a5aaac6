"""Settings for the stream watcher: YAML file, environment, then overrides."""

import os
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

from smart_timer.errors import InvalidConfiguration
from smart_timer.timer.config import TimerConfig

DEFAULT_CONFIG_PATH = Path("config/default.yaml")

ENV_INTERVAL = "SMART_TIMER_INTERVAL_MS"
ENV_TIMEOUT = "SMART_TIMER_TIMEOUT_MS"
ENV_ECHO = "SMART_TIMER_ECHO"

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class WatchSettings:
    """Configuration for watching a stream for idleness."""

    timer: TimerConfig = field(default_factory=TimerConfig)
    echo: bool = False  # Copy input lines to stdout

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "WatchSettings":
        """Create settings from dictionary.

        Args:
            data: Mapping with an optional "timer" section and "echo" flag.

        Returns:
            WatchSettings instance.
        """
        timer_data = data.get("timer") or {}
        if not isinstance(timer_data, Mapping):
            raise InvalidConfiguration("'timer' section must be a mapping")
        return cls(
            timer=TimerConfig.from_dict(timer_data),
            echo=bool(data.get("echo", False)),
        )


def _read_yaml(path: Path) -> dict[str, Any]:
    with open(path) as f:
        loaded = yaml.safe_load(f)
    if loaded is None:
        return {}
    if not isinstance(loaded, dict):
        raise InvalidConfiguration(f"{path}: expected a mapping at the top level")
    return loaded


def _env_number(name: str) -> float | None:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return None
    try:
        return float(raw)
    except ValueError:
        raise InvalidConfiguration(f"{name} must be a number, got {raw!r}") from None


def load_settings(
    config_path: Path | None = None,
    *,
    interval: float | None = None,
    timeout: float | None = None,
    echo: bool | None = None,
) -> WatchSettings:
    """Load watcher settings.

    Later sources win: defaults, the YAML file, environment variables
    (including a .env file), then the explicit keyword overrides.

    Args:
        config_path: YAML file; the default location is used if None.
            A missing file means defaults.
        interval: Override for the sampling interval (ms).
        timeout: Override for the idle timeout (ms).
        echo: Override for echoing input.

    Returns:
        The merged settings.
    """
    load_dotenv()

    path = config_path if config_path is not None else DEFAULT_CONFIG_PATH
    data = _read_yaml(path) if path.exists() else {}

    section = data.get("timer") or {}
    if not isinstance(section, Mapping):
        raise InvalidConfiguration("'timer' section must be a mapping")
    timer_data = dict(section)
    env_interval = _env_number(ENV_INTERVAL)
    env_timeout = _env_number(ENV_TIMEOUT)
    if env_interval is not None:
        timer_data["interval"] = env_interval
    if env_timeout is not None:
        timer_data["timeout"] = env_timeout
    if interval is not None:
        timer_data["interval"] = interval
    if timeout is not None:
        timer_data["timeout"] = timeout

    settings = WatchSettings.from_dict({**data, "timer": timer_data})

    env_echo = os.environ.get(ENV_ECHO)
    if env_echo is not None:
        settings = replace(settings, echo=env_echo.strip().lower() in _TRUTHY)
    if echo is not None:
        settings = replace(settings, echo=echo)

    return settings
