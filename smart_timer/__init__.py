"""Smart timer - fires a callback only after a period with no activity."""

from loguru import logger

from smart_timer.errors import (
    AlreadyDestroyed,
    InvalidArgument,
    InvalidConfiguration,
    SmartTimerError,
)
from smart_timer.timer import SmartTimer, TimerConfig, create

__version__ = "0.1.0"

logger.disable("smart_timer")

__all__ = [
    "AlreadyDestroyed",
    "InvalidArgument",
    "InvalidConfiguration",
    "SmartTimer",
    "SmartTimerError",
    "TimerConfig",
    "create",
]
