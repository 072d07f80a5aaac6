"""Activity-based idle timers."""

from smart_timer.timer.config import TimerConfig
from smart_timer.timer.smart_timer import SmartTimer, create

__all__ = ["SmartTimer", "TimerConfig", "create"]
