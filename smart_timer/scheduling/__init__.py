"""Time-driven scheduling facilities."""

from smart_timer.scheduling.base import ScheduledHandle, Scheduler
from smart_timer.scheduling.manual import ManualScheduler
from smart_timer.scheduling.threaded import ThreadingScheduler, default_scheduler

__all__ = [
    "ManualScheduler",
    "ScheduledHandle",
    "Scheduler",
    "ThreadingScheduler",
    "default_scheduler",
]
