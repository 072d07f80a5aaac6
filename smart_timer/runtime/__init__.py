"""Stream watching on top of smart timers."""

from smart_timer.runtime.settings import WatchSettings, load_settings
from smart_timer.runtime.watcher import IdleWatcher, WatchOutcome, WatchResult

__all__ = ["IdleWatcher", "WatchOutcome", "WatchResult", "WatchSettings", "load_settings"]
