"""Scheduler backed by threads and the monotonic clock."""

import threading
import time
from collections.abc import Callable

from loguru import logger


class _OneShotHandle:
    """Wraps a daemon threading.Timer."""

    def __init__(self, delay_ms: float, callback: Callable[[], None]) -> None:
        self._timer = threading.Timer(delay_ms / 1000.0, callback)
        self._timer.daemon = True

    @property
    def active(self) -> bool:
        return not self._timer.finished.is_set()

    def start(self) -> None:
        self._timer.start()

    def cancel(self) -> None:
        self._timer.cancel()


class _RepeatingHandle:
    """Runs a callback every period on a daemon thread until cancelled."""

    def __init__(self, period_ms: float, callback: Callable[[], None]) -> None:
        self._period = period_ms / 1000.0
        self._callback = callback
        self._stop_event = threading.Event()
        self._thread = threading.Thread(target=self._run, daemon=True)

    @property
    def active(self) -> bool:
        return not self._stop_event.is_set()

    def start(self) -> None:
        self._thread.start()

    def cancel(self) -> None:
        self._stop_event.set()

    def _run(self) -> None:
        # wait() returns True once cancelled. Ticks drift by the callback run time,
        # which is fine since deadline checks sample synchronously.
        while not self._stop_event.wait(self._period):
            self._callback()


class ThreadingScheduler:
    """Schedules callbacks on daemon threads.

    One-shot callbacks each get a ``threading.Timer``; recurring callbacks get a
    thread that sleeps on an event between invocations. Callbacks therefore run
    off the caller's thread, and callbacks from different handles may overlap.
    """

    def now(self) -> float:
        return time.monotonic() * 1000.0

    def call_later(self, delay_ms: float, callback: Callable[[], None]) -> _OneShotHandle:
        handle = _OneShotHandle(max(delay_ms, 0.0), callback)
        handle.start()
        logger.trace("[Scheduler] One-shot callback in {:.1f}ms", delay_ms)
        return handle

    def call_every(self, period_ms: float, callback: Callable[[], None]) -> _RepeatingHandle:
        if period_ms <= 0:
            raise ValueError("period_ms must be positive")
        handle = _RepeatingHandle(period_ms, callback)
        handle.start()
        logger.trace("[Scheduler] Recurring callback every {:.1f}ms", period_ms)
        return handle


_default_scheduler: ThreadingScheduler | None = None
_default_lock = threading.Lock()


def default_scheduler() -> ThreadingScheduler:
    """Return the process-wide threading scheduler."""
    global _default_scheduler
    with _default_lock:
        if _default_scheduler is None:
            _default_scheduler = ThreadingScheduler()
        return _default_scheduler
