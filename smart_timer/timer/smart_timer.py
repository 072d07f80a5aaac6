"""Smart timer — fires a callback once a period passes with no activity."""

import threading
from collections.abc import Callable, Mapping
from types import TracebackType
from typing import Any

from loguru import logger

from smart_timer.errors import AlreadyDestroyed, InvalidArgument
from smart_timer.scheduling.base import ScheduledHandle, Scheduler
from smart_timer.scheduling.threaded import default_scheduler
from smart_timer.timer.config import TimerConfig

TimeoutHandler = Callable[[float], Any]


class SmartTimer:
    """Timer that checks for an idle timeout at fixed sampling intervals.

    Activity reported through :meth:`touch` is only committed when the sampler
    next runs, so the handler fires between ``timeout`` and
    ``timeout + interval`` milliseconds after the last activity, never earlier.

    The handler receives the idle duration in milliseconds and is invoked at
    most once. The timer destroys itself before invoking it.
    """

    def __init__(
        self,
        on_timeout: TimeoutHandler,
        config: TimerConfig | Mapping[str, Any] | None = None,
        *,
        scheduler: Scheduler | None = None,
    ) -> None:
        """Create and start the timer.

        Args:
            on_timeout: Called with the idle duration (ms) when the timeout occurs.
            config: TimerConfig or mapping with "interval"/"timeout" (ms).
            scheduler: Scheduling facility; defaults to the threading scheduler.

        Raises:
            InvalidArgument: If on_timeout is not callable.
            InvalidConfiguration: If interval exceeds timeout or a value is invalid.
        """
        if not callable(on_timeout):
            raise InvalidArgument(
                f"timer timeout handler is a(n) {type(on_timeout).__name__}!"
            )

        self._config = TimerConfig.coerce(config)
        self._on_timeout = on_timeout
        self._scheduler: Scheduler = scheduler if scheduler is not None else default_scheduler()
        self._lock = threading.Lock()

        self._destroyed = False
        self._had_activity = False
        self._last_activity = self._scheduler.now()
        self._interval_handle: ScheduledHandle | None = None
        self._deadline_handle: ScheduledHandle | None = None

        with self._lock:
            self._interval_handle = self._scheduler.call_every(
                self._config.interval, self._on_interval
            )
            try:
                self._deadline_handle = self._scheduler.call_later(
                    self._config.timeout, self._on_deadline
                )
            except Exception:
                self._teardown()
                raise

        logger.debug(
            "[SmartTimer] Started (interval={}ms, timeout={}ms)",
            self._config.interval,
            self._config.timeout,
        )

    @property
    def interval(self) -> float:
        """Milliseconds between activity samples."""
        return self._config.interval

    @property
    def timeout(self) -> float:
        """Milliseconds of inactivity before the handler fires."""
        return self._config.timeout

    @property
    def destroyed(self) -> bool:
        with self._lock:
            return self._destroyed

    @property
    def last_activity(self) -> float:
        """Scheduler-clock timestamp (ms) of the last sampled activity."""
        with self._lock:
            return self._last_activity

    def touch(self) -> None:
        """Record activity since the last sample.

        Raises:
            AlreadyDestroyed: If the timer was destroyed or has fired.
        """
        with self._lock:
            if self._destroyed:
                raise AlreadyDestroyed("timer has already been destroyed!")
            self._had_activity = True

    def destroy(self) -> None:
        """Stop the timer. Safe to call any number of times."""
        with self._lock:
            was_destroyed = self._destroyed
            self._teardown()
        if not was_destroyed:
            logger.debug("[SmartTimer] Destroyed")

    def __enter__(self) -> "SmartTimer":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.destroy()

    def _teardown(self) -> None:
        # Caller holds the lock.
        if self._deadline_handle is not None:
            self._release(self._deadline_handle, "deadline check")
            self._deadline_handle = None

        if self._interval_handle is not None:
            self._release(self._interval_handle, "sampler")
            self._interval_handle = None

        self._destroyed = True

    @staticmethod
    def _release(handle: ScheduledHandle, name: str) -> None:
        try:
            handle.cancel()
        except Exception:
            logger.exception("[SmartTimer] Failed to release {} handle", name)

    def _sample(self) -> None:
        # Caller holds the lock.
        if self._had_activity:
            self._last_activity = self._scheduler.now()
            self._had_activity = False

    def _on_interval(self) -> None:
        with self._lock:
            if self._destroyed:
                return
            self._sample()

    def _on_deadline(self) -> None:
        with self._lock:
            if self._destroyed:
                return

            # Fold in activity seen since the last sample before judging the deadline
            self._sample()
            elapsed = self._scheduler.now() - self._last_activity

            if elapsed < self._config.timeout:
                remaining = self._config.timeout - elapsed
                self._deadline_handle = self._scheduler.call_later(remaining, self._on_deadline)
                logger.trace("[SmartTimer] Activity seen, rechecking in {:.1f}ms", remaining)
                return

            self._teardown()

        logger.debug("[SmartTimer] Timed out after {:.1f}ms idle", elapsed)
        self._on_timeout(elapsed)


def create(
    on_timeout: TimeoutHandler,
    config: TimerConfig | Mapping[str, Any] | None = None,
    *,
    scheduler: Scheduler | None = None,
) -> SmartTimer:
    """Create a running SmartTimer.

    Args:
        on_timeout: Called with the idle duration (ms) when the timeout occurs.
        config: TimerConfig or mapping with "interval" (default 200) and
            "timeout" (default 2000), both in ms.
        scheduler: Scheduling facility; defaults to the threading scheduler.

    Returns:
        The started timer.
    """
    return SmartTimer(on_timeout, config, scheduler=scheduler)
