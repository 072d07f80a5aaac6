"""Stream watcher — reports when an input stream goes quiet."""

import threading
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum, auto
from typing import TextIO

from loguru import logger

from smart_timer.errors import AlreadyDestroyed
from smart_timer.runtime.settings import WatchSettings
from smart_timer.scheduling.base import Scheduler
from smart_timer.timer.smart_timer import SmartTimer


class WatchOutcome(Enum):
    """How a watch ended."""

    TIMED_OUT = auto()  # No input for the configured timeout
    INPUT_CLOSED = auto()  # Stream ended first


@dataclass
class WatchResult:
    """Summary of a finished watch."""

    outcome: WatchOutcome
    lines: int
    idle_ms: float | None = None


class IdleWatcher:
    """Touches a SmartTimer for every line read from a stream.

    Lines are consumed on a daemon thread so that a blocked read does not
    delay the timeout; :meth:`run` returns as soon as either the timer fires
    or the stream is exhausted.
    """

    def __init__(
        self,
        settings: WatchSettings,
        stream: Iterable[str],
        output: TextIO | None = None,
        scheduler: Scheduler | None = None,
    ) -> None:
        """Initialize the watcher.

        Args:
            settings: Watch settings.
            stream: Line source, typically sys.stdin.
            output: Destination for echoed lines (required when echo is on).
            scheduler: Scheduling facility passed to the timer.
        """
        if settings.echo and output is None:
            raise ValueError("echo requires an output stream")
        self.settings = settings
        self._stream = stream
        self._output = output
        self._scheduler = scheduler
        self._done = threading.Event()
        self._lock = threading.Lock()
        self._lines = 0
        self._idle_ms: float | None = None
        self._error: Exception | None = None

    def run(self) -> WatchResult:
        """Watch until the stream is idle for the timeout or ends.

        Returns:
            The outcome, number of lines seen, and idle time if timed out.

        Raises:
            Exception: Whatever reading the stream raised, once the timer is stopped.
        """
        timer = SmartTimer(self._on_timeout, self.settings.timer, scheduler=self._scheduler)
        reader = threading.Thread(target=self._read_loop, args=(timer,), daemon=True)

        logger.info(
            "[Watch] Watching for {}ms of inactivity (sampled every {}ms)",
            timer.timeout,
            timer.interval,
        )
        try:
            reader.start()
            self._done.wait()
        finally:
            timer.destroy()

        with self._lock:
            if self._error is not None:
                raise self._error
            if self._idle_ms is not None:
                return WatchResult(WatchOutcome.TIMED_OUT, self._lines, self._idle_ms)
            return WatchResult(WatchOutcome.INPUT_CLOSED, self._lines)

    def _on_timeout(self, elapsed: float) -> None:
        with self._lock:
            self._idle_ms = elapsed
        logger.info("[Watch] Input idle for {:.0f}ms", elapsed)
        self._done.set()

    def _read_loop(self, timer: SmartTimer) -> None:
        try:
            for line in self._stream:
                try:
                    timer.touch()
                except AlreadyDestroyed:
                    break
                with self._lock:
                    self._lines += 1
                if self.settings.echo and self._output is not None:
                    self._output.write(line)
                    self._output.flush()
            else:
                logger.debug("[Watch] Input closed")
        except Exception as e:
            logger.error("[Watch] Reading input failed: {}", e)
            with self._lock:
                self._error = e
        finally:
            self._done.set()
