"""Deterministic scheduler driven by an explicitly advanced virtual clock."""

import heapq
import itertools
from collections.abc import Callable
from dataclasses import dataclass, field


@dataclass(order=True)
class _Entry:
    due: float
    seq: int
    callback: Callable[[], None] = field(compare=False)
    period: float | None = field(default=None, compare=False)
    cancelled: bool = field(default=False, compare=False)
    fired: bool = field(default=False, compare=False)


class ManualHandle:
    """Handle for a callback registered with a ManualScheduler."""

    def __init__(self, entry: _Entry) -> None:
        self._entry = entry

    @property
    def active(self) -> bool:
        entry = self._entry
        if entry.cancelled:
            return False
        return entry.period is not None or not entry.fired

    @property
    def due(self) -> float:
        """Virtual time (ms) of the next invocation."""
        return self._entry.due

    def cancel(self) -> None:
        self._entry.cancelled = True


class ManualScheduler:
    """Scheduler whose clock only moves when :meth:`advance` is called.

    Nothing runs in the background: due callbacks run synchronously inside
    ``advance`` in due-time order, with ties broken by registration order.
    """

    def __init__(self, start_ms: float = 0.0) -> None:
        """Initialize the scheduler.

        Args:
            start_ms: Initial value of the virtual clock.
        """
        self._now = float(start_ms)
        self._queue: list[_Entry] = []
        self._seq = itertools.count()

    def now(self) -> float:
        return self._now

    @property
    def pending(self) -> int:
        """Number of callbacks that may still run."""
        return sum(1 for entry in self._queue if not entry.cancelled)

    def call_later(self, delay_ms: float, callback: Callable[[], None]) -> ManualHandle:
        entry = _Entry(self._now + max(delay_ms, 0.0), next(self._seq), callback)
        heapq.heappush(self._queue, entry)
        return ManualHandle(entry)

    def call_every(self, period_ms: float, callback: Callable[[], None]) -> ManualHandle:
        if period_ms <= 0:
            raise ValueError("period_ms must be positive")
        entry = _Entry(self._now + period_ms, next(self._seq), callback, period=period_ms)
        heapq.heappush(self._queue, entry)
        return ManualHandle(entry)

    def advance(self, ms: float) -> int:
        """Move the clock forward, running every callback that falls due.

        Args:
            ms: Milliseconds to advance; must not be negative.

        Returns:
            Number of callbacks invoked.
        """
        if ms < 0:
            raise ValueError("cannot move the clock backwards")
        target = self._now + ms
        invoked = 0

        while self._queue and self._queue[0].due <= target:
            entry = heapq.heappop(self._queue)
            if entry.cancelled:
                continue
            self._now = entry.due
            if entry.period is not None:
                entry.due += entry.period
                entry.seq = next(self._seq)
                heapq.heappush(self._queue, entry)
            else:
                entry.fired = True
            entry.callback()
            invoked += 1

        self._now = target
        return invoked
