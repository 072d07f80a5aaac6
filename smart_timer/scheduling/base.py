"""Protocol definitions for time-driven scheduling."""

from collections.abc import Callable
from typing import Protocol


class ScheduledHandle(Protocol):
    """A cancelable reference to a scheduled callback."""

    @property
    def active(self) -> bool:
        """Whether the callback may still be invoked."""
        ...

    def cancel(self) -> None:
        """Prevent future invocations. Safe to call more than once."""
        ...


class Scheduler(Protocol):
    """Invokes callbacks after a delay or every period, in milliseconds."""

    def now(self) -> float:
        """Current time of the scheduler's clock.

        Returns:
            Timestamp in milliseconds.
        """
        ...

    def call_later(self, delay_ms: float, callback: Callable[[], None]) -> ScheduledHandle:
        """Invoke callback once, after delay_ms.

        Args:
            delay_ms: Delay in milliseconds.
            callback: Function to invoke.

        Returns:
            Handle that cancels the pending invocation.
        """
        ...

    def call_every(self, period_ms: float, callback: Callable[[], None]) -> ScheduledHandle:
        """Invoke callback repeatedly, every period_ms.

        Args:
            period_ms: Period in milliseconds.
            callback: Function to invoke.

        Returns:
            Handle that stops the recurring invocation.
        """
        ...
