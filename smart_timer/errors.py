"""Errors raised by smart timers."""


class SmartTimerError(Exception):
    """Base class for all smart timer errors."""


class InvalidArgument(SmartTimerError, TypeError):
    """Raised when the timeout handler is not callable."""


class InvalidConfiguration(SmartTimerError, ValueError):
    """Raised when interval/timeout values are unusable."""


class AlreadyDestroyed(SmartTimerError, RuntimeError):
    """Raised when a destroyed timer is touched."""
