"""Shared test fixtures."""

from unittest.mock import MagicMock

import pytest
from loguru import logger

from smart_timer.scheduling.manual import ManualScheduler
from smart_timer.timer.config import TimerConfig


@pytest.fixture
def scheduler() -> ManualScheduler:
    """Create a scheduler whose clock only moves when advanced."""
    return ManualScheduler()


@pytest.fixture
def timer_config() -> TimerConfig:
    """Create a short test timer configuration."""
    return TimerConfig(interval=200, timeout=500)


@pytest.fixture
def on_timeout() -> MagicMock:
    """Mock timeout handler."""
    return MagicMock()


@pytest.fixture
def log_messages():
    """Capture messages logged by the package."""
    messages: list[str] = []
    logger.enable("smart_timer")
    handler_id = logger.add(lambda m: messages.append(m.record["message"]), level="TRACE")
    yield messages
    logger.remove(handler_id)
    logger.disable("smart_timer")
