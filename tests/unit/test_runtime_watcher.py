"""Tests for the stream idle watcher."""

import io
import threading
from collections.abc import Iterator

import pytest

from smart_timer.runtime.settings import WatchSettings
from smart_timer.runtime.watcher import IdleWatcher, WatchOutcome
from smart_timer.timer.config import TimerConfig


class StalledStream:
    """Yields some lines, then blocks until released."""

    def __init__(self, lines: list[str]) -> None:
        self._lines = lines
        self.release = threading.Event()

    def __iter__(self) -> Iterator[str]:
        yield from self._lines
        self.release.wait(5.0)


@pytest.fixture
def fast_settings() -> WatchSettings:
    return WatchSettings(timer=TimerConfig(interval=20, timeout=100))


class TestIdleWatcher:
    def test_input_closed(self, fast_settings: WatchSettings) -> None:
        result = IdleWatcher(fast_settings, io.StringIO("a\nb\n")).run()
        assert result.outcome is WatchOutcome.INPUT_CLOSED
        assert result.lines == 2
        assert result.idle_ms is None

    def test_echo(self) -> None:
        settings = WatchSettings(timer=TimerConfig(interval=20, timeout=100), echo=True)
        output = io.StringIO()
        IdleWatcher(settings, io.StringIO("one\ntwo\n"), output=output).run()
        assert output.getvalue() == "one\ntwo\n"

    def test_echo_requires_output(self) -> None:
        settings = WatchSettings(echo=True)
        with pytest.raises(ValueError):
            IdleWatcher(settings, io.StringIO(""))

    def test_times_out_when_stream_stalls(self, fast_settings: WatchSettings) -> None:
        stream = StalledStream(["first\n"])
        try:
            result = IdleWatcher(fast_settings, stream).run()
        finally:
            stream.release.set()

        assert result.outcome is WatchOutcome.TIMED_OUT
        assert result.lines == 1
        assert result.idle_ms is not None
        assert result.idle_ms >= 100


class BrokenStream:
    """Yields some lines, then fails like undecodable input."""

    def __init__(self, lines: list[str]) -> None:
        self._lines = lines

    def __iter__(self) -> Iterator[str]:
        yield from self._lines
        raise UnicodeDecodeError("utf-8", b"\xff", 0, 1, "invalid start byte")


class TestIdleWatcherErrors:
    def test_stream_error_is_raised(self) -> None:
        settings = WatchSettings(timer=TimerConfig(interval=20, timeout=1000))
        watcher = IdleWatcher(settings, BrokenStream(["ok\n"]))
        with pytest.raises(UnicodeDecodeError):
            watcher.run()
