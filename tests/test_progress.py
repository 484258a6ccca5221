import io
import threading
import time

import pytest

from iconsheet.progress import ProgressTracker, format_elapsed, timed


@pytest.mark.parametrize("seconds,text", [(0, "0ms"), (0.25, "250ms"), (0.999, "999ms"), (1.0, "1.0s"), (12.34, "12.3s")])
def test_format_elapsed(seconds, text):
    assert format_elapsed(seconds) == text


def test_tracker_renders_bar():
    out = io.StringIO()
    tracker = ProgressTracker(4, "Progress", out)
    tracker.increment()
    assert out.getvalue().startswith("\r\tProgress [=====               ] 1/4 (25%) ")


def test_tracker_finish_completes_line():
    out = io.StringIO()
    tracker = ProgressTracker(3, "Progress", out)
    tracker.finish()
    assert "[" + "=" * 20 + "] 3/3 (100%)" in out.getvalue()
    assert out.getvalue().endswith("\n")


def test_tracker_with_nothing_to_do():
    out = io.StringIO()
    ProgressTracker(0, "Progress", out).finish()
    assert "0/0 (100%)" in out.getvalue()


def _tickers(message):
    return [t for t in threading.enumerate() if t.name == f"timed: {message}"]


def test_timed_reports_completion():
    out = io.StringIO()
    with timed("Saving", out, interval=0.01):
        time.sleep(0.05)
    assert "\tSaving completed in " in out.getvalue()
    assert _tickers("Saving") == []


def test_timed_stops_ticker_on_error():
    out = io.StringIO()
    with pytest.raises(RuntimeError):
        with timed("Exploding", out, interval=0.01):
            raise RuntimeError("boom")
    assert _tickers("Exploding") == []
    assert "completed" not in out.getvalue()
