"""
Console progress for long steps. Purely cosmetic: nothing here feeds back
into the build.

  ProgressTracker  counted work, e.g. "Progress [=====     ] 12/48 (25%) 1.2s"
  timed()          uncounted work, a ticker thread redraws the elapsed time
"""

from __future__ import annotations

import sys
import threading
import time
from contextlib import contextmanager

BAR_WIDTH = 20


def format_elapsed(seconds: float) -> str:
    ms = int(seconds * 1000)
    if ms < 1000:
        return f"{ms}ms"
    return f"{seconds:.1f}s"


class ProgressTracker:
    def __init__(self, total: int, message: str, stream=None):
        self.total = total
        self.current = 0
        self.message = message
        self.stream = stream if stream is not None else sys.stdout
        self.start = time.monotonic()

    def update(self, current: int) -> None:
        self.current = current
        self.render()

    def increment(self) -> None:
        self.update(self.current + 1)

    def line(self) -> str:
        ratio = self.current / self.total if self.total else 1.0
        filled = int(BAR_WIDTH * ratio)
        bar = "[" + "=" * filled + " " * (BAR_WIDTH - filled) + "]"
        elapsed = format_elapsed(time.monotonic() - self.start)
        return f"\t{self.message} {bar} {self.current}/{self.total} ({int(ratio * 100)}%) {elapsed}"

    def render(self) -> None:
        self.stream.write("\r" + self.line())
        self.stream.flush()

    def finish(self) -> None:
        self.update(self.total)
        self.stream.write("\n")
        self.stream.flush()


class _Ticker(threading.Thread):
    def __init__(self, message, stream, interval, start):
        super().__init__(name=f"timed: {message}", daemon=True)
        self.message = message
        self.stream = stream
        self.interval = interval
        self.started_at = start
        self.stopped = threading.Event()

    def run(self):
        while not self.stopped.wait(self.interval):
            elapsed = format_elapsed(time.monotonic() - self.started_at)
            self.stream.write(f"\r\t{self.message} ({elapsed})")
            self.stream.flush()

    def stop(self):
        self.stopped.set()
        self.join()


@contextmanager
def timed(message: str, stream=None, interval: float = 0.1):
    """Show a live elapsed-time line while the block runs.

    The ticker is stopped and joined on every exit path, before the final
    "completed" line is written (or the exception propagates).
    """
    stream = stream if stream is not None else sys.stdout
    start = time.monotonic()
    ticker = _Ticker(message, stream, interval, start)
    ticker.start()
    try:
        yield
    finally:
        ticker.stop()
    stream.write(f"\r\t{message} completed in {format_elapsed(time.monotonic() - start)}\n")
    stream.flush()
