"""Timing utilities for performance measurement."""

import logging
import time
from contextlib import contextmanager
from datetime import timedelta
from typing import Optional

from .logging import get_logger

logger = get_logger("hutupy_timers")

class Stopwatch:
    """Elapsed-time accumulator that can be paused and resumed.

    Time is read from ``time.perf_counter_ns``, so measurements are
    monotonic and unaffected by wall-clock adjustments. Elapsed time is
    the sum of all completed running intervals plus the live interval
    while running.

    Not synchronised: share an instance between threads only if the
    callers serialise access themselves.

    Example:
        >>> sw = Stopwatch.start_new()
        >>> do_work()
        >>> sw.stop()
        >>> sw.elapsed_millis()
    """

    def __init__(self):
        self._start_ns: Optional[int] = None
        self._elapsed_ns = 0
        self._running = False

    @classmethod
    def start_new(cls) -> "Stopwatch":
        """Create a stopwatch that is already running."""
        sw = cls()
        sw.start()
        return sw

    def start(self) -> None:
        """Begin a running interval. No-op if already running."""
        if not self._running:
            self._start_ns = time.perf_counter_ns()
            self._running = True

    def stop(self) -> None:
        """Close the running interval. No-op if already stopped."""
        if self._running and self._start_ns is not None:
            self._elapsed_ns += time.perf_counter_ns() - self._start_ns
            self._running = False

    def reset(self) -> None:
        """Return to the initial stopped, zero-elapsed state."""
        self._start_ns = None
        self._elapsed_ns = 0
        self._running = False

    def is_running(self) -> bool:
        return self._running

    def _elapsed_ns_now(self) -> int:
        if self._running and self._start_ns is not None:
            return self._elapsed_ns + (time.perf_counter_ns() - self._start_ns)
        return self._elapsed_ns

    def elapsed(self) -> timedelta:
        """Total elapsed time, including the live interval if running."""
        return timedelta(microseconds=self._elapsed_ns_now() // 1000)

    def elapsed_millis(self) -> int:
        return self._elapsed_ns_now() // 1_000_000

    def elapsed_micros(self) -> int:
        return self._elapsed_ns_now() // 1_000

    def elapsed_nanos(self) -> int:
        return self._elapsed_ns_now()

    def elapsed_seconds(self) -> float:
        return self._elapsed_ns_now() / 1e9

    def __str__(self) -> str:
        ns = self._elapsed_ns_now()
        secs, rem = divmod(ns, 1_000_000_000)
        return f"{secs}.{rem // 1_000_000:03d}s"

    def __repr__(self) -> str:
        return f"Stopwatch(elapsed={self.elapsed()!r}, is_running={self._running})"

class Timer:
    """Context manager for timing code execution."""

    def __init__(self, name: Optional[str] = None, log: Optional[logging.Logger] = None):
        self.name = name
        self.logger = log or logger
        self.stopwatch = Stopwatch()
        self.elapsed_time: Optional[float] = None

    def __enter__(self):
        self.stopwatch.reset()
        self.stopwatch.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.stopwatch.stop()
        self.elapsed_time = self.stopwatch.elapsed_seconds()

        if self.name:
            self.logger.info(f"{self.name}: {self.elapsed_time:.4f} seconds")

    @property
    def elapsed_ms(self) -> Optional[float]:
        """Get elapsed time in milliseconds."""
        if self.elapsed_time is not None:
            return self.elapsed_time * 1000
        return None

@contextmanager
def time_function(name: str):
    """Context manager to log how long a block takes.

    Args:
        name: Name for the timer
    """
    sw = Stopwatch.start_new()
    try:
        yield sw
    finally:
        sw.stop()
        elapsed = sw.elapsed_seconds()
        logger.info(f"{name}: {elapsed:.4f} seconds ({elapsed*1000:.2f} ms)")
