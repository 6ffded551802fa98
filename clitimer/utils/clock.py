"""Monotonic clock adapter used by all timers."""

import time
from typing import Callable


class Clock:
    """Wraps a monotonic time source returning float seconds.

    Usage:
        clock = Clock()
        t0 = clock.now()
        do_something()
        print(f"Took {clock.seconds_between(t0, clock.now()):.3f}s")

    The source can be swapped for a scripted callable in tests.
    """

    def __init__(self, source: Callable[[], float] = time.perf_counter):
        self.source = source

    def now(self) -> float:
        """Return the current instant."""
        return self.source()

    @staticmethod
    def seconds_between(start: float, stop: float) -> float:
        """Return the duration from start to stop in seconds."""
        return float(stop - start)


MONOTONIC = Clock()


def now() -> float:
    return MONOTONIC.now()


def seconds_between(start: float, stop: float) -> float:
    return Clock.seconds_between(start, stop)
