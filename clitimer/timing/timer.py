"""Stopwatch timers: a manually queried Timer and a scope-bound AutoTimer."""

import sys
from contextlib import suppress
from typing import Callable, TextIO

from ..evaluation.benchmark import BenchmarkResult, run_benchmark
from ..utils.clock import MONOTONIC, Clock
from .formatting import big, format_time, simple

FormatFn = Callable[[str, str], str]


class Timer:
    """Measures wall-clock time from construction.

    Usage:
        t = Timer("Load")
        load_everything()
        print(t)  # "Load: 1.2345 s"

    The layout is chosen with time_print, any callable taking
    (title, time string) and returning the rendered string.
    """

    Simple = staticmethod(simple)
    Big = staticmethod(big)

    def __init__(
        self,
        title: str = "Timer",
        time_print: FormatFn = simple,
        clock: Clock | None = None,
    ):
        if not callable(time_print):
            raise TypeError(f"time_print must be callable, got {type(time_print).__name__}")
        self._title = title
        self._time_print = time_print
        self._clock = clock or MONOTONIC
        self._start = self._clock.now()

    @property
    def title(self) -> str:
        return self._title

    @property
    def time_print(self) -> FormatFn:
        return self._time_print

    @property
    def start(self) -> float:
        return self._start

    def elapsed(self) -> float:
        """Seconds since the timer started."""
        return self._clock.seconds_between(self._start, self._clock.now())

    def format_time(self, seconds: float) -> str:
        return format_time(seconds)

    def make_time_str(self) -> str:
        """Format the time elapsed so far without resetting the timer."""
        return self.format_time(self.elapsed())

    def benchmark(self, fn: Callable[[], object], target_time: float = 1.0) -> BenchmarkResult:
        """Time fn by running it repeatedly.

        The loop runs on this timer's clock from a fresh start, so it can be
        used on a timer that is already measuring something else. The
        original start is put back afterwards, also when fn raises.

        Args:
            fn: Zero-argument callable to time.
            target_time: Stop admitting new calls once this many seconds passed.

        Returns:
            BenchmarkResult with the mean time per call and the call count.
        """
        saved = self._start
        try:
            self._start = self._clock.now()
            return run_benchmark(fn, target_time, clock=self._clock, start=self._start)
        finally:
            self._start = saved

    def time_it(self, fn: Callable[[], object], target_time: float = 1.0) -> str:
        """Benchmark fn and describe the average, e.g. "12.5 us for 101 tries"."""
        result = self.benchmark(fn, target_time)
        return f"{self.format_time(result.mean)} for {result.n} tries"

    def to_string(self) -> str:
        return self._time_print(self._title, self.make_time_str())

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(title={self._title!r}, start={self._start!r})"

    def __rlshift__(self, stream: TextIO) -> TextIO:
        # stream << timer
        return write_timer(stream, self)


class AutoTimer(Timer):
    """Timer that prints itself when its scope ends.

    Usage:
        with AutoTimer("Solve"):
            solve()
        # prints "Solve: 312.07 ms"

    The line goes to stdout unless another stream is given. It is written at
    most once, and a failing layout or write never masks the scope's own
    outcome.
    """

    def __init__(
        self,
        title: str = "Timer",
        time_print: FormatFn = simple,
        clock: Clock | None = None,
        stream: TextIO | None = None,
    ):
        super().__init__(title, time_print, clock)
        self._stream = stream
        self._emitted = False

    def __enter__(self) -> "AutoTimer":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.emit()

    def emit(self) -> None:
        """Write the rendered timer and a newline, once."""
        if self._emitted:
            return
        self._emitted = True
        stream = self._stream if self._stream is not None else sys.stdout
        if stream is None:
            # no console, e.g. pythonw or a detached daemon
            return
        # a broken layout or stream must not replace the exception of the scope
        with suppress(Exception):
            line = self.to_string() + "\n"
            stream.write(line)
            stream.flush()


def write_timer(stream: TextIO, timer: Timer) -> TextIO:
    """Append timer.to_string() to stream and return the stream for chaining."""
    stream.write(timer.to_string())
    return stream
