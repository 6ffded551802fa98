"""Micro-benchmark loop for short callables."""

from dataclasses import dataclass
from typing import Callable

from ..utils.clock import MONOTONIC, Clock

# Iterations admitted after the first call; the loop stops at MAX_TRIES + 1.
MAX_TRIES = 100


@dataclass
class BenchmarkResult:
    """Result from a single benchmark run."""

    mean: float
    n: int
    total: float

    @property
    def calls_per_second(self) -> float:
        """Throughput over the loop; inf when no measurable time passed."""
        return self.n / self.total if self.total > 0 else float("inf")


def run_benchmark(
    fn: Callable[[], object],
    target_time: float = 1.0,
    clock: Clock | None = None,
    start: float | None = None,
) -> BenchmarkResult:
    """Call fn repeatedly until the time budget or the iteration cap is hit.

    The loop always runs at least once. After each call it measures the total
    time since start and stops once that reaches target_time, or once the
    count before this call had already reached MAX_TRIES (so at most 101
    calls). Clock reads between calls are part of the measured time.

    Args:
        fn: Zero-argument callable to time. Exceptions propagate.
        target_time: Wall-clock budget in seconds.
        clock: Time source. Defaults to the monotonic clock.
        start: Instant the total is measured from. Defaults to clock.now().

    Returns:
        BenchmarkResult with the mean seconds per call.
    """
    if not callable(fn):
        raise TypeError(f"Expected a callable to benchmark, got {type(fn).__name__}")

    clock = clock or MONOTONIC
    if start is None:
        start = clock.now()

    n = 0
    while True:
        fn()
        total = clock.seconds_between(start, clock.now())
        previous = n
        n += 1
        if not (previous < MAX_TRIES and total < target_time):
            break

    return BenchmarkResult(mean=total / n, n=n, total=total)
