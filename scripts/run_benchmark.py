#!/usr/bin/env python
"""Benchmark a few numpy and pure-Python workloads with Timer.time_it."""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import argparse
import json

import numpy as np
from tqdm import tqdm

from clitimer.timing.formatting import big, format_time, simple
from clitimer.timing.timer import AutoTimer, Timer

FORMATS = {"simple": simple, "big": big}


def build_workloads(size: int, seed: int = 0) -> dict:
    """Return name -> zero-argument callable for each workload."""
    rng = np.random.default_rng(seed)
    x = rng.standard_normal(size).astype(np.float32)
    m = rng.standard_normal((64, 64)).astype(np.float32)
    values = x.tolist()
    return {
        "np.sort": lambda: np.sort(x),
        "np.sum": lambda: np.sum(x),
        "matmul 64x64": lambda: m @ m,
        "sorted(list)": lambda: sorted(values),
        "sum(list)": lambda: sum(values),
    }


def main():
    parser = argparse.ArgumentParser(description="Run micro-benchmarks with clitimer")
    parser.add_argument("--target-time", type=float, default=1.0, help="Time budget per workload in seconds")
    parser.add_argument("--format", default="simple", choices=list(FORMATS), help="Output layout")
    parser.add_argument("--size", type=int, default=10000, help="Workload array length")
    parser.add_argument("--output-dir", type=str, default=None, help="Write JSON results here")
    args = parser.parse_args()

    time_print = FORMATS[args.format]
    workloads = build_workloads(args.size)

    results = {}
    with AutoTimer("Total", time_print):
        timer = Timer("Benchmark", time_print)
        for name, fn in tqdm(workloads.items(), desc="Workloads"):
            try:
                results[name] = timer.benchmark(fn, args.target_time)
                r = results[name]
                print(time_print(name, f"{format_time(r.mean)} for {r.n} tries"))
            except Exception as e:
                print(f"  {name}: FAILED - {e}")

        # Summary
        print(f"\n{'='*60}")
        print(f"Summary (size={args.size}, target={args.target_time}s)")
        print(f"{'='*60}")
        print(f"{'Workload':<20} {'Mean':>12} {'Tries':>8} {'Calls/s':>14}")
        print(f"{'-'*20} {'-'*12} {'-'*8} {'-'*14}")
        for name, r in results.items():
            print(f"{name:<20} {format_time(r.mean):>12} {r.n:>8} {r.calls_per_second:>14.0f}")

    if args.output_dir:
        output_dir = Path(args.output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)
        json_path = output_dir / "benchmark_results.json"
        with open(json_path, "w") as f:
            json.dump(
                {name: {"mean": r.mean, "n": r.n, "total": r.total} for name, r in results.items()},
                f,
                indent=2,
            )
        print(f"\nResults saved to {json_path}")


if __name__ == "__main__":
    main()
