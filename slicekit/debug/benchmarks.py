"""
Micro-benchmarks comparing slice allocation and growth against plain
ndarrays. Uses only the public slicekit API.

    python -m slicekit.debug.benchmarks [profile_dir]
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Dict, Iterable

import numpy as np

from slicekit import Slice
from slicekit.debug.profiler import profile

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Benchmark:
    name: str
    fn: Callable[[], None]
    repeat: int


def bench_new_array() -> None:
    a = np.zeros(1024, dtype=np.int32)
    for _ in range(100):
        a = np.zeros(1024, dtype=np.int32)
    a[100] = 11


def bench_new_slice() -> None:
    a = Slice(1024, element_type=np.int32)
    for _ in range(100):
        a = Slice(1024, element_type=np.int32)
    a[100] = 11


def _append_loop(size: int) -> None:
    s1 = Slice(size, element_type=np.int32)
    s2 = Slice(size, element_type=np.int32)
    for _ in range(20):
        s1 = s1.append(s2)


def bench_small_append() -> None:
    _append_loop(5)


def bench_large_append() -> None:
    _append_loop(1024)


def bench_huge_append() -> None:
    _append_loop(66560)


BENCHMARKS: Dict[str, Benchmark] = {
    b.name: b
    for b in (
        Benchmark("new_array", bench_new_array, 10000),
        Benchmark("new_slice", bench_new_slice, 10000),
        Benchmark("small_append", bench_small_append, 1000),
        Benchmark("large_append", bench_large_append, 1000),
        Benchmark("huge_append", bench_huge_append, 1000),
    )
}


def run_benchmarks(
    names: Iterable[str] | None = None,
    scale: float = 1.0,
    profile_dir: Path | None = None,
) -> Dict[str, float]:
    """
    Runs each benchmark `repeat * scale` times (at least once).
    Returns the mean seconds per call, keyed by benchmark name.

    With `profile_dir`, each benchmark's runs are also recorded with
    cProfile and written there as <name>.prof plus sorted text reports.
    """
    selected = list(BENCHMARKS) if names is None else list(names)
    results: Dict[str, float] = {}

    for name in selected:
        bench = BENCHMARKS.get(name)
        if bench is None:
            raise KeyError(f"Unknown benchmark: {name}")

        runs = max(1, int(bench.repeat * scale))

        def repeat(fn: Callable[[], None] = bench.fn, runs: int = runs) -> None:
            for _ in range(runs):
                fn()

        repeat.__name__ = name
        if profile_dir is not None:
            repeat = profile(out_dir=profile_dir)(repeat)

        start = time.perf_counter()
        repeat()
        elapsed = time.perf_counter() - start

        results[name] = elapsed / runs
        logger.info(
            "[bench] %-12s %6d runs  %.3f ms/run", name, runs, results[name] * 1e3
        )

    return results


if __name__ == "__main__":
    import sys

    logging.basicConfig(level=logging.INFO, format="%(message)s")
    run_benchmarks(profile_dir=Path(sys.argv[1]) if len(sys.argv) > 1 else None)
