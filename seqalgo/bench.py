"""Timing comparison of the in-place algorithms against ``list.sort``.

Run as ``seqalgo-bench`` (or ``python -m seqalgo.bench``); see ``--help``.
"""

from __future__ import annotations

import argparse
import logging
import random
import time
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path
from random import randint as rd
from typing import Callable

import matplotlib.pyplot as plt

from seqalgo.heap import make_heap, sort_heap
from seqalgo.select import nth_element, partial_sort
from seqalgo.sort import sort, stable_sort

logger = logging.getLogger(__name__)

DEFAULT_SIZES = list(range(1, 20_001, 2_000))
DEFAULT_REPS = 3


def heap_sort(arr):
    make_heap(arr)
    sort_heap(arr)
    return arr


def quick_sort(arr):
    sort(arr)
    return arr


def merge_sort(arr):
    stable_sort(arr)
    return arr


def top_decile(arr):
    partial_sort(arr, len(arr) // 10)
    return arr


def median_select(arr):
    nth_element(arr, len(arr) // 2)
    return arr


def default_sort(arr):
    arr.sort()
    return arr


ALGORITHMS: dict[str, Callable[[list], list]] = {
    "sort": quick_sort,
    "stable_sort": merge_sort,
    "heap_sort": heap_sort,
    "partial_sort(n/10)": top_decile,
    "nth_element(n/2)": median_select,
    ".sort()": default_sort,
}


def measure(sort_fn, base_arr, reps=3):
    best = float('inf')
    if len(base_arr) <= 1:
        return 0.0
    for _ in range(reps):
        arr = base_arr.copy()
        start = time.perf_counter()
        sort_fn(arr)
        end = time.perf_counter()
        best = min(best, end - start)
    return best


def bench_one_n(args):
    n, base_arr, reps = args
    return n, {name: measure(fn, base_arr, reps=reps) for name, fn in ALGORITHMS.items()}


def run_bench(tasks, reps=DEFAULT_REPS, workers=None):
    """Time every algorithm on every ``(n, base_arr)`` task.

    Returns a mapping of algorithm name to timings in task order.
    """
    series: dict[str, list[float]] = {name: [] for name in ALGORITHMS}
    jobs = [(n, base_arr, reps) for n, base_arr in tasks]

    if workers == 1:
        results = map(bench_one_n, jobs)
        for n, times in results:
            _collect(series, n, times)
        return series

    with ProcessPoolExecutor(max_workers=workers) as executor:
        for n, times in executor.map(bench_one_n, jobs):
            _collect(series, n, times)
    return series


def _collect(series, n, times):
    logger.debug("n=%d: %s", n, ", ".join(f"{k}={v:.4f}s" for k, v in times.items()))
    for name, t in times.items():
        series[name].append(t)


def random_data(n, max_value=10_000_000):
    return [rd(1, max_value) for _ in range(n)]


def trend_with_jumps(n, jump_prob=0.05):
    arr = []
    value = 1
    for _ in range(n):
        if random.random() < jump_prob:
            value += rd(-10, 10)
        else:
            value += rd(0, 1)

        if value < 1:
            value = 1

        arr.append(value)

    return arr


def worst_case(n):
    return list(range(n, 0, -1))


def best_case(n):
    return list(range(n))


def worst_case_alternating_high_low(n):
    high = list(range(n, 0, -1))
    low = list(range(1, n + 1))
    arr = []
    for h, l in zip(high, low):
        arr.append(h)
        arr.append(l)
    return arr[:n]


def generate_many_duplicates(n, distinct_values=3, max_value=20):
    base_values = random.sample(range(1, max_value + 1), k=distinct_values)
    return [random.choice(base_values) for _ in range(n)]


def generate_many_unique_spread(n, range_multiplier=1000):
    """
    range_multiplier - "range" of values will be n * range_multiplier
    """
    max_value = n * range_multiplier
    arr = random.sample(range(1, max_value + 1), n)
    return arr


# many-duplicates input drives the last-element pivot quadratic; opt in with --datasets
DATASETS: dict[str, tuple[str, Callable[[int], list]]] = {
    "random": ("Random data sorting comparison", random_data),
    "jumps": ("Data with jumps sorting comparison", trend_with_jumps),
    "best": ("Best-case data sorting comparison", best_case),
    "worst": ("Worst-case data sorting comparison", worst_case),
    "alternating": ("Alternating-case data sorting comparison", worst_case_alternating_high_low),
    "duplicates": ("Many Duplicates Data Sorting Comparison", generate_many_duplicates),
    "unique": ("Many Unique Spread Data Sorting Comparison", generate_many_unique_spread),
}
DEFAULT_DATASETS = ["random", "jumps", "best", "worst", "alternating", "unique"]


@dataclass
class BenchConfig:
    sizes: list[int] = field(default_factory=lambda: list(DEFAULT_SIZES))
    datasets: list[str] = field(default_factory=lambda: list(DEFAULT_DATASETS))
    reps: int = DEFAULT_REPS
    workers: int | None = None
    seed: int | None = None
    output: Path | None = None

    def __post_init__(self) -> None:
        unknown = [d for d in self.datasets if d not in DATASETS]
        if unknown:
            raise ValueError(f"unknown datasets: {', '.join(unknown)}")
        if self.reps < 1:
            raise ValueError("reps must be >= 1")
        if any(n < 0 for n in self.sizes):
            raise ValueError("sizes must be >= 0")


def plot_results(sizes, series, title, output=None):
    """
    sizes - list of array sizes
    series - list of tuples (label, values), where values is a list of times corresponding to sizes
    title  - title of the plot
    output - file to save the figure to; shown interactively when None
    """
    fig = plt.figure(figsize=(10, 6))
    for label, values in series:
        plt.plot(sizes, values, label=label)

    plt.title(title)
    plt.xlabel("Array size")
    plt.ylabel("Time, sec")
    plt.grid(True)
    plt.legend()
    plt.tight_layout()
    if output is None:
        plt.show()
    else:
        fig.savefig(output)
        logger.info("Saved %s", output)
    plt.close(fig)


def run(config: BenchConfig) -> dict[str, dict[str, list[float]]]:
    if config.seed is not None:
        random.seed(config.seed)

    results = {}
    for name in config.datasets:
        title, generate = DATASETS[name]
        logger.info("Benchmarking %s data over %d sizes", name, len(config.sizes))
        tasks = [(n, generate(n)) for n in config.sizes]
        series = run_bench(tasks, reps=config.reps, workers=config.workers)
        results[name] = series

        output = None
        if config.output is not None:
            config.output.mkdir(parents=True, exist_ok=True)
            output = config.output / f"{name}.png"
        plot_results(config.sizes, list(series.items()), title, output=output)
    return results


def parse_args(argv=None) -> BenchConfig:
    parser = argparse.ArgumentParser(description="Compare seqalgo sorting and selection timings")
    parser.add_argument(
        "--sizes",
        type=int,
        nargs="+",
        default=DEFAULT_SIZES,
        help="Array sizes to time",
    )
    parser.add_argument(
        "--datasets",
        nargs="+",
        choices=sorted(DATASETS),
        default=DEFAULT_DATASETS,
        help="Input shapes to time",
    )
    parser.add_argument("--reps", type=int, default=DEFAULT_REPS, help="Best-of repetitions")
    parser.add_argument("--workers", type=int, default=None, help="Worker processes (1 runs inline)")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the data generators")
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Directory for <dataset>.png plots instead of interactive windows",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log per-size timings")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    return BenchConfig(
        sizes=args.sizes,
        datasets=args.datasets,
        reps=args.reps,
        workers=args.workers,
        seed=args.seed,
        output=args.output,
    )


def main(argv=None) -> None:
    run(parse_args(argv))


if __name__ == "__main__":
    main()
