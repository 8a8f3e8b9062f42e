from __future__ import annotations

import random

import matplotlib
import pytest

matplotlib.use("Agg")

from seqalgo import bench  # noqa: E402


def test_generators_shape() -> None:
    random.seed(0)
    assert bench.best_case(4) == [0, 1, 2, 3]
    assert bench.worst_case(4) == [4, 3, 2, 1]
    assert bench.worst_case_alternating_high_low(5) == [5, 1, 4, 2, 3]
    assert len(bench.trend_with_jumps(100)) == 100
    assert min(bench.trend_with_jumps(100)) >= 1
    assert len(set(bench.generate_many_duplicates(200))) <= 3
    spread = bench.generate_many_unique_spread(50)
    assert len(set(spread)) == 50


def test_every_algorithm_leaves_expected_result() -> None:
    base = bench.random_data(300, max_value=50)
    for name in (".sort()", "sort", "stable_sort", "heap_sort"):
        assert bench.ALGORITHMS[name](list(base)) == sorted(base)
    top = bench.ALGORITHMS["partial_sort(n/10)"](list(base))
    assert top[:30] == sorted(base)[:30]
    med = bench.ALGORITHMS["nth_element(n/2)"](list(base))
    assert med[150] == sorted(base)[150]


def test_measure_skips_trivial_inputs() -> None:
    assert bench.measure(bench.quick_sort, [1]) == 0.0
    assert bench.measure(bench.quick_sort, [3, 2, 1], reps=2) >= 0.0


def test_run_bench_inline() -> None:
    tasks = [(n, bench.random_data(n)) for n in (0, 10, 50)]
    series = bench.run_bench(tasks, reps=1, workers=1)
    assert set(series) == set(bench.ALGORITHMS)
    assert all(len(times) == 3 for times in series.values())


def test_config_rejects_unknown_dataset() -> None:
    with pytest.raises(ValueError):
        bench.BenchConfig(datasets=["nope"])
    with pytest.raises(ValueError):
        bench.BenchConfig(reps=0)


def test_main_writes_plots(tmp_path) -> None:
    bench.main(
        [
            "--sizes", "0", "20", "40",
            "--datasets", "random", "worst",
            "--reps", "1",
            "--workers", "1",
            "--seed", "7",
            "--output", str(tmp_path),
        ]
    )
    assert (tmp_path / "random.png").exists()
    assert (tmp_path / "worst.png").exists()
