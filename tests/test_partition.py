from __future__ import annotations

from collections import Counter, deque

import pytest
from hypothesis import given, strategies as st

from seqalgo.partition import (
    is_partitioned,
    partition,
    partition_around_last,
    partition_copy,
    partition_point,
    stable_partition,
)


def is_even(x: int) -> bool:
    return x % 2 == 0


@pytest.mark.parametrize("n", range(0, 10))
def test_is_partitioned(n: int) -> None:
    def is_a(c: str) -> bool:
        return c == "a"

    for k in range(n + 1):
        u = ["a"] * k + ["X"] * (n - k)
        assert is_partitioned(u, is_a)
    if n > 2:
        for k in range(n):
            v = ["a"] * n
            v[min(n - 2, k)] = "X"
            assert not is_partitioned(v, is_a)


@given(st.lists(st.integers(min_value=-100, max_value=100), max_size=100))
def test_partition(values: list[int]) -> None:
    a = list(values)
    mid = partition(a, is_even)
    assert all(is_even(x) for x in a[:mid])
    assert not any(is_even(x) for x in a[mid:])
    assert Counter(a) == Counter(values)
    assert is_partitioned(a, is_even)


@given(st.lists(st.integers(min_value=-100, max_value=100), max_size=100))
def test_stable_partition_keeps_group_order(values: list[int]) -> None:
    tagged = list(enumerate(values))
    mid = stable_partition(tagged, lambda p: is_even(p[1]))
    assert [p for p in tagged[:mid]] == [p for p in enumerate(values) if is_even(p[1])]
    assert [p for p in tagged[mid:]] == [p for p in enumerate(values) if not is_even(p[1])]


def test_stable_partition_base_cases() -> None:
    assert stable_partition([], is_even) == 0
    assert stable_partition([2], is_even) == 1
    assert stable_partition([3], is_even) == 0


def test_stable_partition_calls_predicate_once_per_element() -> None:
    calls = []

    def pred(x: int) -> bool:
        calls.append(x)
        return is_even(x)

    a = list(range(37))
    stable_partition(a, pred)
    assert sorted(calls) == list(range(37))


def test_partition_subrange() -> None:
    a = [1, 3, 2, 5, 4, 7]
    mid = partition(a, is_even, 1, 5)
    assert a[0] == 1 and a[5] == 7
    assert mid == 3
    assert sorted(a[1:3]) == [2, 4]


@pytest.mark.parametrize("make", [list, deque, iter])
def test_partition_point_every_tier(make) -> None:
    for n in range(10):
        for k in range(n + 1):
            data = [0] * k + [1] * (n - k)
            assert partition_point(make(data), lambda x: x == 0) == k


def test_partition_point_unpartitioned_is_deterministic() -> None:
    data = [1, 0, 1, 0, 0, 1, 0]
    first = partition_point(data, lambda x: x == 0)
    assert 0 <= first <= len(data)
    assert partition_point(data, lambda x: x == 0) == first


def test_partition_copy() -> None:
    evens, odds = partition_copy(range(10), is_even, [], [])
    assert evens == [0, 2, 4, 6, 8]
    assert odds == [1, 3, 5, 7, 9]


def test_partition_around_last() -> None:
    a = [7, 2, 9, 1, 5]
    pos = partition_around_last(a, 0, len(a), lambda x, y: x < y)
    assert a[pos] == 5
    assert all(x < 5 for x in a[:pos])
    assert all(x >= 5 for x in a[pos + 1 :])


def test_predicate_error_propagates() -> None:
    def boom(x: int) -> bool:
        if x == 3:
            raise RuntimeError("bad element")
        return is_even(x)

    a = [2, 1, 3, 4]
    with pytest.raises(RuntimeError):
        stable_partition(a, boom)
    assert sorted(a) == [1, 2, 3, 4]


def test_partition_point_bisects_random_access_only() -> None:
    calls = 0

    def below_700(x: int) -> bool:
        nonlocal calls
        calls += 1
        return x < 700

    data = list(range(1024))
    assert partition_point(data, below_700) == 700
    assert calls <= 11

    calls = 0
    assert partition_point(deque(data), below_700) == 700
    assert calls == 701
