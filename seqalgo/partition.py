from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable, MutableSequence, Sequence
from typing import TypeVar

from seqalgo.cursor import (
    Capability,
    Comparator,
    Predicate,
    capability_of,
    check_range,
    find_if_not,
    iter_swap,
    rotate,
    walk,
)

T = TypeVar("T")


def is_partitioned(
    a: Iterable[T],
    pred: Predicate,
    first: int = 0,
    last: int | None = None,
) -> bool:
    """True when every element satisfying ``pred`` comes before every one that doesn't."""
    first, last = check_range(a, first, last)
    seen_false = False
    for _, value in walk(a, first, last):
        if pred(value):
            if seen_false:
                return False
        else:
            seen_false = True
    return True


def partition(
    a: MutableSequence[T],
    pred: Predicate,
    first: int = 0,
    last: int | None = None,
) -> int:
    """Move elements satisfying ``pred`` to the front; returns the boundary.

    Single forward pass, not stable.
    """
    first, last = check_range(a, first, last)
    return _partition(a, pred, first, last)


def _partition(a: MutableSequence[T], pred: Predicate, first: int, last: int) -> int:
    write = find_if_not(a, pred, first, last)
    for read in range(write + 1, last):
        if pred(a[read]):
            iter_swap(a, read, write)
            write += 1
    return write


def stable_partition(
    a: MutableSequence[T],
    pred: Predicate,
    first: int = 0,
    last: int | None = None,
) -> int:
    """Like :func:`partition` but keeps the relative order inside both groups.

    O(n) predicate calls, O(n log n) swaps, no buffer.
    """
    first, last = check_range(a, first, last)
    return _stable_partition(a, pred, first, last)


def _stable_partition(a: MutableSequence[T], pred: Predicate, first: int, last: int) -> int:
    n = last - first
    if n == 0:
        return last
    if n == 1:
        return last if pred(a[first]) else first

    mid = first + n // 2
    r1 = _stable_partition(a, pred, first, mid)
    r2 = _stable_partition(a, pred, mid, last)
    # [r1, mid) holds the left falses, [mid, r2) the right trues
    return rotate(a, r1, mid, r2)


def bisect_boundary(a: Sequence[T], pred: Predicate, first: int, last: int) -> int:
    # keys run False..False, True..True over a partitioned range
    return bisect_left(a, True, first, last, key=lambda x: not pred(x))


def partition_point(
    a: Iterable[T],
    pred: Predicate,
    first: int = 0,
    last: int | None = None,
) -> int:
    """Boundary of an already partitioned range.

    Binary search on random-access sequences, a linear scan otherwise.
    """
    first, last = check_range(a, first, last)
    if capability_of(a) is Capability.RANDOM_ACCESS:
        return bisect_boundary(a, pred, first, last)  # type: ignore[arg-type]
    return find_if_not(a, pred, first, last)


def partition_copy(
    source: Iterable[T],
    pred: Predicate,
    out_true: MutableSequence[T],
    out_false: MutableSequence[T],
) -> tuple[MutableSequence[T], MutableSequence[T]]:
    for value in source:
        if pred(value):
            out_true.append(value)
        else:
            out_false.append(value)
    return out_true, out_false


def partition_around_last(a: MutableSequence[T], first: int, last: int, comp: Comparator) -> int:
    """Partition ``a[first:last]`` around its last element.

    Returns the pivot's final position: everything before it strictly precedes
    the pivot, nothing after it does.
    """
    pivot = last - 1
    pivot_value = a[pivot]
    mid = _partition(a, lambda x: comp(x, pivot_value), first, pivot)
    iter_swap(a, mid, pivot)
    return mid
