from __future__ import annotations

from collections.abc import Iterable, MutableSequence
from typing import TypeVar

from seqalgo.cursor import Comparator, check_range, natural_order, reverse, walk
from seqalgo.merge import merge_runs
from seqalgo.partition import partition_around_last

T = TypeVar("T")


BASE_CASE_SIZE = 16


def _insertion_sort(
    a: MutableSequence[T],
    lo: int,
    hi: int,
    comp: Comparator,
) -> None:
    if hi - lo <= 1:
        return

    for i in range(lo + 1, hi):
        v = a[i]
        j = i - 1
        while j >= lo and comp(v, a[j]):
            a[j + 1] = a[j]
            j -= 1
        a[j + 1] = v


def _sorted_or_reverse(
    a: MutableSequence[T],
    lo: int,
    hi: int,
    comp: Comparator,
) -> tuple[bool, bool]:
    n = hi - lo
    if n <= 1:
        return True, False

    if not comp(a[hi - 1], a[lo]):
        for i in range(lo + 1, hi):
            if comp(a[i], a[i - 1]):
                break
        else:
            return True, False

    for i in range(lo + 1, hi):
        if comp(a[i - 1], a[i]):
            break
    else:
        return False, True

    return False, False


def _quicksort(
    a: MutableSequence[T],
    lo: int,
    hi: int,
    comp: Comparator,
) -> None:
    while hi - lo > BASE_CASE_SIZE:
        mid = partition_around_last(a, lo, hi, comp)
        # recurse into the smaller side, keep looping on the larger one
        if mid - lo < hi - mid - 1:
            _quicksort(a, lo, mid, comp)
            lo = mid + 1
        else:
            _quicksort(a, mid + 1, hi, comp)
            hi = mid
    _insertion_sort(a, lo, hi, comp)


def sort(
    a: MutableSequence[T],
    first: int = 0,
    last: int | None = None,
    *,
    comp: Comparator | None = None,
) -> None:
    """Sort ``a[first:last]`` in place; not stable.

    Quicksort around the last element of each range. Ranges that are already
    in order are left alone and non-increasing ones are reversed, which keeps
    the fixed pivot away from its two classic quadratic inputs.
    """
    first, last = check_range(a, first, last)
    comp = natural_order if comp is None else comp

    is_sorted, is_rev = _sorted_or_reverse(a, first, last, comp)
    if is_sorted:
        return
    if is_rev:
        reverse(a, first, last)
        return

    _quicksort(a, first, last, comp)


def _stable_sort(
    a: MutableSequence[T],
    lo: int,
    hi: int,
    comp: Comparator,
) -> None:
    n = hi - lo
    if n < 2:
        return
    mid = lo + n // 2
    _stable_sort(a, lo, mid, comp)
    _stable_sort(a, mid, hi, comp)
    merge_runs(a, lo, mid, hi, comp)


def stable_sort(
    a: MutableSequence[T],
    first: int = 0,
    last: int | None = None,
    *,
    comp: Comparator | None = None,
) -> None:
    """Sort ``a[first:last]`` in place, keeping equal elements in input order.

    Merge sort whose merge step is :func:`seqalgo.merge.inplace_merge`, so no
    buffer is allocated.
    """
    first, last = check_range(a, first, last)
    _stable_sort(a, first, last, natural_order if comp is None else comp)


def is_sorted_until(
    a: Iterable[T],
    first: int = 0,
    last: int | None = None,
    *,
    comp: Comparator | None = None,
) -> int:
    """Position of the first element that precedes its predecessor, or the range end."""
    first, last = check_range(a, first, last)
    end, violation = _scan_sorted(a, first, last, natural_order if comp is None else comp)
    return end if violation is None else violation


def is_sorted(
    a: Iterable[T],
    first: int = 0,
    last: int | None = None,
    *,
    comp: Comparator | None = None,
) -> bool:
    first, last = check_range(a, first, last)
    _, violation = _scan_sorted(a, first, last, natural_order if comp is None else comp)
    return violation is None


def _scan_sorted(
    a: Iterable[T],
    first: int,
    last: int | None,
    comp: Comparator,
) -> tuple[int, int | None]:
    end = first
    prev = None
    for i, value in walk(a, first, last):
        if i > first and comp(value, prev):
            return end, i
        prev = value
        end = i + 1
    return end, None
