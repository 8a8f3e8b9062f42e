"""
Binary max-heap over ``a[first:last]``.

The element at offset ``i`` has children at ``2i+1`` and ``2i+2``; a parent
never strictly precedes a child under ``comp``.
"""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence
from typing import TypeVar

from seqalgo.cursor import Comparator, check_range, natural_order

T = TypeVar("T")


def is_heap_until(
    a: Sequence[T],
    first: int = 0,
    last: int | None = None,
    *,
    comp: Comparator | None = None,
) -> int:
    """Return the first position breaking heap order, or ``last``."""
    first, last = check_range(a, first, last)
    comp = natural_order if comp is None else comp
    n = last - first
    for child in range(1, n):
        if comp(a[first + (child - 1) // 2], a[first + child]):
            return first + child
    return last


def is_heap(
    a: Sequence[T],
    first: int = 0,
    last: int | None = None,
    *,
    comp: Comparator | None = None,
) -> bool:
    first, last = check_range(a, first, last)
    return is_heap_until(a, first, last, comp=comp) == last


def _sift_up(a: MutableSequence[T], first: int, last: int, comp: Comparator) -> None:
    child = last - 1 - first
    while child > 0:
        parent = (child - 1) // 2
        if not comp(a[first + parent], a[first + child]):
            break
        a[first + parent], a[first + child] = a[first + child], a[first + parent]
        child = parent


def sift_down(a: MutableSequence[T], first: int, last: int, comp: Comparator) -> None:
    """Move the root of ``a[first:last]`` down until heap order holds."""
    n = last - first
    parent = 0
    while True:
        child = 2 * parent + 1
        if child >= n:
            break
        # right child wins only when the left one strictly precedes it
        if child + 1 < n and comp(a[first + child], a[first + child + 1]):
            child += 1
        if not comp(a[first + parent], a[first + child]):
            break
        a[first + parent], a[first + child] = a[first + child], a[first + parent]
        parent = child


def push_heap(
    a: MutableSequence[T],
    first: int = 0,
    last: int | None = None,
    *,
    comp: Comparator | None = None,
) -> None:
    """Add ``a[last-1]`` to the heap ``a[first:last-1]``."""
    first, last = check_range(a, first, last)
    if last - first < 2:
        return
    _sift_up(a, first, last, natural_order if comp is None else comp)


def pop_heap(
    a: MutableSequence[T],
    first: int = 0,
    last: int | None = None,
    *,
    comp: Comparator | None = None,
) -> None:
    """Move the largest element to ``last-1`` and re-heap ``a[first:last-1]``."""
    first, last = check_range(a, first, last)
    if last - first < 2:
        return
    last -= 1
    a[first], a[last] = a[last], a[first]
    sift_down(a, first, last, natural_order if comp is None else comp)


def make_heap(
    a: MutableSequence[T],
    first: int = 0,
    last: int | None = None,
    *,
    comp: Comparator | None = None,
) -> None:
    first, last = check_range(a, first, last)
    comp = natural_order if comp is None else comp
    for end in range(first + 2, last + 1):
        _sift_up(a, first, end, comp)


def sort_heap(
    a: MutableSequence[T],
    first: int = 0,
    last: int | None = None,
    *,
    comp: Comparator | None = None,
) -> None:
    """Turn the heap ``a[first:last]`` into an ascending run."""
    first, last = check_range(a, first, last)
    comp = natural_order if comp is None else comp
    while last - first > 1:
        last -= 1
        a[first], a[last] = a[last], a[first]
        sift_down(a, first, last, comp)
