"""
Selection: quickselect, partial sorting and top-k copying.
"""

from __future__ import annotations

from collections.abc import Iterable, MutableSequence
from typing import TypeVar

from seqalgo.cursor import Comparator, check_position, check_range, natural_order
from seqalgo.heap import make_heap, sift_down, sort_heap
from seqalgo.partition import partition_around_last
from seqalgo.sort import sort

T = TypeVar("T")


def _nth_element(a: MutableSequence[T], nth: int, lo: int, hi: int, comp: Comparator) -> None:
    while hi - lo > 1:
        mid = partition_around_last(a, lo, hi, comp)
        if mid == nth:
            return
        if mid > nth:
            hi = mid
        else:
            lo = mid + 1


def nth_element(
    a: MutableSequence[T],
    nth: int,
    first: int = 0,
    last: int | None = None,
    *,
    comp: Comparator | None = None,
) -> None:
    """Put at ``nth`` the element a full sort would put there.

    Nothing before ``nth`` strictly follows it and nothing after strictly
    precedes it; both sides are otherwise unordered. ``nth == last`` is a no-op.
    """
    first, last = check_range(a, first, last)
    check_position("nth", nth, first, last)
    if nth == last:
        return
    _nth_element(a, nth, first, last, natural_order if comp is None else comp)


def partial_sort(
    a: MutableSequence[T],
    middle: int,
    first: int = 0,
    last: int | None = None,
    *,
    comp: Comparator | None = None,
) -> None:
    """Sort the smallest ``middle - first`` elements into ``a[first:middle]``.

    The rest of the range keeps elements that don't precede any of them, in
    unspecified order.
    """
    first, last = check_range(a, first, last)
    check_position("middle", middle, first, last)
    if middle == first:
        return
    comp = natural_order if comp is None else comp
    if middle != last:
        _nth_element(a, middle - 1, first, last, comp)
    sort(a, first, middle, comp=comp)


def partial_sort_copy(
    source: Iterable[T],
    dest: MutableSequence[T],
    d_first: int = 0,
    d_last: int | None = None,
    *,
    comp: Comparator | None = None,
) -> int:
    """Copy the smallest elements of ``source`` into ``dest[d_first:d_last]`` in order.

    Keeps a max-heap of the best candidates seen so far in the destination,
    so ``source`` is read once and may be any iterable. Returns the end of the
    written part, ``d_first + min(len(source), d_last - d_first)``.
    """
    d_first, d_last = check_range(dest, d_first, d_last)
    if d_first == d_last:
        return d_last
    comp = natural_order if comp is None else comp

    items = iter(source)
    write = d_first
    for value in items:
        dest[write] = value
        write += 1
        if write == d_last:
            break

    make_heap(dest, d_first, write, comp=comp)
    for value in items:
        if comp(value, dest[d_first]):
            dest[d_first] = value
            sift_down(dest, d_first, write, comp)

    sort_heap(dest, d_first, write, comp=comp)
    return write
