"""
Buffer-free stable merge of two adjacent sorted runs.

The runs ``a[first:middle]`` and ``a[middle:last]`` are joined by repeatedly
finding the blocks that straddle ``middle`` out of order, rotating them past
each other and merging the two independent halves that result. Only elements
that strictly cross each other are ever rotated, so equal elements keep their
relative order.
"""

from __future__ import annotations

from collections.abc import MutableSequence
from typing import TypeVar

from seqalgo.cursor import Comparator, check_position, check_range, natural_order, rotate
from seqalgo.partition import bisect_boundary

T = TypeVar("T")


def inplace_merge(
    a: MutableSequence[T],
    middle: int,
    first: int = 0,
    last: int | None = None,
    *,
    comp: Comparator | None = None,
) -> None:
    """Merge the sorted runs ``a[first:middle]`` and ``a[middle:last]`` in place.

    Args:
        a: The sequence holding both runs.
        middle: Start of the second run.
        first: Start of the first run.
        last: End of the second run, ``len(a)`` when omitted.
        comp: Strict "precedes" comparator both runs are sorted by.

    An already ordered pair of runs is left untouched (no writes).
    """
    first, last = check_range(a, first, last)
    check_position("middle", middle, first, last)
    merge_runs(a, first, middle, last, natural_order if comp is None else comp)


def merge_runs(a: MutableSequence[T], first: int, middle: int, last: int, comp: Comparator) -> None:
    while first < middle < last:
        # count the pairs crossing middle: a[middle+k] < a[middle-1-k]
        k = 0
        while (
            middle - 1 - k >= first
            and middle + k < last
            and comp(a[middle + k], a[middle - 1 - k])
        ):
            k += 1
        if k == 0:
            return

        start1 = middle - k
        end2 = middle + k

        # widen the right block with anything below the left block's minimum
        low = a[start1]
        end2 = bisect_boundary(a, lambda x: comp(x, low), end2, last)
        # widen the left block with anything above the right block's maximum
        high = a[end2 - 1]
        start1 = bisect_boundary(a, lambda x: not comp(high, x), first, start1)

        new_middle = rotate(a, start1, middle, end2)

        # [first, new_middle) and [new_middle, last) now merge independently
        if new_middle - first < last - new_middle:
            merge_runs(a, first, start1, new_middle, comp)
            first, middle = new_middle, end2
        else:
            merge_runs(a, new_middle, end2, last, comp)
            last, middle = new_middle, start1
