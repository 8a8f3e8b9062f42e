"""
Positions, comparators and the small primitives every algorithm builds on.

A range is ``a[first:last]`` addressed by integer positions. ``last=None``
means the end of the sequence. Comparators answer "does x strictly precede y".
"""

from __future__ import annotations

import enum
import operator
from collections import deque
from collections.abc import Iterable, Iterator, MutableSequence
from itertools import islice
from typing import Any, Callable, TypeVar

T = TypeVar("T")

Comparator = Callable[[Any, Any], bool]
Predicate = Callable[[Any], bool]


natural_order: Comparator = operator.lt


def by_key(key: Callable[[T], object], reverse: bool = False) -> Comparator:
    """Comparator ordering by ``key``, descending when ``reverse`` is set."""
    if reverse:
        def comp(x, y):
            return key(y) < key(x)
    else:
        def comp(x, y):
            return key(x) < key(y)
    return comp


class Capability(enum.IntEnum):
    FORWARD = 1
    BIDIRECTIONAL = 2
    RANDOM_ACCESS = 3


def capability_of(seq: object) -> Capability:
    # deque supports indexing, but only in O(n) away from the ends
    if isinstance(seq, deque):
        return Capability.BIDIRECTIONAL
    if hasattr(seq, "__len__") and hasattr(seq, "__getitem__"):
        return Capability.RANDOM_ACCESS
    return Capability.FORWARD


def check_range(seq: object, first: int, last: int | None) -> tuple[int, int | None]:
    """Resolve ``last`` and reject positions outside the sequence.

    Sequences without ``len()`` keep ``last=None``, meaning "until exhausted".
    """
    size = len(seq) if hasattr(seq, "__len__") else None
    if last is None:
        last = size
    if first < 0:
        raise ValueError(f"first must be >= 0, got {first}")
    if last is not None:
        if last < first:
            raise ValueError(f"range is reversed: first={first}, last={last}")
        if size is not None and last > size:
            raise ValueError(f"last={last} is past the end of a sequence of length {size}")
    return first, last


def check_position(name: str, pos: int, first: int, last: int) -> None:
    if not first <= pos <= last:
        raise ValueError(f"{name}={pos} is outside [{first}, {last}]")


def walk(seq: Iterable[T], first: int, last: int | None) -> Iterator[tuple[int, T]]:
    """Yield ``(position, value)`` pairs over the range using the cheapest traversal."""
    if capability_of(seq) is Capability.RANDOM_ACCESS:
        if last is None:
            last = len(seq)  # type: ignore[arg-type]
        for i in range(first, last):
            yield i, seq[i]  # type: ignore[index]
        return
    yield from enumerate(islice(seq, first, last), start=first)


def iter_swap(a: MutableSequence[T], i: int, j: int) -> None:
    if i != j:
        a[i], a[j] = a[j], a[i]


def reverse(a: MutableSequence[T], first: int, last: int) -> None:
    last -= 1
    while first < last:
        a[first], a[last] = a[last], a[first]
        first += 1
        last -= 1


def rotate(a: MutableSequence[T], first: int, n_first: int, last: int) -> int:
    """Rotate ``a[first:last]`` left so ``a[n_first]`` lands at ``first``.

    Returns the new position of the element that was at ``first``.
    Uses only forward steps and swaps.
    """
    if first == n_first:
        return last
    if n_first == last:
        return first

    result = first + (last - n_first)
    nxt = n_first
    while first != nxt:
        a[first], a[nxt] = a[nxt], a[first]
        first += 1
        nxt += 1
        if nxt == last:
            nxt = n_first
        elif first == n_first:
            n_first = nxt
    return result


def find_if_not(seq: Iterable[T], pred: Predicate, first: int = 0, last: int | None = None) -> int:
    """Position of the first element failing ``pred``, or the range end."""
    end = first
    for i, value in walk(seq, first, last):
        if not pred(value):
            return i
        end = i + 1
    return end
