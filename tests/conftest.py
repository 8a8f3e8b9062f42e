from __future__ import annotations

import inspect
import random
import sys
from contextlib import contextmanager

import pytest


class CountingList(list):
    """List that counts element writes made through ``__setitem__``."""

    def __init__(self, *args) -> None:
        super().__init__(*args)
        self.writes = 0

    def __setitem__(self, index, value) -> None:
        self.writes += 1
        super().__setitem__(index, value)


class FalsyComparator:
    """Descending comparator whose instances are falsy (``len() == 0``)."""

    def __call__(self, x, y) -> bool:
        return x > y

    def __len__(self) -> int:
        return 0


@contextmanager
def recursion_headroom(frames: int):
    """Cap the interpreter stack at the caller's depth plus ``frames``."""
    depth = len(inspect.stack(0))
    old = sys.getrecursionlimit()
    sys.setrecursionlimit(depth + frames)
    try:
        yield
    finally:
        sys.setrecursionlimit(old)


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1)


@pytest.fixture
def counting_list():
    return CountingList


@pytest.fixture
def falsy_desc() -> FalsyComparator:
    return FalsyComparator()


@pytest.fixture
def shallow_stack():
    return recursion_headroom
