"""Lazy zipping, enumeration and integer ranges."""

from __future__ import annotations

import itertools
from collections.abc import Iterable, Iterator
from typing import Any, TypeVar

__all__ = ["zipped", "enumerated", "iota_range", "unbounded_iota_range"]

T = TypeVar("T")


def zipped(*args: Iterable[Any]) -> Iterator[tuple[Any, ...]]:
    """Iterate the given sequences in lockstep, stopping at the shortest."""
    if not args:
        raise TypeError("zipped() requires at least one sequence")
    return zip(*args)


def enumerated(seq: Iterable[T]) -> Iterator[tuple[int, T]]:
    """Pair each element of seq with its index, starting from 0."""
    return zipped(unbounded_iota_range(0), seq)


def iota_range(begin: int, end: int) -> range:
    """Integers from begin up to, but not including, end."""
    return range(begin, end)


def unbounded_iota_range(begin: int = 0) -> Iterator[int]:
    """Integers counting up from begin without end."""
    return itertools.count(begin)