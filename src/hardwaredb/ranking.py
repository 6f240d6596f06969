"""Fail-fast collection and comparator-driven sorting of scored results."""

from __future__ import annotations

import functools
from collections.abc import Callable, Iterable
from typing import Any, Protocol

from hardwaredb.errors import IncomparableError

type Compare[T] = Callable[[T, T], int]


class _PartiallyOrdered(Protocol):
    def __lt__(self, other: Any, /) -> bool: ...
    def __gt__(self, other: Any, /) -> bool: ...


def collect_sorted[T](items: Iterable[T], compare: Compare[T]) -> list[T]:
    """Realize ``items`` and return them sorted by ``compare``.

    ``items`` is usually a generator whose elements are computed on
    demand; the first exception raised while producing an element
    propagates unchanged and nothing is sorted. Sort stability is not
    part of the contract.
    """
    realized = list(items)
    realized.sort(key=functools.cmp_to_key(compare))
    return realized


def on[T, K](key: Callable[[T], K], compare: Compare[K]) -> Compare[T]:
    """Compare items by ``compare`` applied to ``key(item)``."""

    def _compare(a: T, b: T) -> int:
        return compare(key(a), key(b))

    return _compare


def descending[T](compare: Compare[T]) -> Compare[T]:
    """Reverse ``compare``."""

    def _compare(a: T, b: T) -> int:
        return compare(b, a)

    return _compare


def strict_compare(a: _PartiallyOrdered, b: _PartiallyOrdered) -> int:
    """Total order over values that are only partially ordered.

    Raises ``IncomparableError`` (fatal) for pairs such as NaN that are
    neither less, greater nor equal.
    """
    if a < b:
        return -1
    if a > b:
        return 1
    if a == b:
        return 0
    raise IncomparableError(a, b)
