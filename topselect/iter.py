"""Select the ``n`` largest or smallest items from any iterable."""

from __future__ import annotations

from itertools import islice
from typing import Any, Callable, Iterable

from topselect.heap import Comparator, make_min_heap, natural_compare, sift_down, sort_min_heap


def _check_n(n: int) -> None:
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")


def max(iterable: Iterable[Any], n: int) -> list:
    """Return the ``n`` largest items, largest first."""
    return max_by(iterable, n, natural_compare)


def min(iterable: Iterable[Any], n: int) -> list:
    """Return the ``n`` smallest items, smallest first."""
    return min_by(iterable, n, natural_compare)


def max_by(iterable: Iterable[Any], n: int, cmp: Comparator) -> list:
    """Return the ``n`` largest items under the three-way comparator ``cmp``."""
    _check_n(n)
    if n == 0:
        return []
    items = iter(iterable)
    best = list(islice(items, n))
    make_min_heap(best, cmp)
    for item in items:
        if cmp(item, best[0]) > 0:
            best[0] = item
            sift_down(best, 0, cmp)
    sort_min_heap(best, cmp)
    return best


def min_by(iterable: Iterable[Any], n: int, cmp: Comparator) -> list:
    """Return the ``n`` smallest items under the three-way comparator ``cmp``."""
    return max_by(iterable, n, lambda a, b: cmp(b, a))


def max_by_key(iterable: Iterable[Any], n: int, key: Callable[[Any], Any]) -> list:
    """Return the ``n`` items with the largest keys."""
    return max_by(iterable, n, lambda a, b: natural_compare(key(a), key(b)))


def min_by_key(iterable: Iterable[Any], n: int, key: Callable[[Any], Any]) -> list:
    """Return the ``n`` items with the smallest keys."""
    return min_by(iterable, n, lambda a, b: natural_compare(key(a), key(b)))