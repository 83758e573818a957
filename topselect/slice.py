"""Select the ``n`` largest or smallest items of a list, rearranging it in place.

Each function moves the selected items to the front of the list, in order,
and returns them as a new list. The remaining items follow in unspecified
order.
"""

from __future__ import annotations

from typing import Any, Callable, MutableSequence

from topselect import iter as _iter
from topselect.heap import (
    Comparator,
    _make_min_heap,
    _sift_down,
    _sort_min_heap,
    natural_compare,
)


def _check_n(v: MutableSequence[Any], n: int) -> None:
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    if n > len(v):
        raise ValueError(f"n ({n}) is greater than the length ({len(v)})")


def max(v: MutableSequence[Any], n: int) -> list:
    """Move the ``n`` largest items to the front, largest first, and return them."""
    return max_by(v, n, natural_compare)


def min(v: MutableSequence[Any], n: int) -> list:
    """Move the ``n`` smallest items to the front, smallest first, and return them."""
    return min_by(v, n, natural_compare)


def max_by(v: MutableSequence[Any], n: int, cmp: Comparator) -> list:
    """Select the ``n`` largest items under the three-way comparator ``cmp``."""
    _check_n(v, n)
    if n == 0:
        return []
    _make_min_heap(v, cmp, n)
    # The root holds the smallest selected item; anything larger from the
    # rest of the list replaces it and is sifted into place.
    for j in range(n, len(v)):
        if cmp(v[j], v[0]) > 0:
            v[0], v[j] = v[j], v[0]
            _sift_down(v, 0, cmp, n)
    _sort_min_heap(v, cmp, n)
    return list(v[:n])


def min_by(v: MutableSequence[Any], n: int, cmp: Comparator) -> list:
    """Select the ``n`` smallest items under the three-way comparator ``cmp``."""
    return max_by(v, n, lambda a, b: cmp(b, a))


def max_by_key(v: MutableSequence[Any], n: int, key: Callable[[Any], Any]) -> list:
    """Select the ``n`` items with the largest keys."""
    return max_by(v, n, lambda a, b: natural_compare(key(a), key(b)))


def min_by_key(v: MutableSequence[Any], n: int, key: Callable[[Any], Any]) -> list:
    """Select the ``n`` items with the smallest keys."""
    return min_by(v, n, lambda a, b: natural_compare(key(a), key(b)))


def _select_cached(v: MutableSequence[Any], n: int, key, select) -> list:
    _check_n(v, n)
    chosen = select(((key(item), index) for index, item in enumerate(v)), n)
    positions = [index for _, index in chosen]
    for i in range(n):
        idx = positions[i]
        while idx < i:
            idx = positions[idx]
        positions[i] = idx
        v[i], v[idx] = v[idx], v[i]
    return list(v[:n])


def max_by_cached_key(v: MutableSequence[Any], n: int, key: Callable[[Any], Any]) -> list:
    """Select the ``n`` items with the largest keys, calling ``key`` once per item."""
    return _select_cached(v, n, key, _iter.max)


def min_by_cached_key(v: MutableSequence[Any], n: int, key: Callable[[Any], Any]) -> list:
    """Select the ``n`` items with the smallest keys, calling ``key`` once per item.

    Items with equal keys keep their original relative order.
    """
    return _select_cached(v, n, key, _iter.min)