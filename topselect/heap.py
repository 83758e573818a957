"""Binary min-heap primitives driven by a three-way comparator.

A comparator takes two items and returns a negative number, zero or a
positive number when the first is less than, equal to or greater than
the second.
"""

from __future__ import annotations

from typing import Any, Callable, MutableSequence

Comparator = Callable[[Any, Any], int]


def make_min_heap(v: MutableSequence[Any], cmp: Comparator) -> None:
    """Arrange ``v`` in place into a min binary heap under ``cmp``."""
    _make_min_heap(v, cmp, len(v))


def sift_down(v: MutableSequence[Any], i: int, cmp: Comparator) -> None:
    """Move the element at index ``i`` down until the heap property holds."""
    _sift_down(v, i, cmp, len(v))


def sort_min_heap(v: MutableSequence[Any], cmp: Comparator) -> None:
    """Sort a min heap in place; the result is in descending order under ``cmp``."""
    _sort_min_heap(v, cmp, len(v))


def _make_min_heap(v: MutableSequence[Any], cmp: Comparator, end: int) -> None:
    for i in reversed(range(end // 2)):
        _sift_down(v, i, cmp, end)


def _sift_down(v: MutableSequence[Any], i: int, cmp: Comparator, end: int) -> None:
    while True:
        left = i * 2 + 1
        if left >= end:
            return
        right = left + 1
        child = right if right < end and cmp(v[right], v[left]) < 0 else left
        if cmp(v[child], v[i]) >= 0:
            return
        v[i], v[child] = v[child], v[i]
        i = child


def _sort_min_heap(v: MutableSequence[Any], cmp: Comparator, end: int) -> None:
    for last in range(end - 1, 0, -1):
        v[0], v[last] = v[last], v[0]
        _sift_down(v, 0, cmp, last)


def natural_compare(a: Any, b: Any) -> int:
    """Three-way comparison using the items' own ordering."""
    return (a > b) - (a < b)