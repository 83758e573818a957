# topselect

Pick the `n` smallest or largest items from a list or from any iterable
without sorting all of it.

While the input is scanned, a binary heap holding at most `n` items is kept.
When `n` is small compared to the input, this costs much less than a full sort.

The package has three modules:

- `topselect.iter` selects from any iterable and returns a new list.
- `topselect.slice` selects from a mutable sequence and rearranges it in place.
- `topselect.heap` holds the heap helpers that both modules use.

## Installation

```
pip install topselect
```

## Comparators and keys

The `*_by` functions take a comparator. A comparator gets two items and
returns a negative number, zero or a positive number. These mean that the
first item is less than, equal to or greater than the second.
`topselect.heap.natural_compare(a, b)` is the comparator that uses the items'
own ordering.

The `*_by_key` functions take a key function. The items are then compared by
the keys that this function returns.

## Iterables

`topselect.iter` works on any iterable. The iterable is read once. The
functions return a new list: the largest items come first for `max`, and the
smallest come first for `min`. If the input holds fewer than `n` items, every
item is returned, in that order.

```python
from topselect import iter as topiter

topiter.max(range(-10, 10), 3)                # [9, 8, 7]
topiter.min(range(-10, 10), 3)                # [-10, -9, -8]
topiter.max_by_key(range(-10, 10), 3, abs)    # [-10, -9, 9]
topiter.min_by_key(range(-10, 10), 3, abs)    # [0, -1, 1]

topiter.max_by(range(-10, 10), 3, lambda a, b: (b > a) - (b < a))  # [-10, -9, -8]
```

A negative `n` raises `ValueError`. An `n` of zero returns an empty list.

## Sequences in place

`topselect.slice` works on a mutable sequence such as a list. The selected
items are moved to the front of the sequence, in order, and are also returned
as a new list. The items that were not selected follow them, in no particular
order.

```python
from topselect import slice as topslice

v = [-5, 4, 1, -3, 2]
topslice.max(v, 3)      # [4, 2, 1]
v                       # [4, 2, 1, -5, -3]

v = [-5, 4, 1, -3, 2]
topslice.min(v, 3)               # [-5, -3, 1]

v = [-5, 4, 1, -3, 2]
topslice.min_by_key(v, 3, abs)   # [1, 2, -3]
```

`ValueError` is raised if `n` is negative or greater than the length of the
sequence.

`max_by_cached_key` and `min_by_cached_key` call the key function only once
for each element. Use them when the key costs a lot to compute.
`min_by_cached_key` keeps elements with equal keys in their original order.

```python
v = [-5, 4, 1, -3, 2]
topslice.max_by_cached_key(v, 3, abs)   # [-5, 4, -3]

v = [-5, 4, 1, -3, 2]
topslice.min_by_cached_key(v, 3, abs)   # [1, 2, -3]
```

## Heap helpers

`topselect.heap` works in place on a mutable sequence, using a comparator:

- `make_min_heap(v, cmp)` arranges `v` into a min binary heap.
- `sift_down(v, i, cmp)` moves the element at index `i` down until the heap
  property holds again.
- `sort_min_heap(v, cmp)` sorts a min heap into descending order.

## Running the tests

```
pip install topselect[test]
pytest
```