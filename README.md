# iterheap

Small, dependency-free helpers for working with iterators through binary heaps.

- `iterheap.kmerge`: `kmerge` and `kmerge_by` lazily merge any number of
  iterables into one stream. If every input is sorted, the output is sorted too.
- `iterheap.k_smallest`: `k_smallest`, `k_smallest_by`, `k_smallest_relaxed`
  and `k_smallest_relaxed_by` consume an iterable and return its `k` smallest
  elements in ascending order. The strict variants keep at most `k` elements
  at a time, the relaxed variants at most `2 * k`.
- `iterheap.lazy_buffer`: `LazyBuffer` wraps an iterator and pulls items into
  an indexable buffer only when asked.

## Installation

```
pip install iterheap
```

The package needs Python 3.10 or later and has no runtime dependencies.

## Merging sorted iterables

```python
from iterheap.kmerge import kmerge, kmerge_by

list(kmerge([[0, 2, 4], [1, 3, 5], [6, 7]]))
# [0, 1, 2, 3, 4, 5, 6, 7]

# A custom "less than" predicate, here for inputs sorted in descending order.
list(kmerge_by([[5, 3, 1], [4, 2]], lambda a, b: a >= b))
# [5, 4, 3, 2, 1]
```

Both functions return a `KMergeBy` iterator. `kmerge` orders items with `<`;
`kmerge_by` calls `less_than(a, b)` to decide whether `a` comes before `b`.
The first element of every input is read as soon as the `KMergeBy` is
created; empty inputs are dropped at that point. After that, each element
yielded reads at most one more element from the input it came from.

## The k smallest elements

```python
from iterheap.k_smallest import k_smallest, k_smallest_relaxed

k_smallest([5, 1, 4, 2, 3], 3)
# [1, 2, 3]

k_smallest(["pear", "fig", "banana"], 2, key=len)
# ['fig', 'pear']

k_smallest_relaxed(range(100, 0, -1), 4)
# [1, 2, 3, 4]
```

`k_smallest` and `k_smallest_relaxed` take an optional `key` function.
`k_smallest_by` and `k_smallest_relaxed_by` take a comparator
`comparator(a, b)` that returns a negative number, zero or a positive number,
as `functools.cmp_to_key` expects.

All four always consume the whole input, even when `k` is zero (the result is
then an empty list). If the input has fewer than `k` elements, all of them are
returned, sorted. A negative `k` raises `ValueError`.

## LazyBuffer

```python
from iterheap.lazy_buffer import LazyBuffer

buf = LazyBuffer(iter("abcdef"))
buf.prefill(3)
len(buf)             # 3
buf[0], buf[2]       # ('a', 'c')
buf.get_next()       # True: 'd' was pulled in
buf.get_at([3, 1])   # ['d', 'b']
buf.count()          # 6: buffered items plus what was left
```

`len(buf)` is the number of buffered items only. `prefill(n)` reads until the
buffer holds `n` items or the input ends. `get_next()` returns `False` once
the input is exhausted, and the input is never read again after that.
`count()` reads the rest of the input without buffering it. Indexing accepts
integers and slices over the buffered items.

## What this package does not do

It is a library only: there is no command-line tool, and it offers no other
iterator adaptors beyond the ones listed above.

## Running the tests

```
pip install -e ".[test]"
pytest
```