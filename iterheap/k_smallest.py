"""Select the k smallest items of an iterable, in ascending order."""

from __future__ import annotations

from collections import deque
from functools import cmp_to_key
from itertools import islice
from typing import Any, Callable, Iterable, List, Optional, TypeVar

T = TypeVar("T")

Comparator = Callable[[Any, Any], int]

_MISSING = object()


def _comparator_from_key(key: Optional[Callable[[Any], Any]]) -> Comparator:
    if key is None:

        def compare_plain(a: Any, b: Any) -> int:
            return (a > b) - (a < b)

        return compare_plain

    def compare(a: Any, b: Any) -> int:
        ka, kb = key(a), key(b)
        return (ka > kb) - (ka < kb)

    return compare


def _exhaust(iterator) -> None:
    deque(iterator, maxlen=0)


def _check_k(k: int) -> None:
    if k < 0:
        raise ValueError(f"k must be non-negative, got {k}")


def _sift_down(heap: list, size: int, is_less: Callable[[Any, Any], bool], origin: int) -> None:
    """Move ``heap[origin]`` away from the root, keeping larger items on top."""
    while origin < size:
        left, right = 2 * origin + 1, 2 * origin + 2
        if left >= size:
            return
        if right < size and is_less(heap[left], heap[right]):
            child = right
        else:
            child = left
        if not is_less(heap[origin], heap[child]):
            return
        heap[origin], heap[child] = heap[child], heap[origin]
        origin = child


def k_smallest_by(iterable: Iterable[T], k: int, comparator: Comparator) -> List[T]:
    """Return the ``k`` smallest items by ``comparator`` (negative, zero or positive), ascending.

    The whole iterable is consumed.
    """
    _check_k(k)
    iterator = iter(iterable)
    if k == 0:
        _exhaust(iterator)
        return []
    if k == 1:
        best: Any = _MISSING
        for item in iterator:
            if best is _MISSING or comparator(item, best) < 0:
                best = item
        return [] if best is _MISSING else [best]

    def is_less(a: Any, b: Any) -> bool:
        return comparator(a, b) < 0

    storage = list(islice(iterator, k))
    size = len(storage)
    for i in range(size // 2, -1, -1):
        _sift_down(storage, size, is_less, i)

    for value in iterator:
        if is_less(value, storage[0]):
            storage[0] = value
            _sift_down(storage, size, is_less, 0)

    # Pop the largest to the tail repeatedly so the result ends up ascending.
    while size > 1:
        last = size - 1
        storage[0], storage[last] = storage[last], storage[0]
        size = last
        _sift_down(storage, size, is_less, 0)

    return storage


def k_smallest(iterable: Iterable[T], k: int, key: Optional[Callable[[T], Any]] = None) -> List[T]:
    """Return the ``k`` smallest items (optionally by ``key``), ascending."""
    return k_smallest_by(iterable, k, _comparator_from_key(key))


def k_smallest_relaxed_by(iterable: Iterable[T], k: int, comparator: Comparator) -> List[T]:
    """Like :func:`k_smallest_by`, but buffers up to ``2 * k`` items for speed."""
    _check_k(k)
    iterator = iter(iterable)
    if k == 0:
        _exhaust(iterator)
        return []

    sort_key = cmp_to_key(comparator)
    buf = list(islice(iterator, 2 * k))
    if len(buf) < k:
        buf.sort(key=sort_key)
        return buf

    buf.sort(key=sort_key)
    del buf[k:]

    for value in iterator:
        if comparator(value, buf[k - 1]) >= 0:
            continue
        buf.append(value)
        if len(buf) == 2 * k:
            buf.sort(key=sort_key)
            del buf[k:]

    buf.sort(key=sort_key)
    del buf[k:]
    return buf


def k_smallest_relaxed(
    iterable: Iterable[T], k: int, key: Optional[Callable[[T], Any]] = None
) -> List[T]:
    """Return the ``k`` smallest items (optionally by ``key``), ascending, using a larger buffer."""
    return k_smallest_relaxed_by(iterable, k, _comparator_from_key(key))