"""Merge any number of sorted iterables into one sorted iterator."""

from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, List, Optional, TypeVar

T = TypeVar("T")

LessThan = Callable[[Any, Any], bool]


@dataclass
class _HeadTail:
    """The current first item of a sequence and the iterator holding the rest."""

    head: Any
    tail: Iterator[Any]

    @classmethod
    def from_iterable(cls, iterable: Iterable[Any]) -> Optional["_HeadTail"]:
        tail = iter(iterable)
        for head in tail:
            return cls(head, tail)
        return None

    def advance(self) -> tuple[bool, Any]:
        """Replace the head with the next item; return the old head if there was one."""
        for item in self.tail:
            old, self.head = self.head, item
            return True, old
        return False, None


def _sift_down(heap: List[_HeadTail], index: int, less_than: LessThan) -> None:
    size = len(heap)
    pos = index
    child = 2 * pos + 1
    while child + 1 < size:
        if less_than(heap[child + 1].head, heap[child].head):
            child += 1
        if not less_than(heap[child].head, heap[pos].head):
            return
        heap[pos], heap[child] = heap[child], heap[pos]
        pos = child
        child = 2 * pos + 1
    if child + 1 == size and less_than(heap[child].head, heap[pos].head):
        heap[pos], heap[child] = heap[child], heap[pos]


class KMergeBy(Iterator[T]):
    """Iterator merging several iterables according to ``less_than``.

    The first item of every input is read when the merger is created.
    """

    def __init__(self, iterables: Iterable[Iterable[T]], less_than: LessThan) -> None:
        self._less_than = less_than
        self._heap: List[_HeadTail] = [
            entry
            for entry in map(_HeadTail.from_iterable, iterables)
            if entry is not None
        ]
        for i in range(len(self._heap) // 2 - 1, -1, -1):
            _sift_down(self._heap, i, less_than)

    def __iter__(self) -> "KMergeBy[T]":
        return self

    def __next__(self) -> T:
        heap = self._heap
        if not heap:
            raise StopIteration
        advanced, result = heap[0].advance()
        if not advanced:
            last = heap.pop()
            if heap:
                result = heap[0].head
                heap[0] = last
            else:
                result = last.head
        _sift_down(heap, 0, self._less_than)
        return result

    def __repr__(self) -> str:
        return f"{type(self).__name__}(heads={[entry.head for entry in self._heap]!r})"


def kmerge_by(iterables: Iterable[Iterable[T]], less_than: LessThan) -> KMergeBy[T]:
    """Merge ``iterables`` using ``less_than(a, b)`` to decide which comes first."""
    return KMergeBy(iterables, less_than)


def kmerge(iterables: Iterable[Iterable[T]]) -> KMergeBy[T]:
    """Merge ascending ``iterables`` into a single ascending iterator."""
    return KMergeBy(iterables, operator.lt)