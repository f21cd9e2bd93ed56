"""A buffer that pulls items from an iterator only when asked."""

from __future__ import annotations

from typing import Any, Generic, Iterable, List, Sequence, TypeVar, overload

T = TypeVar("T")


class LazyBuffer(Generic[T]):
    """Holds the items read so far from an iterator, reading more on demand.

    Once the iterator is exhausted it is never read again.
    """

    def __init__(self, iterable: Iterable[T]) -> None:
        self._iterator = iter(iterable)
        self._exhausted = False
        self._buffer: List[T] = []

    def __len__(self) -> int:
        return len(self._buffer)

    def _pull(self) -> tuple[bool, Any]:
        if self._exhausted:
            return False, None
        try:
            return True, next(self._iterator)
        except StopIteration:
            self._exhausted = True
            return False, None

    def count(self) -> int:
        """Return the buffered count plus what remains, consuming the rest of the iterator."""
        remaining = 0
        while self._pull()[0]:
            remaining += 1
        return len(self._buffer) + remaining

    def get_next(self) -> bool:
        """Read one more item into the buffer; return whether there was one."""
        found, item = self._pull()
        if found:
            self._buffer.append(item)
        return found

    def prefill(self, length: int) -> None:
        """Read items until the buffer holds ``length`` of them or the input ends."""
        while len(self._buffer) < length and self.get_next():
            pass

    def get_at(self, indices: Sequence[int]) -> List[T]:
        """Return the buffered items at ``indices``, in that order."""
        return [self._buffer[i] for i in indices]

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> List[T]: ...

    def __getitem__(self, index):
        return self._buffer[index]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._buffer!r})"