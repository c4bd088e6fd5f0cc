"""Thread-safe ordered set: a StandardSet behind a read-write lock.

The wrapper owns exactly one StandardSet and one ReadWriteLock. It
does not subclass StandardSet; every method takes the lock itself and
then delegates, so the locking rule for each operation is visible at
the method that needs it:

  - read lock (shared): contains, contains_all, size, slice
  - write lock (exclusive): add, add_all, drop, drop_all, clear,
    reset, reserve

The lock is held for exactly the delegated call and released by the
context manager even if that call raises.

slice() and clear() build their snapshot while the lock is still held.
The returned list is fresh storage, so a writer that runs right after
the lock is released cannot change what the caller got. clear() does
its capture and its reset under one write lock: no other thread can
observe or mutate the set between the two.
"""
from __future__ import annotations

from typing import Iterable

from ordset.concurrency.rwlock import ReadWriteLock
from ordset.sets.base import OrderedSet
from ordset.sets.standard_set import StandardSet
from ordset.sets.types import T


class ThreadsafeSet(OrderedSet[T]):
    """Ordered set safe to share between threads.

    Every call is linearizable with respect to other calls on the same
    instance. Nothing is promised across two different instances.

    Args:
        elements: optional initial members. Duplicates collapse.
    """

    def __init__(self, elements: Iterable[T] | None = None) -> None:
        self._contents: StandardSet[T] = StandardSet(elements)
        self._lock = ReadWriteLock()

    def add(self, *elements: T) -> None:
        with self._lock.write():
            self._contents.add(*elements)

    def drop(self, *elements: T) -> None:
        with self._lock.write():
            self._contents.drop(*elements)

    def add_all(self, elements: Iterable[T]) -> list[bool]:
        """Insert the whole batch under one write lock."""
        with self._lock.write():
            return self._contents.add_all(elements)

    def drop_all(self, elements: Iterable[T]) -> list[bool]:
        with self._lock.write():
            return self._contents.drop_all(elements)

    def contains(self, element: T) -> bool:
        with self._lock.read():
            return self._contents.contains(element)

    def contains_all(self, elements: Iterable[T]) -> list[bool]:
        """Answer the whole batch under one read lock.

        The flags describe a single point in time. Calling contains() in a
        loop would not: a writer could slip in between two lookups.
        """
        with self._lock.read():
            return self._contents.contains_all(elements)

    def size(self) -> int:
        with self._lock.read():
            return self._contents.size()

    def slice(self) -> list[T]:
        with self._lock.read():
            return self._contents.slice()

    def clear(self) -> list[T]:
        with self._lock.write():
            return self._contents.clear()

    def reset(self) -> None:
        with self._lock.write():
            self._contents.reset()

    def reserve(self, size_hint: int) -> None:
        with self._lock.write():
            self._contents.reserve(size_hint)
