"""Unsynchronized ordered set backed by a Python set.

Membership lives in a plain ``set``: add, drop and contains are average
O(1). Ordering is not maintained on insert. slice() and clear() copy
the members out and sort them, O(n log n), which keeps the mutation
path as cheap as the builtin.

No locking at all. A StandardSet must be owned by one thread, or
guarded externally. Sharing one across threads without a guard is a
caller bug that this class does not detect. Use ThreadsafeSet when
several threads need the same set.
"""
from __future__ import annotations

import logging
from typing import Iterable

from ordset.sets.base import OrderedSet
from ordset.sets.types import T

log = logging.getLogger(__name__)


class StandardSet(OrderedSet[T]):
    """Single-owner ordered set.

    Args:
        elements: optional initial members. Duplicates collapse.
    """

    def __init__(self, elements: Iterable[T] | None = None) -> None:
        self._contents: set[T] = set(elements) if elements is not None else set()

    def add(self, *elements: T) -> None:
        self._contents.update(elements)

    def drop(self, *elements: T) -> None:
        for element in elements:
            self._contents.discard(element)

    def add_all(self, elements: Iterable[T]) -> list[bool]:
        contents = self._contents
        added = []
        for element in elements:
            if element in contents:
                added.append(False)
            else:
                contents.add(element)
                added.append(True)
        return added

    def drop_all(self, elements: Iterable[T]) -> list[bool]:
        contents = self._contents
        dropped = []
        for element in elements:
            if element in contents:
                contents.remove(element)
                dropped.append(True)
            else:
                dropped.append(False)
        return dropped

    def contains(self, element: T) -> bool:
        return element in self._contents

    def contains_all(self, elements: Iterable[T]) -> list[bool]:
        contents = self._contents
        return [element in contents for element in elements]

    def size(self) -> int:
        return len(self._contents)

    def slice(self) -> list[T]:
        return sorted(self._contents)

    def clear(self) -> list[T]:
        """Return the sorted members and start over with empty storage.

        The snapshot is taken before the reset, so if sorting raises
        (unorderable members) the set is left untouched.
        """
        snapshot = self.slice()
        self._contents = set()
        return snapshot

    def reset(self) -> None:
        self._contents = set()

    def reserve(self, size_hint: int) -> None:
        """Rebuild the backing set around the current members.

        CPython's set has no capacity knob; the rebuild compacts storage
        left sparse by earlier drops, which is all a hint can buy here.
        """
        if size_hint < 0:
            raise ValueError("size_hint must be non-negative")
        log.debug("Rebuilding set storage: %d members, hint %d", len(self._contents), size_hint)
        self._contents = set(self._contents)
