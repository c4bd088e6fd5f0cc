"""Abstract base for ordered sets.

StandardSet and ThreadsafeSet both implement this interface. Callers
pick one through the factory and never need to know which they got:
swapping in the thread-safe variant changes no call sites.

Every export (slice, clear, iteration) comes back in ascending order
with no duplicates.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, Iterable, Iterator

from ordset.sets.types import T


class OrderedSet(ABC, Generic[T]):
    """Interface that both the standard and thread-safe sets implement."""

    @abstractmethod
    def add(self, *elements: T) -> None:
        """Insert each element that is not already a member."""
        ...

    @abstractmethod
    def drop(self, *elements: T) -> None:
        """Remove each element that is a member. Absent elements are ignored."""
        ...

    @abstractmethod
    def add_all(self, elements: Iterable[T]) -> list[bool]:
        """Insert each element; one flag per input, True where it was new.

        A repeat inside the same batch reports False, since the earlier
        occurrence already inserted it.
        """
        ...

    @abstractmethod
    def drop_all(self, elements: Iterable[T]) -> list[bool]:
        """Remove each element; one flag per input, True where it was a member."""
        ...

    @abstractmethod
    def contains(self, element: T) -> bool:
        """True if element is currently a member."""
        ...

    @abstractmethod
    def contains_all(self, elements: Iterable[T]) -> list[bool]:
        """One membership flag per input element, in input order."""
        ...

    @abstractmethod
    def size(self) -> int:
        """Number of members."""
        ...

    @abstractmethod
    def slice(self) -> list[T]:
        """Sorted copy of all members. Later mutation does not touch it."""
        ...

    @abstractmethod
    def clear(self) -> list[T]:
        """Empty the set and return the sorted members it held."""
        ...

    @abstractmethod
    def reset(self) -> None:
        """Empty the set without building a snapshot."""
        ...

    @abstractmethod
    def reserve(self, size_hint: int) -> None:
        """Capacity hint. Never changes membership or order."""
        ...

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, element: object) -> bool:
        return self.contains(element)  # type: ignore[arg-type]

    def __iter__(self) -> Iterator[T]:
        # Iterate a snapshot so callers can mutate the set inside the loop.
        return iter(self.slice())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.slice()!r})"
