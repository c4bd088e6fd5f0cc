"""Ordered sets: single-owner and thread-safe variants behind one interface.

  - OrderedSet: the abstract interface both variants implement
  - StandardSet: hash-set backed, no locking, one owner
  - ThreadsafeSet: StandardSet wrapped in a ReadWriteLock
  - new / new_from_slice: pick a variant with one boolean
"""
from ordset.sets.base import OrderedSet
from ordset.sets.factory import new, new_from_slice
from ordset.sets.standard_set import StandardSet
from ordset.sets.threadsafe_set import ThreadsafeSet
from ordset.sets.types import Ordered

__all__ = [
    "OrderedSet",
    "Ordered",
    "StandardSet",
    "ThreadsafeSet",
    "new",
    "new_from_slice",
]
