"""Construct a set variant from a single thread-safety flag.

    s: OrderedSet[int] = new()                       # StandardSet
    s: OrderedSet[int] = new(thread_safe=True)       # ThreadsafeSet
    s = new_from_slice([3, 1, 2, 2, 1])              # 3 members

The element type is a static type parameter only. Nothing is checked
at runtime; an unhashable element fails on add, an unorderable one
fails when the set is sorted for export.
"""
from __future__ import annotations

import logging
from typing import Iterable

from ordset.sets.base import OrderedSet
from ordset.sets.standard_set import StandardSet
from ordset.sets.threadsafe_set import ThreadsafeSet
from ordset.sets.types import T

log = logging.getLogger(__name__)


def new(thread_safe: bool = False) -> OrderedSet[T]:
    """Return an empty ThreadsafeSet if thread_safe, else a StandardSet."""
    result: OrderedSet[T] = ThreadsafeSet() if thread_safe else StandardSet()
    log.debug("Created empty %s", type(result).__name__)
    return result


def new_from_slice(elements: Iterable[T], thread_safe: bool = False) -> OrderedSet[T]:
    """Same selection as new(), pre-populated from elements.

    Duplicates in elements collapse to one membership. elements may be
    any iterable, including a generator; it is consumed once.
    """
    result: OrderedSet[T] = (
        ThreadsafeSet(elements) if thread_safe else StandardSet(elements)
    )
    # size() takes the read lock on a ThreadsafeSet; skip it unless it is logged
    if log.isEnabledFor(logging.DEBUG):
        log.debug("Created %s with %d members", type(result).__name__, result.size())
    return result
