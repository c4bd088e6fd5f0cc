"""Synchronization primitives used by the thread-safe set."""
from ordset.concurrency.rwlock import ReadWriteLock

__all__ = [
    "ReadWriteLock",
]
