"""Read-write lock guarding a set's backing storage.

Many threads may hold the lock in read mode at once; a writer holds it
alone. Built on threading.Condition with a reader count and a waiting
writer count.

Writer preference: once a writer is queued, new readers wait behind it.
A set that is polled constantly with contains()/size() would otherwise
never let add() or clear() through.

Usage:
    lock = ReadWriteLock()

    with lock.read():
        present = element in members     # shared with other readers

    with lock.write():
        members.add(element)             # exclusive

The lock is not re-entrant. A thread that already holds it (in either
mode) must not acquire it again.
"""
from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Iterator


class ReadWriteLock:
    """Reader-writer lock with writer preference."""

    def __init__(self) -> None:
        self._readers: int = 0
        self._writers_waiting: int = 0
        self._writer_active: bool = False
        self._cond = threading.Condition(threading.Lock())

    @contextmanager
    def read(self) -> Iterator[None]:
        """Hold the lock in shared mode for the body of the with-block."""
        self.acquire_read()
        try:
            yield
        finally:
            self.release_read()

    @contextmanager
    def write(self) -> Iterator[None]:
        """Hold the lock in exclusive mode for the body of the with-block."""
        self.acquire_write()
        try:
            yield
        finally:
            self.release_write()

    def acquire_read(self) -> None:
        with self._cond:
            while self._writer_active or self._writers_waiting > 0:
                self._cond.wait()
            self._readers += 1

    def release_read(self) -> None:
        with self._cond:
            if self._readers == 0:
                raise RuntimeError("release_read() called without a held read lock")
            self._readers -= 1
            if self._readers == 0:
                self._cond.notify_all()

    def acquire_write(self) -> None:
        with self._cond:
            self._writers_waiting += 1
            try:
                while self._writer_active or self._readers > 0:
                    self._cond.wait()
            except BaseException:
                # Interrupted while queued: readers blocked on us can go.
                self._writers_waiting -= 1
                self._cond.notify_all()
                raise
            self._writers_waiting -= 1
            self._writer_active = True

    def release_write(self) -> None:
        with self._cond:
            if not self._writer_active:
                raise RuntimeError("release_write() called without a held write lock")
            self._writer_active = False
            self._cond.notify_all()

    @property
    def readers(self) -> int:
        """Number of threads currently holding the read lock."""
        with self._cond:
            return self._readers

    @property
    def writer_active(self) -> bool:
        with self._cond:
            return self._writer_active
