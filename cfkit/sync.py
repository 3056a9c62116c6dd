"""A reader-writer lock and a per-thread value slot."""

from __future__ import annotations

import threading
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any


class RWLock:
    """A lock that many readers may hold at once, or a single writer."""

    def __init__(self) -> None:
        self._cond = threading.Condition()
        self._readers = 0
        self._writer = False

    def read_lock(self) -> None:
        """Block until a shared (read) hold is acquired."""
        with self._cond:
            self._cond.wait_for(lambda: not self._writer)
            self._readers += 1

    def try_read_lock(self) -> bool:
        """Take a read hold if no writer has the lock; return whether it was taken."""
        with self._cond:
            if self._writer:
                return False
            self._readers += 1
            return True

    def read_unlock(self) -> None:
        """Release one read hold; raise RuntimeError if none is held."""
        with self._cond:
            if self._readers == 0:
                raise RuntimeError("read lock is not held")
            self._readers -= 1
            if self._readers == 0:
                self._cond.notify_all()

    def write_lock(self) -> None:
        """Block until the exclusive (write) hold is acquired."""
        with self._cond:
            self._cond.wait_for(lambda: not self._writer and self._readers == 0)
            self._writer = True

    def try_write_lock(self) -> bool:
        """Take the write hold if the lock is free; return whether it was taken."""
        with self._cond:
            if self._writer or self._readers:
                return False
            self._writer = True
            return True

    def write_unlock(self) -> None:
        """Release the write hold; raise RuntimeError if it is not held."""
        with self._cond:
            if not self._writer:
                raise RuntimeError("write lock is not held")
            self._writer = False
            self._cond.notify_all()

    @contextmanager
    def reading(self) -> Iterator[RWLock]:
        """Hold a read lock for the duration of a ``with`` block."""
        self.read_lock()
        try:
            yield self
        finally:
            self.read_unlock()

    @contextmanager
    def writing(self) -> Iterator[RWLock]:
        """Hold the write lock for the duration of a ``with`` block."""
        self.write_lock()
        try:
            yield self
        finally:
            self.write_unlock()


class ThreadLocal:
    """A slot holding a separate value for every thread; unset slots read as None."""

    def __init__(self) -> None:
        self._local = threading.local()

    def set(self, value: Any) -> None:
        """Store ``value`` for the calling thread."""
        self._local.value = value

    def get(self) -> Any:
        """The calling thread's value, or None if it never set one."""
        return getattr(self._local, "value", None)