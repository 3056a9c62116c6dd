"""A fixed-size FIFO queue and a growable double-ended queue."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from typing import Any

LITE_QUEUE_INIT_CAPACITY = 20
LITE_QUEUE_MAX_CAPACITY = 65535


class QueueFull(Exception):
    """Raised when adding to a queue that has no room."""


class QueueEmpty(Exception):
    """Raised when taking from a queue that holds nothing."""


class BoundedQueue:
    """FIFO queue holding at most ``max_size`` items."""

    def __init__(self, max_size: int) -> None:
        if max_size <= 0:
            raise ValueError("max_size must be positive")
        self.max_size = max_size
        self._items: deque[Any] = deque()

    def enqueue(self, item: Any) -> None:
        """Add ``item`` at the tail; raise QueueFull if there is no room."""
        if item is None:
            raise ValueError("item must not be None")
        if len(self._items) >= self.max_size:
            raise QueueFull("queue is full")
        self._items.append(item)

    def dequeue(self) -> Any:
        """Remove and return the head item; raise QueueEmpty if there is none."""
        if not self._items:
            raise QueueEmpty("queue is empty")
        return self._items.popleft()

    def __len__(self) -> int:
        return len(self._items)


class LiteQueue:
    """Double-ended queue whose capacity doubles whenever it fills up."""

    def __init__(self, capacity: int = LITE_QUEUE_INIT_CAPACITY) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        if capacity == 0:
            capacity = LITE_QUEUE_INIT_CAPACITY
        self.capacity = min(capacity, LITE_QUEUE_MAX_CAPACITY)
        self._items: deque[Any] = deque()

    def _make_room(self, item: Any) -> None:
        if item is None:
            raise ValueError("item must not be None")
        if len(self._items) == self.capacity:
            self.capacity *= 2

    def front(self) -> Any:
        """The item at the front; raise IndexError if empty."""
        if not self._items:
            raise IndexError("front of empty queue")
        return self._items[0]

    def back(self) -> Any:
        """The item at the back; raise IndexError if empty."""
        if not self._items:
            raise IndexError("back of empty queue")
        return self._items[-1]

    def push_back(self, item: Any) -> None:
        self._make_room(item)
        self._items.append(item)

    def push_front(self, item: Any) -> None:
        self._make_room(item)
        self._items.appendleft(item)

    def pop_front(self) -> Any:
        if not self._items:
            raise IndexError("pop from empty queue")
        return self._items.popleft()

    def pop_back(self) -> Any:
        if not self._items:
            raise IndexError("pop from empty queue")
        return self._items.pop()

    def clear(self) -> None:
        """Drop every item; the capacity is kept."""
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)