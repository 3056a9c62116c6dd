"""A double-ended vector whose capacity doubles when it fills up."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from typing import Any

DEFAULT_CAPACITY = 128


class Vector:
    """Double-ended sequence with an explicit, growing capacity.

    ``None`` cannot be stored, so it never stands for a missing item.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._items: deque[Any] = deque()

    def reserve(self, count: int) -> None:
        """Grow the capacity to at least ``count``; never shrinks it."""
        if count > self.capacity:
            self.capacity = count

    def resize(self, new_size: int, fill: Any) -> None:
        """Append ``fill`` until the vector holds ``new_size`` items.

        A vector already that long or longer is left as it is.
        """
        if new_size < 0:
            raise ValueError("new_size must not be negative")
        if len(self._items) < new_size and fill is None:
            raise ValueError("fill must not be None")
        self.reserve(new_size)
        while len(self._items) < new_size:
            self.push_back(fill)

    def _make_room(self, item: Any) -> None:
        if item is None:
            raise ValueError("item must not be None")
        if len(self._items) >= self.capacity:
            self.reserve(self.capacity * 2)

    def push_back(self, item: Any) -> None:
        self._make_room(item)
        self._items.append(item)

    def push_front(self, item: Any) -> None:
        self._make_room(item)
        self._items.appendleft(item)

    def pop_back(self) -> Any:
        """Remove and return the last item; raise IndexError if empty."""
        if not self._items:
            raise IndexError("pop from empty vector")
        return self._items.pop()

    def pop_front(self) -> Any:
        """Remove and return the first item; raise IndexError if empty."""
        if not self._items:
            raise IndexError("pop from empty vector")
        return self._items.popleft()

    def back(self) -> Any:
        if not self._items:
            raise IndexError("back of empty vector")
        return self._items[-1]

    def front(self) -> Any:
        if not self._items:
            raise IndexError("front of empty vector")
        return self._items[0]

    def clear(self) -> None:
        """Drop every item; the capacity is kept."""
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)