"""A worker thread that runs posted tasks, immediately or after a delay."""

from __future__ import annotations

import heapq
import itertools
import logging
import threading
import time
from collections import deque
from collections.abc import Callable
from typing import Any

_log = logging.getLogger(__name__)

_Task = tuple[Callable[..., Any], tuple[Any, ...]]


class TaskQueue:
    """Runs tasks one at a time on a dedicated thread.

    Immediate tasks run in the order they were posted. Delayed tasks become
    runnable once their delay has passed. Closing the queue stops the worker;
    tasks still waiting at that point are dropped.
    """

    def __init__(self, name: str = "task-queue", priority: int = 0) -> None:
        self.name = name
        self.priority = priority
        self._cond = threading.Condition()
        self._ready: deque[_Task] = deque()
        self._delayed: list[tuple[float, int, Callable[..., Any], tuple[Any, ...]]] = []
        self._seq = itertools.count()
        self._closed = False
        self._thread = threading.Thread(target=self._run, name=name, daemon=True)
        self._thread.start()

    def _next_task(self) -> _Task | None:
        with self._cond:
            while True:
                if self._closed:
                    return None
                now = time.monotonic()
                while self._delayed and self._delayed[0][0] <= now:
                    _, _, func, args = heapq.heappop(self._delayed)
                    self._ready.append((func, args))
                if self._ready:
                    return self._ready.popleft()
                timeout = self._delayed[0][0] - now if self._delayed else None
                self._cond.wait(timeout)

    def _run(self) -> None:
        while (task := self._next_task()) is not None:
            func, args = task
            try:
                func(*args)
            except Exception:
                _log.exception("task %r raised", func)

    def post(self, func: Callable[..., Any], *args: Any) -> None:
        """Queue ``func(*args)`` to run as soon as possible."""
        with self._cond:
            if self._closed:
                raise RuntimeError("task queue is closed")
            self._ready.append((func, args))
            self._cond.notify()

    def post_delayed(self, delay_ms: int, func: Callable[..., Any], *args: Any) -> None:
        """Queue ``func(*args)`` to run no sooner than ``delay_ms`` milliseconds from now."""
        with self._cond:
            if self._closed:
                raise RuntimeError("task queue is closed")
            due = time.monotonic() + delay_ms / 1000.0
            heapq.heappush(self._delayed, (due, next(self._seq), func, args))
            self._cond.notify()

    def close(self) -> None:
        """Stop the worker and wait for it to finish its current task."""
        with self._cond:
            self._closed = True
            self._ready.clear()
            self._delayed.clear()
            self._cond.notify_all()
        if self._thread is not threading.current_thread():
            self._thread.join()

    def __enter__(self) -> TaskQueue:
        return self

    def __exit__(self, exc_type: Any, exc: Any, tb: Any) -> None:
        self.close()