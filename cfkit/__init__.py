"""Building blocks: binary I/O, string, path and version helpers, queues, a red-black tree, locks, a task queue and time utilities."""

__version__ = "1.0.0"