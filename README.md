# cfkit

cfkit is a small set of building blocks for Python programs. It needs nothing outside the standard library.

## Modules

- `cfkit.binary` handles fixed-size binary values.
  - `ByteReader` and `ByteWriter` read and write integers (`get_u8` … `get_i64`, `put_u8` … `put_i64`) and floats (`get_float`, `get_double`, `put_float`, `put_double`) in native byte order.
  - A read past the end raises `EOFError`.
  - A write beyond the writer's capacity raises `OverflowError`.
  - `StreamReader` and `StreamWriter` read and write unsigned 8/16/32/64-bit values. They use network (big-endian) order by default and native order with `net=False`.
  - `swap16`, `swap32` and `swap64` reverse byte order.
- `cfkit.text` holds ASCII string helpers.
  - Comparison: `strcmp` and `stricmp`, each returning -1, 0 or 1.
  - Search: `strchr` and `strrchr`, each returning an index or `None`.
  - Changing text: `strip`, `capitalize`, `to_upper`, `to_lower` and `switch_case`.
  - `center(s, fill, total, size)` and `count_for`.
  - `SizedString` holds the first `length` characters of a text and offers `compare_raw`, `compare`, `reset` and `clear`.
- `cfkit.paths` works on the text of a path.
  - `append` joins two parts and rejects results over `PATH_MAX_SIZE` (256) characters.
  - `realpath` makes a path absolute and folds away `.`, `..` and doubled separators. It does not follow symbolic links.
  - `basename`, `dirname` and `isabs` also work on the text alone.
  - `getcwd`, `exists`, `isfile` and `isdir` ask the filesystem.
- `cfkit.version` parses versions such as `1.2.3`, `1.92a999` or `1b2` with `Version.parse` or `parse_version`.
  - Invalid text raises `ValueError`.
  - `Version` objects are ordered.
  - `compare_versions` returns -1, 0 or 1 and treats `None` as the smallest value.
- `cfkit.ringqueue` has two queues.
  - `BoundedQueue` is a FIFO queue of fixed size. It raises `QueueFull` and `QueueEmpty`.
  - `LiteQueue` is a double-ended queue whose `capacity` doubles when it fills.
- `cfkit.rbtree` provides `RBTree`, an ordered map built on a red-black tree.
  - It offers `insert`, `remove`, `get`, `first`, `last`, `items` and iteration in key order.
  - It also supports `in`, `len()` and item access with `[]`.
- `cfkit.vector` provides `Vector`, a double-ended sequence whose `capacity` doubles when it fills. It offers `reserve` and `resize`.
- `cfkit.sync` provides two threading helpers.
  - `RWLock` lets many readers or one writer hold it. It has blocking and `try_` methods, plus the `reading()` and `writing()` context managers.
  - `ThreadLocal` keeps one value per thread.
- `cfkit.tasks` provides `TaskQueue`.
  - A worker thread runs tasks from `post` at once and tasks from `post_delayed` after a delay in milliseconds.
  - `close()`, or leaving a `with` block, stops the worker. Tasks that have not yet run are dropped.
- `cfkit.timeutil` provides time helpers.
  - `DateTime.now()` gives the local date and time with a millisecond timestamp.
  - `DateTime.day_of_year()` gives the day number within the year.
  - `is_leap_year` and `sleep_ms` are also available.

## Install

```
pip install .
```

## Example

```python
from cfkit.binary import ByteReader, ByteWriter
from cfkit.version import parse_version

w = ByteWriter(1024)
w.put_i32(1234)
w.put_double(1.1111)

r = ByteReader(w.data())
assert r.get_i32() == 1234
assert r.get_double() == 1.1111
assert r.remaining() == 0

assert parse_version("1.92a999").prenum == 999
```

```python
from cfkit.tasks import TaskQueue
from cfkit.timeutil import sleep_ms

with TaskQueue("worker", 0) as q:
    q.post(print, "now")
    q.post_delayed(5, print, "later")
    sleep_ms(20)  # give the delayed task time to run before the queue closes
```

## What cfkit does not do

cfkit has no networking or socket wrappers, no shared memory, no logging, no hash table or linked list, and no configuration or JSON parsing. It provides no command-line program.

## Tests

```
pip install .[test]
pytest
```