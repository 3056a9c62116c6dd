"""Path helpers that work on the text of a path rather than the filesystem."""

from __future__ import annotations

import os
from enum import Enum, auto

PATH_MAX_SIZE = 256
"""Longest path, in characters, that ``append`` and ``realpath`` accept."""

_SEPARATORS = "\\/"


class _Scan(Enum):
    PLAIN = auto()
    SLASH = auto()
    SLASH_DOT = auto()
    SLASH_DOT_DOT = auto()


def append(path: str, part: str) -> str:
    """Join ``part`` onto ``path`` with a separator between them.

    Raises ValueError if the result would exceed ``PATH_MAX_SIZE``.
    """
    if len(path) + len(part) > PATH_MAX_SIZE:
        raise ValueError(f"path longer than {PATH_MAX_SIZE} characters")
    if path and not path.endswith(os.sep):
        path += os.sep
    return path + part


def getcwd() -> str:
    """The current working directory."""
    return os.getcwd()


def realpath(path: str) -> str:
    """Make ``path`` absolute and fold away ``.``, ``..`` and repeated separators.

    Only the text is processed; symbolic links are not followed. A ``.`` or
    ``..`` that ends the path is dropped. Raises ValueError if a ``..``
    climbs above the root or the path is too long.
    """
    if isabs(path):
        if len(path) + 1 > PATH_MAX_SIZE:
            raise ValueError(f"path longer than {PATH_MAX_SIZE} characters")
        full = path
    else:
        full = append(getcwd(), path)

    sep = os.sep
    out: list[str] = []
    state = _Scan.PLAIN
    for ch in full:
        if state is _Scan.PLAIN:
            if ch == sep:
                state = _Scan.SLASH
            out.append(ch)
        elif state is _Scan.SLASH:
            if ch == sep:
                continue
            if ch == ".":
                state = _Scan.SLASH_DOT
            else:
                state = _Scan.PLAIN
                out.append(ch)
        elif state is _Scan.SLASH_DOT:
            if ch == sep:
                state = _Scan.SLASH
            elif ch == ".":
                state = _Scan.SLASH_DOT_DOT
            else:
                state = _Scan.PLAIN
                out.extend((".", ch))
        else:
            if ch == sep:
                index = len(out) - 2
                while index >= 0 and out[index] != sep:
                    index -= 1
                if index < 0:
                    raise ValueError(f"{path!r} climbs above the root")
                del out[index + 1:]
                state = _Scan.SLASH
            else:
                state = _Scan.PLAIN
                out.extend(("..", ch))
    return "".join(out)


def basename(path: str) -> str:
    """The last component of ``path``, ignoring trailing separators."""
    stripped = path.rstrip(_SEPARATORS)
    last = max(stripped.rfind(s) for s in _SEPARATORS)
    return stripped[last + 1:]


def dirname(path: str) -> str:
    """Everything before the last component of ``path``.

    The separator ending the directory part is not included, so a path with
    a single component under the root gives an empty string.
    """
    stripped = path.rstrip(_SEPARATORS)
    if len(stripped) <= 1:
        return ""
    stop = max(0, max(stripped.rfind(s) for s in _SEPARATORS))
    return stripped[:stop]


def exists(path: str) -> bool:
    return os.path.exists(path)


def isfile(path: str) -> bool:
    return os.path.isfile(path)


def isdir(path: str) -> bool:
    return os.path.isdir(path)


def isabs(path: str) -> bool:
    """Whether ``path`` is absolute: a drive letter on Windows, a leading slash elsewhere."""
    if os.name == "nt":
        return len(path) >= 2 and path[0].isascii() and path[0].isalpha() and path[1] == ":"
    return path.startswith("/")