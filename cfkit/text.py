"""ASCII string helpers and a length-bounded string type."""

from __future__ import annotations

from itertools import zip_longest

_SPACE = " \t\n\r\v\f"


def _lower(c: str) -> str:
    return chr(ord(c) + 32) if "A" <= c <= "Z" else c


def _upper(c: str) -> str:
    return chr(ord(c) - 32) if "a" <= c <= "z" else c


def _code(c: str) -> int:
    return ord(c) if c else 0


def strcmp(s1: str, s2: str) -> int:
    """Compare two strings, returning -1, 0 or 1."""
    for a, b in zip_longest(s1, s2, fillvalue=""):
        if a != b:
            return -1 if _code(a) < _code(b) else 1
    return 0


def stricmp(s1: str, s2: str) -> int:
    """Compare ignoring ASCII case; the sign comes from the original characters."""
    for a, b in zip_longest(s1, s2, fillvalue=""):
        if _lower(a) != _lower(b):
            return -1 if _code(a) < _code(b) else 1
    return 0


def strchr(s: str, c: str) -> int | None:
    """Index of the first ``c`` in ``s``, or None."""
    index = s.find(c) if c else -1
    return None if index < 0 else index


def strrchr(s: str, c: str) -> int | None:
    """Index of the last ``c`` in ``s``, or None."""
    index = s.rfind(c) if c else -1
    return None if index < 0 else index


def strip(s: str) -> str:
    """Remove whitespace from both ends."""
    return s.strip(_SPACE)


def capitalize(s: str) -> str:
    """Upper-case the first ASCII letter, leaving the rest untouched."""
    return _upper(s[0]) + s[1:] if s else s


def to_upper(s: str) -> str:
    return "".join(_upper(c) for c in s)


def to_lower(s: str) -> str:
    return "".join(_lower(c) for c in s)


def switch_case(s: str) -> str:
    """Swap the case of ASCII letters."""
    return "".join(_upper(c) if "a" <= c <= "z" else _lower(c) for c in s)


def center(s: str, fill: str, total: int, size: int | None = None) -> str:
    """Center ``s`` in a field of ``total`` characters padded with ``fill``.

    ``size`` is the capacity of the destination, counting a terminator; a
    result that would not fit raises ValueError.
    """
    if len(fill) != 1:
        raise ValueError("fill must be a single character")
    if size is not None and (len(s) + 1 > size or total + 1 > size):
        raise ValueError("destination too small")
    if total < len(s):
        raise ValueError("total is shorter than the string")
    left = (total - len(s)) // 2
    return fill * left + s + fill * (total - len(s) - left)


def count_for(s: str, c: str) -> int:
    """Count occurrences of ``c``; the terminator character counts once."""
    if c == "\0":
        return 1
    return s.count(c)


class SizedString:
    """A string holding an explicit number of characters from its source."""

    def __init__(self, text: str = "", length: int | None = None) -> None:
        self._text = ""
        if length is not None and length == 0:
            raise ValueError("length must be positive")
        self.reset(text, length)

    def reset(self, text: str, length: int | None = None) -> None:
        """Replace the content with the first ``length`` characters of ``text``."""
        if length is None:
            length = len(text)
        if length < 0 or length > len(text):
            raise ValueError("length out of range")
        self._text = text[:length]

    def clear(self) -> None:
        self._text = ""

    def compare_raw(self, other: str, length: int | None = None) -> int:
        """Compare with the first ``length`` characters of ``other``."""
        if length is None:
            length = len(other)
        rhs = other[:length]
        return (self._text > rhs) - (self._text < rhs)

    def compare(self, other: SizedString) -> int:
        return self.compare_raw(str(other))

    def __len__(self) -> int:
        return len(self._text)

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"SizedString({self._text!r})"