"""Parsing and comparison of ``major.minor.patch`` versions with a/b pre-release tags."""

from __future__ import annotations

from dataclasses import dataclass

_PRETAGS = "ab"


@dataclass(frozen=True, order=True)
class Version:
    """A version such as ``1.2.3``, ``1.2a4`` or ``1b2``.

    ``pretag`` is ``""``, ``"a"`` or ``"b"``. Ordering compares the fields in
    turn, so a version without a tag sorts before a tagged one.
    """

    major: int = 0
    minor: int = 0
    patch: int = 0
    pretag: str = ""
    prenum: int = 0

    @classmethod
    def parse(cls, text: str) -> Version:
        """Parse ``text``; raise ValueError if it is not a valid version."""
        numbers = [0, 0, 0, 0, 0]
        pretag = ""
        num = 0
        digits = 0
        index = 0
        for ch in text + "\0":
            if not ("0" <= ch <= "9" or ch in "." or ch in _PRETAGS or ch == "\0"):
                raise ValueError(f"invalid character {ch!r} in version {text!r}")
            if index >= 5:
                raise ValueError(f"too many parts in version {text!r}")
            if ch in ".\0":
                if digits == 0:
                    raise ValueError(f"empty part in version {text!r}")
                numbers[index] = num
                num = digits = 0
                index += 1
                if ch == "\0":
                    break
            elif ch in _PRETAGS:
                if index > 3:
                    raise ValueError(f"repeated pre-release tag in {text!r}")
                if digits == 0:
                    raise ValueError(f"empty part in version {text!r}")
                numbers[index] = num
                pretag = ch
                num = digits = 0
                index = 4
            else:
                if index == 3:
                    raise ValueError(f"more than three numbers in version {text!r}")
                num = num * 10 + int(ch)
                digits += 1
        return cls(numbers[0], numbers[1], numbers[2], pretag, numbers[4])

    def compare(self, other: Version | None) -> int:
        """Return 1, 0 or -1 as ``self`` is greater than, equal to or less than ``other``."""
        return compare_versions(self, other)

    def __str__(self) -> str:
        text = f"{self.major}.{self.minor}.{self.patch}"
        if self.pretag:
            text += f"{self.pretag}{self.prenum}"
        return text


def parse_version(text: str) -> Version:
    return Version.parse(text)


def compare_versions(v1: Version | None, v2: Version | None) -> int:
    """Three-way comparison in which a missing version is the smallest."""
    if v1 is None and v2 is None:
        return 0
    if v1 is None:
        return -1
    if v2 is None:
        return 1
    return (v1 > v2) - (v1 < v2)