"""Wall-clock date and time, leap years, and millisecond sleeps."""

from __future__ import annotations

import time
from dataclasses import dataclass

_MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_leap_year(year: int) -> bool:
    """Whether ``year`` has 29 days in February."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def sleep_ms(ms: int) -> None:
    """Sleep for ``ms`` milliseconds."""
    if ms < 0:
        raise ValueError("ms must not be negative")
    time.sleep(ms / 1000.0)


@dataclass
class DateTime:
    """A broken-down local date and time.

    ``week_day`` counts from Sunday as 0; ``timestamp`` is milliseconds since
    the Unix epoch.
    """

    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0
    second: int = 0
    millisecond: int = 0
    week_day: int = 0
    utc: bool = True
    timestamp: int = 0

    @classmethod
    def now(cls) -> DateTime:
        """The current local date and time."""
        stamp_ms = time.time_ns() // 1_000_000
        local = time.localtime(stamp_ms // 1000)
        return cls(
            year=local.tm_year,
            month=local.tm_mon,
            day=local.tm_mday,
            hour=local.tm_hour,
            minute=local.tm_min,
            second=local.tm_sec,
            millisecond=stamp_ms % 1000,
            week_day=(local.tm_wday + 1) % 7,
            utc=True,
            timestamp=stamp_ms,
        )

    def day_of_year(self) -> int:
        """Day number within the year, 1 for January 1st."""
        if not 1 <= self.month <= 12:
            raise ValueError(f"month out of range: {self.month}")
        days = sum(_MONTH_DAYS[: self.month - 1]) + self.day
        if self.month > 2 and is_leap_year(self.year):
            days += 1
        return days